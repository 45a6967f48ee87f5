"""
TorusSQL command-line compiler.

Compiles a single statement and prints its bytecode, lists tokens, or
decodes bytecode given as hex.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from torussql.compiler import (Bytecode, CompileOptions, Lexer, TorusSQLError,
                               compile_file, compile_sql)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="torussql", description="TorusSQL compiler")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    compile_cmd = sub.add_parser("compile", help="Compile one statement to bytecode")
    source = compile_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("sql", nargs="?", help="Statement text")
    source.add_argument("--file", type=Path, default=None, help="Read the statement from a file")
    compile_cmd.add_argument(
        "--format",
        choices=("hex", "bytes", "words"),
        default="hex",
        help="Output format for the bytecode",
    )
    compile_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Require a terminating ';'",
    )

    tokens_cmd = sub.add_parser("tokens", help="Print the token stream of a statement")
    tokens_cmd.add_argument("sql", help="Statement text")

    decode_cmd = sub.add_parser("decode", help="Decode bytecode given as hex")
    decode_cmd.add_argument("hex", help="Bytecode as a hex string")
    return parser.parse_args(argv)


def _format_bytecode(bytecode: Bytecode, fmt: str) -> str:
    if fmt == "bytes":
        return bytecode.hex(" ")
    if fmt == "words":
        return " ".join(f"0x{int(word):08X}" for word in bytecode.pack_words())
    return bytecode.hex()


def _compile(args: argparse.Namespace) -> int:
    options = CompileOptions(require_semicolon=args.strict)
    if args.file is not None:
        bytecode = compile_file(str(args.file), options)
    else:
        bytecode = compile_sql(args.sql, options)
    print(_format_bytecode(bytecode, args.format))
    return 0


def _tokens(args: argparse.Namespace) -> int:
    for token in Lexer(args.sql).tokenize():
        print(repr(token))
    return 0


def _decode(args: argparse.Namespace) -> int:
    decoded = Bytecode.from_hex(args.hex).decode()
    print(f"language_type: {decoded.language_type.name}")
    print(f"kind: {decoded.kind.name}")
    print(f"operand: {decoded.text!r}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {"compile": _compile, "tokens": _tokens, "decode": _decode}
    try:
        return handlers[args.command](args)
    except (TorusSQLError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

"""
TorusSQL Bytecode Format

Defines the statement header tables and the compiled bytecode container.

Layout of a compiled statement:

    offset 0   language type tag (u8)
    offset 1   statement kind tag (u8)
    offset 2   operand length (u8)
    offset 3.. operand bytes (UTF-8)
"""

from enum import IntEnum
from dataclasses import dataclass, field
from typing import NamedTuple, Optional
import numpy as np

from .ast import (ASTVisitor, CreateDatabaseStmt, LanguageType, Statement,
                  MAX_OPERAND_LENGTH)


HEADER_SIZE = 2


class StatementKind(IntEnum):
    """Statement kind tags."""

    CREATE_DATABASE = 0x01


# Language type tags
LANGUAGE_TYPE_CODES = {
    LanguageType.DDL: 0x01,
    LanguageType.DML: 0x02,
    LanguageType.DCL: 0x03,
    LanguageType.TCL: 0x04,
    LanguageType.DQL: 0x05,
    LanguageType.VENDOR: 0x06,
}

LANGUAGE_TYPES_BY_CODE = {code: lt for lt, code in LANGUAGE_TYPE_CODES.items()}


def language_type_to_bytecode(language_type: LanguageType) -> int:
    """Get the header tag for a language type."""
    return LANGUAGE_TYPE_CODES[language_type]


def bytecode_to_language_type(byte: int) -> Optional[LanguageType]:
    """Get the language type for a header tag, or None if unknown."""
    return LANGUAGE_TYPES_BY_CODE.get(byte)


class _StatementKindResolver(ASTVisitor):
    """Maps each statement node to its kind tag."""

    def visit_create_database(self, stmt: CreateDatabaseStmt) -> StatementKind:
        return StatementKind.CREATE_DATABASE


_KIND_RESOLVER = _StatementKindResolver()


def statement_to_bytecode(statement: Statement) -> int:
    """Get the header tag identifying a statement's kind."""
    return int(statement.accept(_KIND_RESOLVER))


class DecodedStatement(NamedTuple):
    """A statement read back from its wire encoding."""

    language_type: LanguageType
    kind: StatementKind
    operand: bytes

    @property
    def text(self) -> str:
        return self.operand.decode('utf-8')


@dataclass
class Bytecode:
    """Container for compiled TorusSQL bytecode."""

    code: bytearray = field(default_factory=bytearray)

    def __len__(self) -> int:
        return len(self.code)

    def __bytes__(self) -> bytes:
        return bytes(self.code)

    def __iter__(self):
        return iter(self.code)

    def emit_byte(self, byte: int) -> int:
        """Emit a raw byte."""
        offset = len(self.code)
        self.code.append(byte & 0xFF)
        return offset

    def emit_header(self, language_type: LanguageType, kind: int) -> int:
        """Emit the two-byte statement header."""
        offset = self.emit_byte(language_type_to_bytecode(language_type))
        self.emit_byte(kind)
        return offset

    def emit_operand(self, data: bytes) -> int:
        """Emit a length-prefixed operand."""
        if len(data) > MAX_OPERAND_LENGTH:
            raise ValueError(f"Operand too large: {len(data)} bytes")

        offset = self.emit_byte(len(data))
        self.code.extend(data)
        return offset

    def extend(self, other: 'Bytecode') -> None:
        """Append another buffer's bytes."""
        self.code.extend(other.code)

    def copy(self) -> 'Bytecode':
        return Bytecode(bytearray(self.code))

    def hex(self, sep: str = '') -> str:
        """Render the buffer as hexadecimal."""
        if sep:
            return self.code.hex(sep)
        return self.code.hex()

    def to_array(self) -> np.ndarray:
        """Return the buffer as a uint8 array."""
        return np.frombuffer(bytes(self.code), dtype=np.uint8).copy()

    def pack_words(self) -> np.ndarray:
        """Pack the buffer into little-endian uint32 words."""
        # Pad to multiple of 4
        padded_len = ((len(self.code) + 3) // 4) * 4
        padded_code = bytes(self.code) + b'\x00' * (padded_len - len(self.code))

        return np.frombuffer(padded_code, dtype='<u4').astype(np.uint32)

    def decode(self) -> DecodedStatement:
        """
        Read a single compiled statement back from the buffer.

        Raises:
            ValueError: If the header is unknown or the operand length
                does not match the bytes that follow it
        """
        if len(self.code) < HEADER_SIZE + 1:
            raise ValueError("Bytecode too short for a statement header")

        language_type = bytecode_to_language_type(self.code[0])
        if language_type is None:
            raise ValueError(f"Unknown language type tag: 0x{self.code[0]:02X}")

        try:
            kind = StatementKind(self.code[1])
        except ValueError:
            raise ValueError(f"Unknown statement kind tag: 0x{self.code[1]:02X}") from None

        length = self.code[HEADER_SIZE]
        operand = bytes(self.code[HEADER_SIZE + 1:])
        if len(operand) != length:
            raise ValueError(
                f"Operand length mismatch: declared {length}, found {len(operand)}")

        return DecodedStatement(language_type, kind, operand)

    @classmethod
    def from_hex(cls, text: str) -> 'Bytecode':
        """Build a buffer from a hex string (whitespace ignored)."""
        return cls(bytearray(bytes.fromhex(''.join(text.split()))))

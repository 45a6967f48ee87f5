"""
TorusSQL Compiler Package

Compiles a single SQL statement to bytecode for the TorusSQL VM.
"""

from typing import Optional

from .tokens import Token, TokenType, Keyword
from .lexer import Lexer
from .ast import ASTVisitor, Statement, CreateDatabaseStmt, LanguageType
from .parser import Parser
from .bytecode import (Bytecode, DecodedStatement, StatementKind,
                       language_type_to_bytecode, bytecode_to_language_type,
                       statement_to_bytecode)
from .codegen import CodeGenerator
from .options import CompileOptions
from .errors import (TorusSQLError, SyntaxError, LexError, ParseError,
                     UnexpectedCharacterError, UnterminatedStringError,
                     EmptyStringError, UnexpectedTokenError,
                     UnsupportedStatementError, OperandTooLongError)

__version__ = "0.1.0"
__all__ = [
    "Token",
    "TokenType",
    "Keyword",
    "Lexer",
    "ASTVisitor",
    "Statement",
    "CreateDatabaseStmt",
    "LanguageType",
    "Parser",
    "Bytecode",
    "DecodedStatement",
    "StatementKind",
    "language_type_to_bytecode",
    "bytecode_to_language_type",
    "statement_to_bytecode",
    "CodeGenerator",
    "CompileOptions",
    "TorusSQLError",
    "SyntaxError",
    "LexError",
    "ParseError",
    "EmptyStringError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnexpectedTokenError",
    "UnsupportedStatementError",
    "OperandTooLongError",
    "compile_sql",
    "compile_file",
]


def compile_sql(source: str, options: Optional[CompileOptions] = None) -> Bytecode:
    """
    Compile one SQL statement to bytecode.

    Args:
        source: SQL statement text
        options: Compile options, defaults if omitted

    Returns:
        Bytecode object ready for VM execution

    Raises:
        SyntaxError: If the statement cannot be lexed or parsed
    """
    lexer = Lexer(source)
    parser = Parser(lexer, options)
    codegen = CodeGenerator(parser)

    bytecode = codegen.generate_bytecode()
    if bytecode is None:
        raise codegen.error

    return bytecode


def compile_file(filepath: str, options: Optional[CompileOptions] = None) -> Bytecode:
    """
    Compile a file holding one SQL statement.

    Args:
        filepath: Path to .sql source file

    Returns:
        Bytecode object ready for VM execution
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    try:
        return compile_sql(source, options)
    except TorusSQLError as e:
        raise e.with_filename(str(filepath))

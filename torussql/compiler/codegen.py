"""
TorusSQL Code Generator

Generates bytecode for the statement produced by a parser.
"""

import logging
from typing import Optional
from .ast import ASTVisitor, Statement, CreateDatabaseStmt
from .bytecode import Bytecode, statement_to_bytecode
from .errors import TorusSQLError
from .parser import Parser

logger = logging.getLogger(__name__)


class CodeGenerator(ASTVisitor):
    """Generates bytecode from a parsed statement."""

    def __init__(self, parser: Parser):
        self.parser = parser
        self.bytecode = Bytecode()
        self.error: Optional[TorusSQLError] = None
        # Buffer the current statement is encoded into
        self._scratch = Bytecode()

    def generate_bytecode(self) -> Optional[Bytecode]:
        """
        Parse one statement and append its bytecode.

        Returns:
            Copy of the bytecode buffer, or None if parsing failed. On
            failure the buffer is left unchanged and the reason is kept
            in ``self.error``.
        """
        statement = self.parser.parse()
        if statement is None:
            self.error = self.parser.error
            return None

        self.error = None
        return self.generate(statement)

    def generate(self, statement: Statement) -> Bytecode:
        """Append the encoding of an already-parsed statement."""
        language_type = statement.language_type()
        logger.debug("Language type: %s", language_type.name)

        self._scratch = Bytecode()
        self._scratch.emit_header(language_type, statement_to_bytecode(statement))
        statement.accept(self)

        self.bytecode.extend(self._scratch)
        logger.debug("Bytecode: %s", self.bytecode.hex(' '))
        return self.bytecode.copy()

    # =========================================================================
    # Statements
    # =========================================================================

    def visit_create_database(self, stmt: CreateDatabaseStmt) -> None:
        self._scratch.emit_operand(stmt.name.encode('utf-8'))

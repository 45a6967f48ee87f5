"""
TorusSQL Parser

Recursive descent parser that pulls tokens from a lexer with one token
of lookahead and produces a single statement AST.

Grammar:
    statement     := CREATE create_target
    create_target := DATABASE STRING
"""

import logging
from typing import Optional
from .tokens import Token, TokenType, Keyword
from .lexer import Lexer
from .ast import Statement, CreateDatabaseStmt
from .options import CompileOptions
from .errors import SyntaxError, UnexpectedTokenError, UnsupportedStatementError

logger = logging.getLogger(__name__)


class Parser:
    """Recursive descent parser for SQL statements."""

    def __init__(self, lexer: Lexer, options: Optional[CompileOptions] = None):
        """
        Initialize the parser and read the first token.

        Args:
            lexer: Lexer over the statement source
            options: Compile options, defaults if omitted
        """
        self.lexer = lexer
        self.options = options or CompileOptions()
        self.current_token: Optional[Token] = None
        self.error: Optional[SyntaxError] = None
        self.next_token()

    def next_token(self) -> None:
        """Replace the lookahead with the next token from the lexer."""
        self.current_token = self.lexer.next_token()

    def parse(self) -> Optional[Statement]:
        """
        Parse one statement.

        Returns:
            Statement AST node, or None if the input is not a valid
            statement. The reason is kept in ``self.error``.
        """
        try:
            statement = self.parse_statement()
        except SyntaxError as e:
            logger.debug("Parsing failed: %s", e)
            self.error = e
            return None

        self.error = None
        logger.debug("Statement: %r", statement)
        return statement

    def parse_statement(self) -> Statement:
        """Parse one statement, raising SyntaxError on failure."""
        token = self.current()
        logger.debug("Token: %r", token)

        if token.is_keyword(Keyword.CREATE):
            statement = self.create_statement()
        else:
            raise UnsupportedStatementError(
                f"Unsupported statement starting with {token.describe()}",
                token.line, token.column)

        if self.options.require_semicolon:
            self.finish_statement()

        return statement

    # =========================================================================
    # Statements
    # =========================================================================

    def create_statement(self) -> Statement:
        """Parse the target of a CREATE statement."""
        self.next_token()
        token = self.current()

        if token.is_keyword(Keyword.DATABASE):
            return self.create_database()

        raise UnexpectedTokenError(
            f"Expected DATABASE after CREATE, found {token.describe()}",
            token.line, token.column)

    def create_database(self) -> CreateDatabaseStmt:
        """Parse the name of a CREATE DATABASE statement."""
        self.next_token()
        token = self.current()

        if not token.is_string():
            raise UnexpectedTokenError(
                f"Expected database name, found {token.describe()}",
                token.line, token.column)

        # Raises OperandTooLongError for names over the length limit
        return CreateDatabaseStmt(token.value, token)

    def finish_statement(self) -> None:
        """Consume the terminating ';' and require end of input."""
        self.next_token()
        token = self.current()
        if token.type != TokenType.SEMICOLON:
            raise UnexpectedTokenError(
                f"Expected ';' after statement, found {token.describe()}",
                token.line, token.column)

        self.next_token()
        token = self.current()
        if not token.is_end():
            raise UnexpectedTokenError(
                f"Expected end of input after ';', found {token.describe()}",
                token.line, token.column)

    # =========================================================================
    # Helpers
    # =========================================================================

    def current(self) -> Token:
        """Return the lookahead token, raising the lexer error if lexing failed."""
        if self.current_token is None:
            raise self.lexer.error
        return self.current_token

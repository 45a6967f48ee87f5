"""
TorusSQL Lexer

Converts SQL source text into tokens, one token per request.
"""

import logging
from typing import List, Optional
from .tokens import Token, TokenType, lookup_keyword
from .errors import (LexError, UnexpectedCharacterError, UnterminatedStringError,
                     EmptyStringError)

logger = logging.getLogger(__name__)


class Lexer:
    """Lexical analyzer for SQL source code."""

    def __init__(self, source: str):
        """
        Initialize the lexer.

        Args:
            source: SQL source code to tokenize
        """
        self.source = source
        self.start = 0      # Start of current token
        self.current = 0    # Current position
        self.line = 1       # Current line number
        self.column = 1     # Current column number
        self.start_line = 1
        self.start_column = 1
        self.error: Optional[LexError] = None

    def next_token(self) -> Optional[Token]:
        """
        Scan the next token.

        Returns:
            The next token, or None if no token could be scanned. The
            reason is kept in ``self.error``.
        """
        try:
            token = self.scan_token()
        except LexError as e:
            logger.debug("Lexing failed: %s", e)
            self.error = e
            return None

        self.error = None
        return token

    def tokenize(self) -> List[Token]:
        """
        Tokenize the whole source.

        Returns:
            List of tokens ending with a single END token

        Raises:
            LexError: If a token cannot be scanned
        """
        tokens = []

        while True:
            token = self.scan_token()
            tokens.append(token)
            if token.is_end():
                return tokens

    def scan_token(self) -> Token:
        """Scan the next token, raising LexError on failure."""
        self.skip_whitespace()

        self.start = self.current
        self.start_line = self.line
        self.start_column = self.column

        if self.is_at_end():
            return self.make_token(TokenType.END)

        c = self.peek()

        if c.isalpha():
            return self.keyword_or_identifier()
        if c == '"':
            return self.string()
        if c == ';':
            self.advance()
            logger.debug("Found symbol: %r", c)
            return self.make_token(TokenType.SEMICOLON)

        raise UnexpectedCharacterError(f"Unexpected character: {c!r}",
                                       self.line, self.column)

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        if c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def is_at_end(self) -> bool:
        """Check if we've reached the end of the source."""
        return self.current >= len(self.source)

    def skip_whitespace(self) -> None:
        """Skip a run of whitespace characters."""
        while not self.is_at_end() and self.peek().isspace():
            self.advance()

    def make_token(self, type: TokenType, value=None) -> Token:
        """Build a token spanning from the token start to the cursor."""
        lexeme = self.source[self.start:self.current]
        return Token(type, value, lexeme, self.start_line, self.start_column)

    def keyword_or_identifier(self) -> Token:
        """Scan a run of letters as a keyword or an identifier value."""
        # Digits and underscores end the run
        while not self.is_at_end() and self.peek().isalpha():
            self.advance()

        text = self.source[self.start:self.current]
        logger.debug("Found value: %r", text)

        keyword = lookup_keyword(text)
        if keyword is not None:
            logger.debug("Found keyword: %s", keyword)
            return self.make_token(TokenType.KEYWORD, keyword)

        return self.make_token(TokenType.STRING, text)

    def string(self) -> Token:
        """Scan a double-quoted string literal."""
        self.advance()  # Opening quote
        value = []

        while self.peek() != '"' and not self.is_at_end():
            value.append(self.advance())

        if self.is_at_end():
            raise UnterminatedStringError("Unterminated string",
                                          self.start_line, self.start_column)

        # Consume closing quote
        self.advance()

        text = ''.join(value)
        if not text:
            raise EmptyStringError("Empty string literal",
                                   self.start_line, self.start_column)

        logger.debug("Found literal string: %r", text)
        return self.make_token(TokenType.STRING, text)

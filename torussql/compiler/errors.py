"""
TorusSQL Compiler Errors

Every failure of the pipeline is a TorusSQLError. Lexing and parsing
failures share the SyntaxError branch; each leaf class names one reason a
statement was rejected, so callers can tell them apart without parsing
the message.

Messages carry the position of the offending character or token:

    create.sql:1:17: Unterminated string
    line 1:8: Unexpected character: '*'
"""

from typing import Optional, Tuple


class TorusSQLError(Exception):
    """
    Base exception for all TorusSQL errors.

    Attributes:
        message: Description without location
        line: 1-based line of the offending input, if known
        column: 1-based column of the offending input, if known
        filename: Source file, set when compiling from a file
    """

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None, filename: Optional[str] = None):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(self._format_message())

    @property
    def position(self) -> Optional[Tuple[int, int]]:
        """(line, column) of the failure, or None without a line."""
        if self.line is None:
            return None
        return (self.line, self.column or 1)

    def with_filename(self, filename: str) -> 'TorusSQLError':
        """Attach a source file name and refresh the formatted message."""
        self.filename = filename
        self.args = (self._format_message(),)
        return self

    def _format_message(self) -> str:
        if self.line is None:
            location = self.filename
        else:
            column = f":{self.column}" if self.column is not None else ""
            prefix = self.filename or "line "
            separator = ":" if self.filename else ""
            location = f"{prefix}{separator}{self.line}{column}"

        if location:
            return f"{location}: {self.message}"
        return self.message


class SyntaxError(TorusSQLError):
    """Raised for syntax errors during lexing or parsing."""
    pass


class LexError(SyntaxError):
    """Raised when the lexer cannot produce a token."""
    pass


class UnexpectedCharacterError(LexError):
    """Raised for a character that starts no known token."""
    pass


class UnterminatedStringError(LexError):
    """Raised for a string literal with no closing quote."""
    pass


class EmptyStringError(LexError):
    """Raised for a string literal with nothing between the quotes."""
    pass


class ParseError(SyntaxError):
    """Raised when the token stream does not match the grammar."""
    pass


class UnexpectedTokenError(ParseError):
    """Raised when a grammar position holds the wrong kind of token."""
    pass


class UnsupportedStatementError(ParseError):
    """Raised for statements the parser does not recognize."""
    pass


class OperandTooLongError(ParseError):
    """Raised when an operand does not fit its one-byte length prefix."""
    pass

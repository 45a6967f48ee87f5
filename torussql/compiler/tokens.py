"""
TorusSQL Token Definitions

Defines the token types, the SQL keyword set and the Token class
produced by the lexer.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """All token types in TorusSQL."""

    KEYWORD = auto()
    STRING = auto()
    SEMICOLON = auto()     # ;
    END = auto()


class Keyword(Enum):
    """SQL keywords recognized by the lexer."""

    CREATE = auto()
    DATABASE = auto()

    def __str__(self) -> str:
        return self.name


# Keyword mapping (lowercase spelling -> keyword)
KEYWORDS = {
    'create': Keyword.CREATE,
    'database': Keyword.DATABASE,
}


def lookup_keyword(text: str) -> Optional[Keyword]:
    """Match an identifier against the keyword set, ignoring case."""
    return KEYWORDS.get(text.lower())


@dataclass
class Token:
    """
    Represents a single token from the source code.

    Equality only looks at the token type and value, so tokens read
    from different positions compare equal when they carry the same
    content.
    """

    type: TokenType
    value: Any = None
    lexeme: str = field(default="", compare=False)
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r}, line={self.line}, column={self.column})"
        return f"Token({self.type.name}, line={self.line}, column={self.column})"

    @classmethod
    def keyword(cls, keyword: Keyword, **location) -> 'Token':
        return cls(TokenType.KEYWORD, keyword, **location)

    @classmethod
    def string(cls, text: str, **location) -> 'Token':
        return cls(TokenType.STRING, text, **location)

    @classmethod
    def semicolon(cls, **location) -> 'Token':
        return cls(TokenType.SEMICOLON, None, **location)

    @classmethod
    def end(cls, **location) -> 'Token':
        return cls(TokenType.END, None, **location)

    def is_keyword(self, keyword: Optional[Keyword] = None) -> bool:
        """Check if this token is a keyword, optionally a specific one."""
        if self.type != TokenType.KEYWORD:
            return False
        return keyword is None or self.value == keyword

    def is_string(self) -> bool:
        """Check if this token is a string or identifier value."""
        return self.type == TokenType.STRING

    def is_end(self) -> bool:
        """Check if this token marks the end of input."""
        return self.type == TokenType.END

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type == TokenType.KEYWORD:
            return f"keyword {self.value}"
        if self.type == TokenType.STRING:
            return f"string {self.value!r}"
        if self.type == TokenType.SEMICOLON:
            return "';'"
        return "end of input"

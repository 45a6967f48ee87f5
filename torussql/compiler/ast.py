"""
TorusSQL Abstract Syntax Tree

Defines AST node classes for SQL statements and the language type
classification derived from them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional
from .tokens import Token
from .errors import OperandTooLongError


# Largest operand a one-byte length prefix can describe
MAX_OPERAND_LENGTH = 0xFF


class LanguageType(Enum):
    """SQL statement categories."""

    DDL = auto()     # Data Definition Language
    DML = auto()     # Data Manipulation Language
    DCL = auto()     # Data Control Language
    TCL = auto()     # Transaction Control Language
    DQL = auto()     # Data Query Language
    VENDOR = auto()  # Vendor-specific extensions


# =============================================================================
# Base Classes
# =============================================================================

class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: 'ASTVisitor') -> Any:
        """Accept a visitor for traversal."""
        pass


class Statement(ASTNode):
    """
    Base class for statement nodes.

    Every concrete statement must classify itself, so a new statement
    kind cannot be instantiated without a language type.
    """

    @abstractmethod
    def language_type(self) -> LanguageType:
        """Return the SQL category of this statement."""
        pass


# =============================================================================
# Statements
# =============================================================================

@dataclass
class CreateDatabaseStmt(Statement):
    """CREATE DATABASE "name" statement."""
    name: str
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        # The name is encoded behind a one-byte length
        if len(self.name.encode('utf-8')) > MAX_OPERAND_LENGTH:
            line = self.token.line if self.token else None
            column = self.token.column if self.token else None
            raise OperandTooLongError(
                f"Database name is longer than {MAX_OPERAND_LENGTH} bytes",
                line, column)

    def language_type(self) -> LanguageType:
        return LanguageType.DDL

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_create_database(self)


# =============================================================================
# Visitor
# =============================================================================

class ASTVisitor(ABC):
    """Base visitor, one method per statement kind."""

    @abstractmethod
    def visit_create_database(self, stmt: CreateDatabaseStmt) -> Any:
        pass

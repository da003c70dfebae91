"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed: Literal, Grouping, UnaryOp and BinaryOp. Nodes are
immutable once built and only carry their children; behaviour lives in
visitors such as the AstPrinter.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    LITERAL = "Literal"
    GROUPING = "Grouping"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit a generic AST node."""
        pass


class Expression(ABC):
    """Base class for expressions."""
    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value expression."""
    value: Any
    literal_type: str  # "number", "string", "boolean" or "nil"

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING

    def children(self) -> List[Expression]:
        return [self.expression]


@dataclass(frozen=True)
class UnaryOp(Expression):
    """Prefix operation; the operator is a '!' or '-' token."""
    operator: Token
    operand: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY_OP

    def children(self) -> List[Expression]:
        return [self.operand]


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation expression."""
    left: Expression
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_OP

    def children(self) -> List[Expression]:
        return [self.left, self.right]


def literal_type_of(value: Any) -> str:
    """Classify a decoded literal value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    raise TypeError(f"Not a Lox literal value: {value!r}")

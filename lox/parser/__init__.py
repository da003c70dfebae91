"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions, producing an
immutable Abstract Syntax Tree.

Key Features:
- One grammar rule per precedence level
- Left-associative binary operators, right-nested prefix operators
- Diagnostics naming the offending token
- Statement-boundary synchronization hook

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .printer import AstPrinter
from .errors import ParseError, ParseWarning

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "parse_file",
    "AstPrinter",

    # AST nodes
    "ASTNodeType", "ASTVisitor",
    "Expression", "Literal", "Grouping", "UnaryOp", "BinaryOp",

    # Error handling
    "ParseError", "ParseWarning",
]

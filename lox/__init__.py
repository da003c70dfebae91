"""
Lox Front End Package

Scanner and expression parser for the Lox language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Expression parsing and AST generation
    ├── reporter.py      # Diagnostic sink shared by both stages
    └── cli.py           # `lox` command line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, LexerError
from .parser import Parser, AstPrinter, ParseError
from .reporter import ErrorReporter

__all__ = [
    # Core classes
    "Scanner",
    "Parser",
    "AstPrinter",
    "ErrorReporter",
    "Token",
    "TokenType",
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]

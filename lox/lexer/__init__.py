"""
Lox Lexer Package

Implements the scanner for the Lox expression language: a single pass over
the source text producing typed tokens terminated by an end-of-input marker.

Key Features:
- One and two character operators with one character lookahead
- Line comments and line tracking for diagnostics
- Exact, case-sensitive reserved word lookup
- Per-character error recovery

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
]

"""
Error handling for the Lox parser.

Provides the syntax error exception, recovery tables used to resynchronize
after an error, and helpers for building common errors.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser cannot match the grammar.

    Carries the offending token and a diagnostic for error reporting.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            code=code,
            where=location_of(token),
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class ParseWarning:
    """
    Represents a parser warning that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="warning",
            code=code,
            where=location_of(token),
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """
    Utilities for error recovery in the parser.

    Describes where parsing can safely resume after a syntax error so that
    several independent errors can be reported from one source.
    """

    # Tokens that start a statement; parsing resumes before them
    STATEMENT_STARTS = {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }

    # Tokens that end a statement; parsing resumes after them
    STATEMENT_ENDS = {
        TokenType.SEMICOLON,
    }

    @staticmethod
    def suggest_missing_token(expected: TokenType) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.SEMICOLON: ["Add a semicolon ';' to end the statement"],
            TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
            TokenType.RIGHT_BRACE: ["Add a closing brace '}'"],
        }

        return list(token_suggestions.get(expected, []))


def location_of(token: Token) -> str:
    """Describe where in the token stream an error happened."""
    if token.type == TokenType.EOF:
        return " at end"
    return f" at '{token.lexeme}'"


def create_missing_token_error(expected: TokenType, found: Token, message: str) -> ParseError:
    """Create an error for an expected token that is not there."""
    return ParseError(
        message=message,
        token=found,
        code="P001",
        help_text=f"The parser expected {expected.name} here, but found {found.type.name}.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected)
    )


def create_expect_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message="Expect expression.",
        token=found,
        code="P005",
        help_text=f"{found.type.name} cannot start an expression.",
        suggestions=["Check the expression syntax", "Ensure all operators have operands"]
    )


def create_nesting_too_deep_error(found: Token) -> ParseError:
    """Create an error for an expression nested deeper than the parser can follow."""
    return ParseError(
        message="Expression nesting too deep.",
        token=found,
        code="P006",
        help_text="The expression is nested too deeply to parse.",
        suggestions=["Remove redundant parentheses or unary operators"]
    )


def create_trailing_tokens_warning(found: Token) -> ParseWarning:
    """Create a warning for tokens left over after a complete expression."""
    return ParseWarning(
        message="Unexpected tokens after expression.",
        token=found,
        code="P007",
        help_text="Only the first complete expression is parsed; the rest is ignored.",
        suggestions=["Remove the extra tokens or join them with an operator"]
    )

"""
Lox Recursive Descent Parser

One method per precedence level, lowest first. Binary levels loop and fold
to the left; unary recurses to the right.

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "+" | "-" ) factor )*
    factor     -> unary ( ( "*" | "/" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> "false" | "true" | "nil" | NUMBER | STRING
                | "(" expression ")"

Author: xwest
"""

import logging
from typing import List, Optional, TYPE_CHECKING

from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Expression, Literal, Grouping, UnaryOp, BinaryOp, literal_type_of
)
from .errors import (
    ParseError, ParseWarning, SyntaxErrorRecovery, create_missing_token_error,
    create_expect_expression_error, create_nesting_too_deep_error,
    create_trailing_tokens_warning
)

if TYPE_CHECKING:
    from ..reporter import ErrorReporter

logger = logging.getLogger(__name__)


class Parser:
    """
    Lox expression parser.

    Reads a token list produced by the Scanner by index and builds one
    expression tree. An instance parses one token list once.
    """

    EQUALITY_OPERATORS = (TokenType.NOT_EQUAL, TokenType.EQUAL)
    COMPARISON_OPERATORS = (
        TokenType.GREATER_THAN, TokenType.GREATER_EQUAL,
        TokenType.LESS_THAN, TokenType.LESS_EQUAL,
    )
    TERM_OPERATORS = (TokenType.MINUS, TokenType.PLUS)
    FACTOR_OPERATORS = (TokenType.DIVIDE, TokenType.MULTIPLY)
    UNARY_OPERATORS = (TokenType.LOGICAL_NOT, TokenType.MINUS)

    def __init__(self, tokens: List[Token], reporter: Optional["ErrorReporter"] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the scanner, ending in EOF
            reporter: Optional sink that receives parse errors and warnings
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.current = 0
        self.reporter = reporter
        self.errors: List[ParseError] = []
        self.warnings: List[ParseWarning] = []

    def parse(self) -> Expression:
        """
        Parse the token stream into an expression tree.

        Tokens left over after one complete expression are not consumed;
        they produce a warning instead of an error.

        Returns:
            Root expression node

        Raises:
            ParseError: If the tokens do not form an expression
        """
        try:
            expr = self._expression()
        except ParseError as e:
            self._record(e)
            raise
        except RecursionError:
            # The stack has unwound by now; report at the deepest token reached
            error = create_nesting_too_deep_error(self._peek())
            self._record(error)
            raise error from None

        if not self._is_at_end():
            warning = create_trailing_tokens_warning(self._peek())
            self.warnings.append(warning)
            if self.reporter is not None:
                self.reporter.report(warning)

        logger.debug("parsed %s, stopped at token %d of %d",
                     expr.node_type.value, self.current, len(self.tokens))
        return expr

    def _record(self, error: ParseError):
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter.report(error)

    def _expression(self) -> Expression:
        return self._equality()

    def _equality(self) -> Expression:
        expr = self._comparison()

        while self._match(*self.EQUALITY_OPERATORS):
            operator = self._previous()
            right = self._comparison()
            expr = BinaryOp(expr, operator, right)

        return expr

    def _comparison(self) -> Expression:
        expr = self._term()

        while self._match(*self.COMPARISON_OPERATORS):
            operator = self._previous()
            right = self._term()
            expr = BinaryOp(expr, operator, right)

        return expr

    def _term(self) -> Expression:
        expr = self._factor()

        while self._match(*self.TERM_OPERATORS):
            operator = self._previous()
            right = self._factor()
            expr = BinaryOp(expr, operator, right)

        return expr

    def _factor(self) -> Expression:
        expr = self._unary()

        while self._match(*self.FACTOR_OPERATORS):
            operator = self._previous()
            right = self._unary()
            expr = BinaryOp(expr, operator, right)

        return expr

    def _unary(self) -> Expression:
        if self._match(*self.UNARY_OPERATORS):
            operator = self._previous()
            operand = self._unary()
            return UnaryOp(operator, operand)

        return self._primary()

    def _primary(self) -> Expression:
        if self._match(TokenType.FALSE):
            return Literal(False, "boolean")
        if self._match(TokenType.TRUE):
            return Literal(True, "boolean")
        if self._match(TokenType.NIL):
            return Literal(None, "nil")

        if self._match(TokenType.NUMBER, TokenType.STRING):
            value = self._previous().literal
            return Literal(value, literal_type_of(value))

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise create_expect_expression_error(self._peek())

    def synchronize(self):
        """
        Discard tokens until a likely statement boundary.

        Stops just after a ';' or just before a token that starts a
        statement, or at EOF.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type in SyntaxErrorRecovery.STATEMENT_ENDS:
                return
            if self._peek().type in SyntaxErrorRecovery.STATEMENT_STARTS:
                return
            self._advance()

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def _previous(self) -> Token:
        """Return the most recently consumed token."""
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        raise create_missing_token_error(token_type, self._peek(), message)


def parse_string(source: str, filename: str = "<string>",
                 reporter: Optional["ErrorReporter"] = None) -> Expression:
    """
    Convenience function to parse a source string.

    Every lexical error goes to the reporter; the first one is raised.

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename, reporter)
    parser = Parser(tokens, reporter)
    return parser.parse()


def parse_file(filepath: str, reporter: Optional["ErrorReporter"] = None) -> Expression:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError: If scanning fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath, reporter)
    parser = Parser(tokens, reporter)
    return parser.parse()

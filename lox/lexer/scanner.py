"""
Lox Scanner - turns source text into tokens

Single left-to-right pass over the whole source. Each branch of the
dispatch consumes exactly the lexeme it owns; errors are recorded and
scanning carries on with the next character.

xwest
"""

import logging
from typing import List, Optional, Tuple, TYPE_CHECKING

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS,
    WHITESPACE_CHARS
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)

if TYPE_CHECKING:
    from ..reporter import ErrorReporter

logger = logging.getLogger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    An instance scans one source once; create a new one per input.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 reporter: Optional["ErrorReporter"] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Full source text
            filename: Name of source file, used in log messages
            reporter: Optional sink that receives every lexical error
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with a single EOF token
        """
        while not self._is_at_end():
            # At the beginning of the next lexeme
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug("%s: scanned %d tokens, %d errors",
                     self.filename, len(self.tokens), len(self.errors))
        return self.tokens

    def _scan_token(self):
        """Consume one lexeme and append its token, if it produces one."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline itself is left
                # for the next lexeme so the line counter stays right
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.DIVIDE)
        elif char in WHITESPACE_CHARS:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif self._is_digit(char):
            self._number()
        elif self._is_alpha(char):
            self._identifier()
        else:
            raise create_unexpected_character_error(char, self.line)

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.line

        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _number(self):
        """Scan a number literal; the first digit is already consumed."""
        while self._is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and self._is_digit(self._peek_next()):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        """Scan an identifier or reserved word."""
        while self._is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    # Cursor helpers

    def _add_token(self, token_type: TokenType, literal=None, line: Optional[int] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line if line is None else line))

    def _record(self, error: LexerError):
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter.report(error)

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    @staticmethod
    def _is_digit(char: str) -> bool:
        # str.isdigit() also accepts superscripts and other scripts
        return "0" <= char <= "9"

    @staticmethod
    def _is_alpha(char: str) -> bool:
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    def _is_alpha_numeric(self, char: str) -> bool:
        return self._is_alpha(char) or self._is_digit(char)

    def has_errors(self) -> bool:
        """Check if the scanner recorded any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self):
        """Get the diagnostics of all recorded errors."""
        return [error.diagnostic for error in self.errors]


def scan(source: str, reporter: Optional["ErrorReporter"] = None) -> Tuple[List[Token], List[LexerError]]:
    """
    Scan a source string.

    Returns:
        The token list (always ending in EOF) and the lexical errors met
    """
    scanner = Scanner(source, "<string>", reporter)
    tokens = scanner.scan_tokens()
    return tokens, scanner.errors


def tokenize_string(source: str, filename: str = "<string>",
                    reporter: Optional["ErrorReporter"] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for log messages
        reporter: Optional sink that receives every lexical error

    Returns:
        List of tokens

    Raises:
        LexerError: The first lexical error, if any occurred
    """
    scanner = Scanner(source, filename, reporter)
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str, reporter: Optional["ErrorReporter"] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If scanning fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, reporter)

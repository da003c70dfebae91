"""
Error handling for the Lox scanner.

Provides diagnostic records with line information and the exception
type raised for lexical errors.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    line: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    where: str = ""  # " at end", " at 'x'" or empty for lexical errors
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def format_short(self) -> str:
        """Render the one-line ``[line N] Error: message`` form."""
        return f"[line {self.line}] {self.severity.capitalize()}{self.where}: {self.message}"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> line {self.line}{self.where}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the scanner meets a character sequence it
    cannot turn into a token.

    The scanner catches it, records it, and keeps going.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        line=line,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError(
        message="Unterminated string.",
        line=line,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote']
    )

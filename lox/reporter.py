"""
Diagnostic sink shared by the scanner and parser.

The driver creates one ErrorReporter per run (or per REPL line), hands it
to each stage, and inspects ``had_error`` afterwards to decide whether to
continue and which exit code to use.

Author: xwest
"""

import logging
from typing import List, Union

from .lexer.errors import Diagnostic, LexerError
from .parser.errors import ParseError, ParseWarning

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Collects diagnostics reported by the front end stages."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    def report(self, error: Union[LexerError, ParseError, ParseWarning, Diagnostic]):
        """Record an error, a warning or a bare diagnostic."""
        diagnostic = error if isinstance(error, Diagnostic) else error.diagnostic
        self.diagnostics.append(diagnostic)
        logger.debug("reported %s", diagnostic.format_short())

    def reset(self):
        """Forget everything reported so far (used between REPL lines)."""
        self.diagnostics.clear()

    def format_all(self) -> List[str]:
        return [d.format_short() for d in self.diagnostics]

    def __len__(self) -> int:
        return len(self.diagnostics)

"""
Command line driver for the Lox front end.

    lox               # interactive prompt
    lox script.lox    # scan and parse a file
    lox --tokens ...  # also dump the token stream

Exit codes follow sysexits: 64 for bad usage, 65 when the source had errors.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .lexer import Scanner
from .parser import Parser, AstPrinter, ParseError
from .parser.ast_nodes import Expression
from .reporter import ErrorReporter

logger = logging.getLogger(__name__)

EX_USAGE = 64
EX_DATAERR = 65


def run(source: str, reporter: ErrorReporter, show_tokens: bool = False,
        out: Optional[TextIO] = None, filename: str = "<stdin>") -> Optional[Expression]:
    """
    Scan and parse one source text, printing the result.

    Returns the parsed tree, or None when the source had errors.
    """
    scanner = Scanner(source, filename, reporter)
    tokens = scanner.scan_tokens()

    if show_tokens:
        for token in tokens:
            print(token, file=out)

    # Don't parse a token stream with lexical errors in it
    if scanner.has_errors():
        return None

    try:
        expr = Parser(tokens, reporter).parse()
    except ParseError:
        return None

    print(AstPrinter().print(expr), file=out)
    return expr


def run_file(path: str, show_tokens: bool = False,
             out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()

    reporter = ErrorReporter()
    run(source, reporter, show_tokens, out, filename=path)
    _print_diagnostics(reporter, err)

    return EX_DATAERR if reporter.had_error else 0


def run_prompt(show_tokens: bool = False, stream: Optional[TextIO] = None,
               out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    stream = stream or sys.stdin
    reporter = ErrorReporter()

    while True:
        print("> ", end="", file=out, flush=True)
        line = stream.readline()
        if not line:
            break
        run(line.rstrip("\r\n"), reporter, show_tokens, out)
        _print_diagnostics(reporter, err)
        # A mistake on one line must not end the session
        reporter.reset()

    return 0


def _print_diagnostics(reporter: ErrorReporter, err: Optional[TextIO]):
    err = err or sys.stderr
    for message in reporter.format_all():
        print(message, file=err)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan and parse Lox expressions",
    )
    parser.add_argument('script', nargs='*',
                        help='Source file to parse; starts a prompt when omitted')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream before the tree')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command"""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.script) > 1:
        print("Usage: lox [script]")
        return EX_USAGE

    if args.script:
        logger.debug("running file %s", args.script[0])
        return run_file(args.script[0], args.tokens)

    return run_prompt(args.tokens)


if __name__ == "__main__":
    sys.exit(main())

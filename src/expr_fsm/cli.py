#!/usr/bin/env python3
"""
Expression FSM: Command-Line Caller

Reports validity for expressions given on the command line or stdin.
With no expressions it checks the two built-in samples.

Output format (one line per expression, stdout):
    Is "<expr>" a valid expression? Yes|No

Exit codes:
    0  Success (including "No" results)
    1  Operational failure (unreadable input)
    2  Boundary violation (input longer than --max-length) or usage error
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from .scanner import is_valid_expression
from .states import FsmState
from .symbols import Symbol
from .transitions import as_matrix

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_OPERATIONAL_FAILURE = 1
EXIT_BOUNDARY_VIOLATION = 2

# Inputs longer than this are refused before scanning
MAX_INPUT_LENGTH = 4096

SAMPLE_EXPRESSIONS = ("3+2-1", "3++2")

RESULT_LINE = 'Is "{expr}" a valid expression? {answer}'


class InputBoundaryError(ValueError):
    """Raised when an input exceeds the configured maximum length."""
    pass


def check_input_length(expr: str, max_length: int) -> None:
    """
    Refuse inputs over max_length characters.

    Raises:
        InputBoundaryError: If len(expr) > max_length.
    """
    if len(expr) > max_length:
        raise InputBoundaryError(
            f"Input of {len(expr)} characters exceeds maximum of {max_length}"
        )


def format_result(expr: str, valid: bool) -> str:
    return RESULT_LINE.format(expr=expr, answer="Yes" if valid else "No")


def format_table(output: Optional[TextIO] = None) -> None:
    """Print the transition matrix, one state per row."""
    header = " ".join(f"{symbol.value:>6}" for symbol in Symbol)
    print(f"{'':<22} {header}", file=output)
    for state, row in zip(FsmState, as_matrix()):
        cells = " ".join(f"{target:>6}" for target in row)
        print(f"{state.ordinal}:{state.value:<20} {cells}", file=output)
    print("", file=output)


def report(
    expressions: Iterable[str],
    max_length: int = MAX_INPUT_LENGTH,
    output: Optional[TextIO] = None
) -> int:
    """
    Check each expression and print one result line per input.

    Returns:
        Exit code.
    """
    for expr in expressions:
        try:
            check_input_length(expr, max_length)
        except InputBoundaryError as e:
            logger.error("%s", e)
            return EXIT_BOUNDARY_VIOLATION
        print(format_result(expr, is_valid_expression(expr)), file=output)
    return EXIT_OK


def _strip_line_terminator(line: str) -> str:
    """Remove one trailing "\\n" and then one "\\r", nothing more."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _read_stdin_lines(stream: TextIO) -> List[str]:
    return [_strip_line_terminator(line) for line in stream]


def _non_negative_int(value: str) -> int:
    """argparse type for --max-length."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def split_arguments(
    parser: argparse.ArgumentParser,
    argv: List[str]
) -> Tuple[argparse.Namespace, List[str]]:
    """
    Separate options from expressions.

    Expressions such as "-1+2" look like unknown short options to
    argparse, so unrecognized tokens are kept as expressions in their
    original order. Everything after a bare "--" is an expression.
    Unknown "--long" options are still usage errors.

    Returns:
        (parsed options, expressions)
    """
    if "--" in argv:
        cut = argv.index("--")
        head, tail = argv[:cut], argv[cut + 1:]
    else:
        head, tail = argv, []

    args, extras = parser.parse_known_args(head)
    for token in extras:
        if token.startswith("--"):
            parser.error(f"unrecognized arguments: {token}")
    return args, extras + tail


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="expr-fsm",
        usage="%(prog)s [options] [EXPR ...] [-- EXPR ...]",
        description="Check digit/+/- expressions with a finite-state machine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  Success (including invalid expressions)
  1  Operational failure (unreadable input)
  2  Boundary violation (input too long) or usage error

Expressions may start with "-" (e.g. -1+2). Use "--" before expressions
that collide with an option such as -v or -h.
"""
    )
    parser.add_argument(
        "--stdin", action="store_true",
        help="Read one expression per line from standard input"
    )
    parser.add_argument(
        "--table", action="store_true",
        help="Print the transition table before the results"
    )
    parser.add_argument(
        "--max-length", type=_non_negative_int, default=MAX_INPUT_LENGTH,
        help=f"Maximum accepted input length (default: {MAX_INPUT_LENGTH})"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (if None, parse from sys.argv)

    Returns:
        Exit code.
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    args, positional = split_arguments(parser, list(argv))
    setup_logging(args.verbose)

    if args.table:
        format_table()

    if args.stdin:
        try:
            expressions = _read_stdin_lines(sys.stdin)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read standard input: %s", e)
            return EXIT_OPERATIONAL_FAILURE
    elif positional:
        expressions = positional
    else:
        expressions = list(SAMPLE_EXPRESSIONS)

    logger.debug("Checking %d expression(s)", len(expressions))
    return report(expressions, max_length=args.max_length)


if __name__ == "__main__":
    sys.exit(main())

"""Print the tokens of an expression, one per line.

Usage:
    python -m arithlex "12 + 34 - 5 * 67 / 8"
    python -m arithlex "-2*3"
    echo "2 ^ 10" | python -m arithlex -

Expression words that look like short options ("-2*3", "-(2)") are kept as
part of the expression. Anything after "--" is always expression text.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from arithlex import __version__, tokenize
from arithlex.config import OVERFLOW_POLICIES, LexConfig
from arithlex.errors import LexError

DEFAULT_EXPRESSION = "12 + 34 - 5 * 67 / 8"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the token printer.

    Returns:
        Parser with the expression words and the lexer options.
    """
    parser = argparse.ArgumentParser(
        prog="arithlex",
        description="Tokenize an arithmetic expression and print one token per line.",
        epilog="A leading '-' belongs to the expression: arithlex '-2*3' prints "
        "MINUS, 2, MUL, 3.",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help=f"expression to tokenize; '-' reads stdin (default: {DEFAULT_EXPRESSION!r})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on unrecognized characters instead of dropping them",
    )
    parser.add_argument(
        "--overflow",
        choices=sorted(OVERFLOW_POLICIES),
        default="wrap",
        help="handling of literals beyond the signed 64-bit range (default: wrap)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments, folding option-like expression words back in.

    argparse reads "-2*3" as an unknown short option. Such leftovers are
    returned to ``expression`` in their original command-line order.
    Unknown long options ("--bogus") are still rejected.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed namespace with the complete ``expression`` word list.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    unknown = [word for word in extra if word.startswith("--") and word != "--"]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")

    if extra:
        pending = Counter(args.expression) + Counter(word for word in extra if word != "--")
        words = []
        for word in argv:
            if pending[word] > 0:
                pending[word] -= 1
                words.append(word)
        args.expression = words
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the token printer.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit status: 0 on success, 1 when strict lexing fails.
    """
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.expression == ["-"]:
        source, source_name = sys.stdin.read(), "<stdin>"
    elif args.expression:
        source, source_name = " ".join(args.expression), None
    else:
        source, source_name = DEFAULT_EXPRESSION, None

    config = LexConfig(overflow=args.overflow, strict=args.strict)
    try:
        tokens = tokenize(source, source_name=source_name, config=config)
    except LexError as e:
        print(f"arithlex: error: {e}", file=sys.stderr)
        return 1

    for token in tokens:
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())

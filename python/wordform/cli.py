"""
wordform command line.

Usage:
    wordform pluralize person child book
    wordform camelize api_access --lower
    wordform tableize Admin.User --config inflections.yaml
    wordform ordinalize 1 2 3 11
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from wordform import __version__
from wordform.config import InflectionConfigError
from wordform.inflector import Inflector
from wordform.logging_config import setup_logging

logger = logging.getLogger("wordform.cli")


class CliInputError(Exception):
    """Raised when a word can't be used as input to the chosen operation."""

    pass


def _parse_integer(word: str) -> int:
    try:
        return int(word)
    except ValueError:
        raise CliInputError(f"expects an integer, got {word!r}") from None


OPERATIONS: dict[str, Callable[[Inflector, str, argparse.Namespace], str]] = {
    "pluralize": lambda inf, word, args: inf.pluralize(word),
    "singularize": lambda inf, word, args: inf.singularize(word),
    "camelize": lambda inf, word, args: inf.camelize(word, upper=not args.lower),
    "underscore": lambda inf, word, args: inf.underscore(word),
    "dasherize": lambda inf, word, args: inf.dasherize(word),
    "humanize": lambda inf, word, args: inf.humanize(word),
    "classify": lambda inf, word, args: inf.classify(word),
    "tableize": lambda inf, word, args: inf.tableize(word),
    "foreign-key": lambda inf, word, args: inf.foreign_key(word),
    "demodulize": lambda inf, word, args: inf.demodulize(word),
    "ordinalize": lambda inf, word, args: inf.ordinalize(_parse_integer(word)),
    "uncountable": lambda inf, word, args: str(inf.uncountable(word)).lower(),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordform",
        description="Rule-based English inflection: plurals, casing and naming helpers",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS), help="Transform to apply")
    parser.add_argument("words", nargs="+", help="Input words (one result per line)")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with custom plural/singular/uncountable/acronym rules",
    )
    parser.add_argument(
        "--lower",
        action="store_true",
        help="camelize only: produce lowerCamelCase",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Process exit code: 0 on success, 2 on configuration or input errors
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        inflector = Inflector.from_yaml(args.config) if args.config else Inflector()
    except InflectionConfigError as e:
        print(f"wordform: {e}", file=sys.stderr)
        return 2

    transform = OPERATIONS[args.operation]
    for word in args.words:
        try:
            result = transform(inflector, word, args)
        except CliInputError as e:
            print(f"wordform: {args.operation} {e}", file=sys.stderr)
            return 2
        logger.debug(f"{args.operation}({word!r}) -> {result!r}")
        print(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())

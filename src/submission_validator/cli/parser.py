"""CLI argument parser for submission-validator."""

import argparse
import sys
from argparse import Namespace
from collections import Counter
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser.

    Positional arguments are collected as a list and passed to the
    pipeline unchanged, which uses only the first one. Tokens argparse
    does not recognize, such as a path starting with ``-``, are kept as
    positionals instead of failing the parse.
    """

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name; ``sys.argv[1:]``
                when None

        Returns:
            Namespace: Parsed arguments namespace; ``paths`` holds every
                positional in command-line order.

        Raises:
            argparse.ArgumentError: If an option value is invalid

        """
        argv = list(sys.argv[1:] if argv is None else argv)
        parser = self._create_main_parser()
        self._add_options(parser)
        args, unknown = parser.parse_known_args(argv)
        args.paths = _in_command_line_order(argv, args.paths + unknown)
        return args

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="submission-validator",
            description=(
                "Validate an XML submission against the bundled schema and "
                "confirm its GitHub repository and commit exist"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            allow_abbrev=False,
            exit_on_error=False,
            epilog="""
Examples:
  %(prog)s abgabe.xml
  %(prog)s --timeout 30 abgabe.xml
  %(prog)s --verbose abgabe.xml

Exit codes:
  0 success, 1 missing path, 2 file or schema not found,
  3 schema violation, 4 repository check failed,
  5 commit check failed, 6 unexpected error
            """,
        )

    def _add_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the positional paths and global options.

        Paths are optional here so that a missing path is reported
        through the pipeline's own exit code instead of an argparse
        usage error.
        """
        parser.add_argument(
            "paths",
            nargs="*",
            metavar="PATH",
            help="Path to the XML submission file; extra paths are ignored",
        )
        parser.add_argument(
            "--timeout",
            type=_positive_int,
            default=None,
            metavar="SECONDS",
            help="Per-request timeout for the GitHub checks",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show submission-validator version and exit",
        )


def _in_command_line_order(argv: list[str], tokens: list[str]) -> list[str]:
    """Return ``tokens`` ordered as they appear in ``argv``."""
    remaining = Counter(tokens)
    ordered = []
    for token in argv:
        if remaining[token] > 0:
            remaining[token] -= 1
            ordered.append(token)
    return ordered


def _positive_int(value: str) -> int:
    """Argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        msg = f"must be a positive integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number

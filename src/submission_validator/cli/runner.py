"""CLI runner for submission-validator.

Loads settings, runs the validation pipeline and reports its outcome on
the right stream. Returns the exit code instead of exiting so callers
(and tests) decide when the process ends.
"""

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO, assert_never

from .. import __version__
from ..config import Settings, load_settings
from ..domain.outcome import Outcome
from ..logger import apply_logging_settings, get_logger
from ..pipeline import ValidationPipeline, ValidationReport
from .parser import CLIParser

logger = get_logger(__name__)


def stream_for(outcome: Outcome) -> TextIO:
    """Return the stream an outcome's message is written to."""
    match outcome:
        case Outcome.SUCCESS:
            return sys.stdout
        case (
            Outcome.MISSING_INPUT_PATH
            | Outcome.INPUT_FILE_NOT_FOUND
            | Outcome.SCHEMA_NOT_FOUND
            | Outcome.SCHEMA_VALIDATION_ERROR
            | Outcome.REPOSITORY_VALIDATION_FAILED
            | Outcome.COMMIT_VALIDATION_FAILED
            | Outcome.UNEXPECTED_ERROR
        ):
            return sys.stderr
        case _:
            assert_never(outcome)


class CLIRunner:
    """Command-line orchestrator."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize runner.

        Args:
            settings: Preloaded settings; read from settings.conf when None

        """
        self.settings = settings or load_settings()

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments, validate the submission and report.

        Args:
            argv: Arguments without the program name

        Returns:
            Process exit code

        """
        try:
            args = CLIParser().parse_args(argv)
        except argparse.ArgumentError as e:
            report = ValidationReport(Outcome.UNEXPECTED_ERROR, cause=e)
            self.report(report)
            return report.exit_code
        except SystemExit as e:
            # --help prints and exits through argparse
            return e.code if isinstance(e.code, int) else 0

        if args.version:
            print(__version__)
            return 0

        apply_logging_settings(
            self.settings,
            console_level="DEBUG" if args.verbose else None,
        )

        timeout = args.timeout or self.settings.network.timeout_seconds
        pipeline = ValidationPipeline(timeout_seconds=timeout)

        report = await pipeline.run(args.paths)
        self.report(report)
        return report.exit_code

    @staticmethod
    def report(report: ValidationReport) -> None:
        """Write the report's message to stdout or stderr."""
        print(report.describe(), file=stream_for(report.outcome))

"""Main CLI entry point for submission-validator.

Runs the CLI runner on uvloop and turns the outcome code into the process
exit status.
"""

import sys

import uvloop

from submission_validator.cli import CLIRunner
from submission_validator.domain.outcome import Outcome
from submission_validator.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously and return its exit code."""
    logger.debug("CLI started")
    runner = CLIRunner()
    exit_code = await runner.run()
    logger.debug("CLI finished with exit code %s", exit_code)
    return exit_code


def main() -> None:
    """Run the CLI application and exit with the outcome code."""
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        print("\n⏹️  Operation cancelled by user")
        sys.exit(1)
    except Exception as e:
        # Failures before the pipeline boundary, e.g. unusable settings
        logger.debug("Unexpected error", exc_info=True)
        print(f"{Outcome.UNEXPECTED_ERROR.message}: {e}", file=sys.stderr)
        sys.exit(Outcome.UNEXPECTED_ERROR.code)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

"""Validation pipeline.

Runs the steps of a submission check strictly in order:

    file located → schema valid → parsed → repository confirmed
    → commit confirmed → success

The first failing step ends the run. Named failures keep their outcome;
anything else is reported as UNEXPECTED_ERROR. The pipeline never prints
or exits; that is left to the command-line runner.
"""

from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from pathlib import Path

import aiohttp

from submission_validator.constants import DEFAULT_TIMEOUT_SECONDS
from submission_validator.domain.outcome import Outcome
from submission_validator.domain.submission import Submission
from submission_validator.exceptions import ValidationFailure
from submission_validator.github.checks import CommitChecker, RepositoryChecker
from submission_validator.github.session import create_http_session
from submission_validator.logger import get_logger
from submission_validator.parser import parse_submission
from submission_validator.schema.validator import SchemaValidator

logger = get_logger(__name__)

SessionFactory = Callable[
    [int], AbstractAsyncContextManager[aiohttp.ClientSession]
]


@dataclass(slots=True, frozen=True)
class ValidationReport:
    """Result of one pipeline run.

    Attributes:
        outcome: Outcome the run ended with
        cause: Lower-level error behind a failure, if any
        submission: Parsed submission, set on success only

    """

    outcome: Outcome
    cause: BaseException | None = None
    submission: Submission | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status for this report."""
        return self.outcome.code

    def describe(self) -> str:
        """Render the user-facing message, including the cause."""
        if self.outcome is Outcome.UNEXPECTED_ERROR:
            detail = str(self.cause) if self.cause is not None else ""
            return f"{self.outcome.message}: {detail or 'Unknown error'}"
        if self.cause is not None and str(self.cause):
            return f"{self.outcome.message}\n\n{self.cause}"
        return self.outcome.message


class ValidationPipeline:
    """Checks one submission file end to end."""

    def __init__(
        self,
        schema_validator: SchemaValidator | None = None,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        session_factory: SessionFactory = create_http_session,
    ) -> None:
        """Initialize the pipeline.

        Args:
            schema_validator: Validator for the bundled schema
            timeout_seconds: Per-request timeout of the remote checks
            session_factory: Callable returning an async context manager
                that yields an aiohttp session

        """
        self.schema_validator = schema_validator or SchemaValidator()
        self.timeout_seconds = timeout_seconds
        self.session_factory = session_factory

    async def run(self, args: Sequence[str]) -> ValidationReport:
        """Run every step for the file named by ``args[0]``.

        Args:
            args: Command-line arguments; only the first is used

        Returns:
            Report carrying the outcome of the run

        """
        try:
            submission = await self._run_steps(args)
        except ValidationFailure as failure:
            logger.info("Validation failed: %s", failure.outcome.name)
            logger.debug("%s", failure)
            return ValidationReport(failure.outcome, cause=failure.cause)
        except Exception as e:
            # stderr already gets the message from the runner
            logger.debug("Unexpected error during validation", exc_info=True)
            return ValidationReport(Outcome.UNEXPECTED_ERROR, cause=e)

        logger.info("Validation succeeded for %s", submission.repository_url)
        return ValidationReport(Outcome.SUCCESS, submission=submission)

    async def _run_steps(self, args: Sequence[str]) -> Submission:
        """Run the steps in order, raising on the first failure."""
        xml_file = self._locate_input(args)

        self.schema_validator.validate(xml_file)
        submission = parse_submission(xml_file)

        async with self.session_factory(self.timeout_seconds) as session:
            confirmation = await RepositoryChecker(session).check(
                submission.repository_url
            )
            await CommitChecker(session).check(
                confirmation, submission.last_commit_hash
            )

        return submission

    @staticmethod
    def _locate_input(args: Sequence[str]) -> Path:
        """Return the input path after checking it names a regular file.

        Raises:
            ValidationFailure: MISSING_INPUT_PATH or INPUT_FILE_NOT_FOUND

        """
        if not args:
            raise ValidationFailure(Outcome.MISSING_INPUT_PATH)

        xml_file = Path(args[0])
        if not xml_file.is_file():
            raise ValidationFailure(
                Outcome.INPUT_FILE_NOT_FOUND, target=str(xml_file)
            )

        logger.debug("Validating %s", xml_file)
        return xml_file

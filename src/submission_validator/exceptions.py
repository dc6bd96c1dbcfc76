"""Exception classes for submission-validator operations."""

from submission_validator.domain.outcome import Outcome


class SubmissionValidatorError(Exception):
    """Base exception for submission-validator operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ValidationFailure(SubmissionValidatorError):
    """Raised when a pipeline step fails with a named outcome.

    The outcome decides the exit code; the optional cause is the
    lower-level error kept for diagnostic text.
    """

    def __init__(
        self,
        outcome: Outcome,
        cause: BaseException | None = None,
        target: str | None = None,
    ) -> None:
        """Initialize failure with its outcome and optional cause.

        Args:
            outcome: Outcome the run ends with.
            cause: Lower-level error that triggered the failure.
            target: Optional path or URL the step was working on.

        """
        super().__init__(outcome.message, target=target)
        self.outcome = outcome
        self.cause = cause

    def __str__(self) -> str:
        """Return the outcome message, then the target and cause if set."""
        parts = [self.message]
        if self.target:
            parts.append(f"Target: {self.target}")
        if self.cause is not None and str(self.cause):
            parts.append(str(self.cause))
        return "\n\n".join(parts)


class ConfigurationError(SubmissionValidatorError):
    """Raised when logging or settings cannot be configured."""

    error_prefix = "Configuration failed"

"""Pure domain types without IO dependencies."""

from submission_validator.domain.outcome import Outcome
from submission_validator.domain.submission import Submission

__all__ = ["Outcome", "Submission"]

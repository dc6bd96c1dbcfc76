"""Remote existence checks against GitHub.

Each check issues exactly one GET and accepts only HTTP 200. There is no
retry; network errors propagate to the caller unchanged.

The commit check takes the ``RepositoryConfirmation`` returned by a
successful repository check, so it cannot run before one.
"""

from dataclasses import dataclass

import aiohttp

from submission_validator.constants import GITHUB_ACCEPT_HEADER, HTTP_OK
from submission_validator.domain.outcome import Outcome
from submission_validator.exceptions import ValidationFailure
from submission_validator.github.urls import build_commit_api_url
from submission_validator.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class RepositoryConfirmation:
    """Proof that a repository URL answered with HTTP 200.

    Attributes:
        repository_url: The confirmed repository URL
        status: HTTP status returned by the repository check

    """

    repository_url: str
    status: int


class RepositoryChecker:
    """Confirms a repository URL is publicly reachable."""

    def __init__(self, session: aiohttp.ClientSession) -> None:
        """Initialize the checker.

        Args:
            session: aiohttp session scoped to the validation run

        """
        self.session = session

    async def check(self, repository_url: str) -> RepositoryConfirmation:
        """GET the repository URL without following redirects.

        Args:
            repository_url: Repository URL from the submission

        Returns:
            Confirmation token required by ``CommitChecker.check``

        Raises:
            ValidationFailure: REPOSITORY_VALIDATION_FAILED on any status
                other than 200
            aiohttp.ClientError: On network failure
            TimeoutError: When the request exceeds the session timeout

        """
        logger.debug("Checking repository %s", repository_url)
        async with self.session.get(
            repository_url, allow_redirects=False
        ) as response:
            status = response.status

        if status != HTTP_OK:
            logger.debug(
                "Repository check failed for %s: HTTP %s",
                repository_url,
                status,
            )
            raise ValidationFailure(
                Outcome.REPOSITORY_VALIDATION_FAILED,
                cause=Exception(
                    f"Repository inaccessible or private (HTTP {status})"
                ),
                target=repository_url,
            )

        logger.info("Repository found: %s", repository_url)
        return RepositoryConfirmation(repository_url, status)


class CommitChecker:
    """Confirms a commit exists in a confirmed repository."""

    def __init__(self, session: aiohttp.ClientSession) -> None:
        """Initialize the checker.

        Args:
            session: aiohttp session scoped to the validation run

        """
        self.session = session

    async def check(
        self, confirmation: RepositoryConfirmation, commit_hash: str
    ) -> None:
        """GET the commit from the GitHub REST API.

        Args:
            confirmation: Token from a successful repository check
            commit_hash: Commit identifier; format is left to the API

        Raises:
            TypeError: If ``confirmation`` is not a RepositoryConfirmation
            ValidationFailure: COMMIT_VALIDATION_FAILED on any status other
                than 200 or when no API URL can be derived
            aiohttp.ClientError: On network failure
            TimeoutError: When the request exceeds the session timeout

        """
        if not isinstance(confirmation, RepositoryConfirmation):
            msg = "Commit check requires a RepositoryConfirmation"
            raise TypeError(msg)

        try:
            api_url = build_commit_api_url(
                confirmation.repository_url, commit_hash
            )
        except ValueError as e:
            raise ValidationFailure(
                Outcome.COMMIT_VALIDATION_FAILED,
                cause=e,
                target=confirmation.repository_url,
            ) from e

        logger.debug("Checking commit %s via %s", commit_hash, api_url)
        async with self.session.get(
            api_url, headers={"Accept": GITHUB_ACCEPT_HEADER}
        ) as response:
            status = response.status

        if status != HTTP_OK:
            logger.debug("Commit check failed for %s: HTTP %s", api_url, status)
            raise ValidationFailure(
                Outcome.COMMIT_VALIDATION_FAILED,
                cause=Exception(
                    f"Commit not found in repository (HTTP {status})"
                ),
                target=api_url,
            )

        logger.info("Commit found: %s", commit_hash)

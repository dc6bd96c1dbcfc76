"""Tests for the repository and commit existence checks."""

import aiohttp
import pytest

from submission_validator.constants import GITHUB_ACCEPT_HEADER
from submission_validator.domain.outcome import Outcome
from submission_validator.exceptions import ValidationFailure
from submission_validator.github import (
    CommitChecker,
    RepositoryChecker,
    RepositoryConfirmation,
)
from tests.conftest import (
    COMMIT_API_URL,
    COMMIT_HASH,
    REPOSITORY_URL,
    make_response_cm,
)


class TestRepositoryChecker:
    """Test suite for RepositoryChecker."""

    @pytest.mark.asyncio
    async def test_ok_returns_confirmation(self, mock_session):
        mock_session.get.return_value = make_response_cm(200)

        confirmation = await RepositoryChecker(mock_session).check(
            REPOSITORY_URL
        )

        assert confirmation == RepositoryConfirmation(REPOSITORY_URL, 200)
        mock_session.get.assert_called_once_with(
            REPOSITORY_URL, allow_redirects=False
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [301, 302, 403, 404, 500, 503])
    async def test_non_ok_status_fails(self, mock_session, status):
        mock_session.get.return_value = make_response_cm(status)

        with pytest.raises(ValidationFailure) as exc_info:
            await RepositoryChecker(mock_session).check(REPOSITORY_URL)

        assert exc_info.value.outcome is Outcome.REPOSITORY_VALIDATION_FAILED
        assert f"HTTP {status}" in str(exc_info.value.cause)
        assert mock_session.get.call_count == 1

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, mock_session):
        mock_session.get.side_effect = aiohttp.ClientConnectionError("down")

        with pytest.raises(aiohttp.ClientConnectionError):
            await RepositoryChecker(mock_session).check(REPOSITORY_URL)

        assert mock_session.get.call_count == 1


class TestCommitChecker:
    """Test suite for CommitChecker."""

    @pytest.fixture
    def confirmation(self):
        return RepositoryConfirmation(REPOSITORY_URL, 200)

    @pytest.mark.asyncio
    async def test_ok(self, mock_session, confirmation):
        mock_session.get.return_value = make_response_cm(200)

        await CommitChecker(mock_session).check(confirmation, COMMIT_HASH)

        mock_session.get.assert_called_once_with(
            COMMIT_API_URL, headers={"Accept": GITHUB_ACCEPT_HEADER}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 422, 500])
    async def test_non_ok_status_fails(
        self, mock_session, confirmation, status
    ):
        mock_session.get.return_value = make_response_cm(status)

        with pytest.raises(ValidationFailure) as exc_info:
            await CommitChecker(mock_session).check(confirmation, COMMIT_HASH)

        assert exc_info.value.outcome is Outcome.COMMIT_VALIDATION_FAILED
        assert "Commit not found" in str(exc_info.value.cause)

    @pytest.mark.asyncio
    async def test_requires_repository_confirmation(self, mock_session):
        with pytest.raises(TypeError):
            await CommitChecker(mock_session).check(
                REPOSITORY_URL,  # type: ignore[arg-type]
                COMMIT_HASH,
            )

        mock_session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_underivable_api_url_fails(self, mock_session):
        confirmation = RepositoryConfirmation("https://github.com/acme", 200)

        with pytest.raises(ValidationFailure) as exc_info:
            await CommitChecker(mock_session).check(confirmation, COMMIT_HASH)

        assert exc_info.value.outcome is Outcome.COMMIT_VALIDATION_FAILED
        assert isinstance(exc_info.value.cause, ValueError)
        mock_session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_propagates(self, mock_session, confirmation):
        mock_session.get.side_effect = TimeoutError()

        with pytest.raises(TimeoutError):
            await CommitChecker(mock_session).check(confirmation, COMMIT_HASH)

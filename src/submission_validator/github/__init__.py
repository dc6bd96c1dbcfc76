"""GitHub existence checks and URL helpers."""

from submission_validator.github.checks import (
    CommitChecker,
    RepositoryChecker,
    RepositoryConfirmation,
)
from submission_validator.github.session import create_http_session
from submission_validator.github.urls import (
    build_commit_api_url,
    parse_repository_url,
)

__all__ = [
    "CommitChecker",
    "RepositoryChecker",
    "RepositoryConfirmation",
    "build_commit_api_url",
    "create_http_session",
    "parse_repository_url",
]

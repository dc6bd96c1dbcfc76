"""Pytest configuration and fixtures for submission-validator tests."""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from pathlib import Path
from unittest.mock import MagicMock

import aiohttp
import pytest

REPOSITORY_URL = "https://github.com/acme/widget"
COMMIT_HASH = "0123456789abcdef0123456789abcdef01234567"
COMMIT_API_URL = (
    f"https://api.github.com/repos/acme/widget/commits/{COMMIT_HASH}"
)

FIELD_ORDER = (
    "name",
    "matrikelnummer",
    "lastcommithash",
    "githubusername",
    "repositoryname",
    "repositoryurl",
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("submission_validator"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


def build_submission_xml(
    overrides: dict[str, str] | None = None,
    omit: tuple[str, ...] = (),
    namespace: str | None = None,
) -> str:
    """Render a submission document.

    Args:
        overrides: Element values replacing the defaults
        omit: Element names left out of the document
        namespace: Default namespace declared on the root element

    """
    values = {
        "name": "Ada Lovelace",
        "matrikelnummer": "12345678",
        "lastcommithash": COMMIT_HASH,
        "githubusername": "ada",
        "repositoryname": "widget",
        "repositoryurl": REPOSITORY_URL,
    }
    values.update(overrides or {})

    xmlns = f' xmlns="{namespace}"' if namespace else ""
    children = "".join(
        f"    <{field}>{values[field]}</{field}>\n"
        for field in FIELD_ORDER
        if field not in omit
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<person{xmlns}>\n{children}</person>\n"
    )


@pytest.fixture
def submission_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a submission document into ``tmp_path``."""

    def _write(content: str | None = None, name: str = "abgabe.xml") -> Path:
        path = tmp_path / name
        path.write_text(
            build_submission_xml() if content is None else content,
            encoding="utf-8",
        )
        return path

    return _write


def make_response_cm(status: int) -> MagicMock:
    """Create an async context manager yielding a response with ``status``."""
    response = MagicMock()
    response.status = status
    context_manager = MagicMock()
    context_manager.__aenter__.return_value = response
    context_manager.__aexit__.return_value = False
    return context_manager


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp session."""
    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def route_statuses(mock_session: MagicMock) -> Callable[[dict[str, int]], None]:
    """Make ``mock_session.get`` answer each URL with a fixed status."""

    def _route(statuses: dict[str, int]) -> None:
        def _get(url, **_kwargs):
            return make_response_cm(statuses[url])

        mock_session.get.side_effect = _get

    return _route


@pytest.fixture
def session_factory(mock_session: MagicMock):
    """Session factory yielding ``mock_session`` and recording timeouts."""
    timeouts: list[int] = []

    @asynccontextmanager
    async def _factory(timeout_seconds: int):
        timeouts.append(timeout_seconds)
        yield mock_session

    _factory.timeouts = timeouts
    return _factory

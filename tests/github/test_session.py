"""Tests for the scoped HTTP session."""

import aiohttp
import pytest

from submission_validator.github.session import create_http_session


@pytest.mark.asyncio
async def test_session_uses_timeout_and_closes():
    async with create_http_session(timeout_seconds=7) as session:
        assert isinstance(session, aiohttp.ClientSession)
        assert session.timeout.total == 7
        assert not session.closed

    assert session.closed


@pytest.mark.asyncio
async def test_session_closes_on_error():
    with pytest.raises(RuntimeError):
        async with create_http_session() as session:
            raise RuntimeError("boom")

    assert session.closed

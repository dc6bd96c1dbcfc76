"""HTTP session utilities.

Provides the scoped aiohttp session shared by the repository and commit
checks of a single validation run.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from submission_validator.constants import DEFAULT_TIMEOUT_SECONDS


@asynccontextmanager
async def create_http_session(
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create a session with a fixed per-request timeout.

    Args:
        timeout_seconds: Total time allowed for each request

    Yields:
        Configured aiohttp.ClientSession, closed on exit

    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session

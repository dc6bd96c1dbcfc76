"""Logging utilities for submission-validator.

Architecture:
    Application → QueueHandler → Queue → QueueListener Thread
                                              ↓
                                    Console (+ optional File) Handlers

Usage:
    >>> from submission_validator.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Checking %s", url)  # Use %-style formatting

Environment Variables:
    SUBMISSION_VALIDATOR_LOG_LEVEL: Override the bootstrap console level
        Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from typing import TYPE_CHECKING

from submission_validator.logger.config import (
    apply_logging_settings as _apply_settings,
)
from submission_validator.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from submission_validator.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from submission_validator.logger.state import _state, get_state

if TYPE_CHECKING:
    from submission_validator.config import Settings

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "_state",  # For testing only
    "apply_logging_settings",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
]


def apply_logging_settings(
    settings: "Settings", *, console_level: str | None = None
) -> None:
    """Apply settings.conf logging values to the global logger state.

    Example:
        >>> from submission_validator.config import load_settings
        >>> apply_logging_settings(load_settings(), console_level="DEBUG")

    """
    setup_logging()
    _apply_settings(get_state(), settings, console_level=console_level)

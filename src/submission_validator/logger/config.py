"""Applying settings.conf values to the logging system."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from submission_validator.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
)
from submission_validator.logger.handlers import (
    create_file_handler,
    start_listener,
)

if TYPE_CHECKING:
    from submission_validator.config import Settings
    from submission_validator.logger.state import _LoggerState

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_console_level() -> str:
    """Return the bootstrap console level.

    ``SUBMISSION_VALIDATOR_LOG_LEVEL`` overrides the default, mainly for
    test runs. Unknown values are ignored.
    """
    env_level = os.getenv(ENV_LOG_LEVEL, "").upper()
    if env_level in VALID_LEVELS:
        return env_level
    return DEFAULT_CONSOLE_LOG_LEVEL


def apply_logging_settings(
    state: "_LoggerState",
    settings: "Settings",
    *,
    console_level: str | None = None,
) -> None:
    """Apply levels and optional file logging from settings.

    Only the console handler level changes unless file logging is enabled
    (or was enabled before), in which case the listener is restarted with
    a rotating file handler under ``<config dir>/logs``.

    Args:
        state: Logger state object (from logger.state module)
        settings: Loaded settings
        console_level: Explicit console level overriding the settings,
            e.g. DEBUG for ``--verbose``

    """
    level_name = console_level or settings.console_log_level
    level = getattr(logging, level_name, logging.WARNING)

    console_handlers = [
        h for h in state.handlers if not isinstance(h, RotatingFileHandler)
    ]
    old_file_handlers = [
        h for h in state.handlers if isinstance(h, RotatingFileHandler)
    ]
    for handler in console_handlers:
        handler.setLevel(level)

    if settings.file_logging or old_file_handlers:
        handlers: list[logging.Handler] = list(console_handlers)
        if settings.file_logging:
            log_file = settings.config_dir / "logs" / LOG_FILE_NAME
            handlers.append(create_file_handler(log_file, settings.log_level))
        start_listener(state, handlers)
        for handler in old_file_handlers:
            handler.close()

    state.settings_applied = True

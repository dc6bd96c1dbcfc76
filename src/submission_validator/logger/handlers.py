"""Handler creation for the logging system.

Handlers are never attached to loggers directly. They are served by the
QueueListener so that the event loop never blocks on handler I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from submission_validator.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
    LOGGER_ROOT_NAME,
)
from submission_validator.exceptions import ConfigurationError
from submission_validator.logger.formatters import HybridConsoleFormatter


def create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create the stderr handler with hybrid formatting.

    Args:
        console_level: Log level name, e.g. "WARNING"

    Returns:
        Configured StreamHandler

    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def create_file_handler(log_file: Path, file_level: str) -> RotatingFileHandler:
    """Create a rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level name for the file

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg, target=str(log_file)) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    return file_handler


def start_listener(state, handlers: list[logging.Handler]) -> None:
    """(Re)start the QueueListener serving ``handlers``.

    A running listener is stopped first; the queue is reused so records
    already enqueued are not lost.

    Args:
        state: Logger state object (from logger.state module)
        handlers: Handlers the listener should dispatch to

    """
    if state.queue_listener is not None:
        state.queue_listener.stop()

    if state.log_queue is None:
        state.log_queue = queue.Queue(-1)

    state.handlers = list(handlers)
    state.queue_listener = QueueListener(
        state.log_queue,
        *state.handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()


def setup_root_logger(state, console_level: str) -> None:
    """Initialize the package root logger with a console handler.

    Called exactly once per process (or per test after
    ``clear_logger_state()``).

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level name

    """
    root_logger = logging.getLogger(LOGGER_ROOT_NAME)
    root_logger.setLevel(logging.DEBUG)  # filter at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    start_listener(state, [create_console_handler(console_level)])
    root_logger.addHandler(QueueHandler(state.log_queue))

    state.root_initialized = True

"""Public logging API.

- setup_logging(): initialize the root logger once, return a named logger
- get_logger(): recommended wrapper, use with ``__name__``
- flush_all_handlers(): drain the queue and flush handler buffers
- clear_logger_state(): reset everything, for tests only
"""

import atexit
import contextlib
import logging
import time

from submission_validator.constants import LOGGER_ROOT_NAME
from submission_validator.logger.config import load_console_level
from submission_validator.logger.handlers import setup_root_logger
from submission_validator.logger.state import get_state


def flush_all_handlers() -> None:
    """Wait for queued records to be dispatched and flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    deadline = time.monotonic() + 1.0
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)

    # the last record may be dequeued but not yet emitted
    time.sleep(0.1)

    for handler in state.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = LOGGER_ROOT_NAME,
    console_level: str | None = None,
) -> logging.Logger:
    """Initialize the root logger if needed and return ``name``'s logger.

    Child loggers such as ``submission_validator.pipeline`` propagate to
    the root, which is the only logger holding a (queue) handler.

    Args:
        name: Logger name, typically ``__name__``
        console_level: Console level; defaults to the environment override
            or WARNING

    Returns:
        Logger instance

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            setup_root_logger(state, console_level or load_console_level())

    return logging.getLogger(name)


def get_logger(name: str = LOGGER_ROOT_NAME) -> logging.Logger:
    """Get a package logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Validating %s", path)

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Reset logger state for test isolation.

    Stops the listener and closes every handler. Logger objects are kept
    so module-level loggers stay attached to the hierarchy.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        for handler in state.handlers:
            handler.close()
        state.handlers = []
        state.log_queue = None
        state.root_initialized = False
        state.settings_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(LOGGER_ROOT_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)

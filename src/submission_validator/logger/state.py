"""Logger state singleton.

Holds the one QueueListener shared by every ``submission_validator``
logger. Do not replace the module-level instance; tests reset it through
``clear_logger_state()``.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging import Handler
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state.

    Attributes:
        lock: Thread lock for root logger initialization
        root_initialized: Whether the root logger has been set up
        settings_applied: Whether settings.conf levels have been applied
        queue_listener: Background thread processing log records
        log_queue: Queue shared by the QueueHandler and the listener
        handlers: Handlers currently served by the listener

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.settings_applied = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None
        self.handlers: list[Handler] = []


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state

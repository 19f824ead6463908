"""Process-wide logging state shared by the logger modules.

setup_logging(), setup_file_logging() and clear_logger_state() all read
and mutate the one _LoggerState below under its lock.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """What the CLI has set up so far.

    Attributes:
        lock: Guards initialization and handler changes
        root_initialized: setup_logging() has attached the QueueHandler
        file_logging_enabled: A RotatingFileHandler is being served
        queue_listener: Thread writing queued records to the handlers
        log_queue: Queue between the QueueHandler and the listener

    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.root_initialized = False
        self.file_logging_enabled = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the process-wide logging state."""
    return _state

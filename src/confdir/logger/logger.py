"""Main logger module providing public API functions.

This module contains the core public API for the confdir logging system:
- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get a logger under the confdir hierarchy (no setup)
- setup_file_logging(): Attach the rotating log file after start-up
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from confdir.constants import LOGGER_ROOT_NAME
from confdir.logger.config import default_log_file, load_log_settings
from confdir.logger.handlers import attach_file_handler, setup_root_logger
from confdir.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler's buffer.
    Records may be dequeued but not yet written, so tests that read the
    log file call this first.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        timeout = 5.0
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        # Give queue listener thread time to process final records
        time.sleep(0.1)

        for handler in state.queue_listener.handlers:
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


def _install_null_handler() -> None:
    """Give the root logger a NullHandler and let records propagate.

    Until setup_logging() runs, records go to whatever logging the host
    application configured.
    """
    root_logger = logging.getLogger(LOGGER_ROOT_NAME)
    root_logger.propagate = True
    if not any(
        isinstance(h, logging.NullHandler) for h in root_logger.handlers
    ):
        root_logger.addHandler(logging.NullHandler())


_install_null_handler()


def setup_logging(
    name: str = LOGGER_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging with the QueueHandler architecture.

    The root "confdir" logger is initialized exactly once; later calls
    only return the requested logger. Child loggers propagate to the root.

    Handler Configuration (via QueueListener):
        - Console Handler: StreamHandler with hybrid output to stdout
        - File Handler: RotatingFileHandler (only when enabled)

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
            (default: <confdir config dir>/logs/confdir.log)
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    # Resolved outside the lock; default_log_file() may import confdir.paths
    if enable_file_logging and log_file is None:
        log_file = default_log_file()

    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file = load_log_settings()
            console_level = console_level or cfg_console
            file_level = file_level or cfg_file

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = LOGGER_ROOT_NAME) -> logging.Logger:
    """Get a logger under the confdir hierarchy.

    This is the recommended way to get a logger in confdir modules:
        >>> from confdir.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Resolved %s", path)

    No handler is attached here, so importing confdir never configures
    logging. The CLI calls setup_logging() to get console output.

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Logger instance (singleton per name)

    """
    return logging.getLogger(name)


def setup_file_logging(
    log_file: Path | None = None,
    file_level: str | None = None,
) -> None:
    """Enable the rotating log file on the running root logger.

    Idempotent: a second call is a no-op once a file handler is attached.

    Args:
        log_file: Path to log file (default from default_log_file())
        file_level: File log level (default from load_log_settings())

    Raises:
        ConfigurationError: If the file handler cannot be created

    """
    setup_logging()
    if log_file is None:
        log_file = default_log_file()
    if file_level is None:
        _, file_level = load_log_settings()

    state = get_state()
    with state.lock:
        if state.file_logging_enabled:
            return
        attach_file_handler(state, log_file, file_level)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes and removes handlers, resets the
    state flags and restores the library default (NullHandler, propagate).

    Warning:
        Intended for tests only; it disrupts all active logging.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.file_logging_enabled = False

        # Module-level loggers keep their Logger objects, so only handlers
        # are removed; the next setup_logging() re-attaches the root
        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(("test-", LOGGER_ROOT_NAME)):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)

        _install_null_handler()

"""Handler creation and management for logging system.

This module provides functions for creating and configuring logging handlers:
- Console handler with hybrid formatting
- Rotating file handler, attached on demand
- Root logger setup with QueueListener so callers never block on I/O
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from confdir.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
    LOGGER_ROOT_NAME,
)
from confdir.logger.formatters import HybridConsoleFormatter


class ConfigurationError(Exception):
    """Error in logging configuration."""


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create and configure console handler with hybrid formatting.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "WARNING")

    Returns:
        Configured StreamHandler for console output

    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def _create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create and configure rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If file handler creation fails

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                LOG_FILE_FORMAT,
                datefmt=LOG_FILE_DATE_FORMAT,
            )
        )
        file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e
    else:
        return file_handler


def _start_listener(state, handlers: list[logging.Handler]) -> None:
    """Replace the state's QueueListener with one serving ``handlers``."""
    if state.queue_listener is not None:
        state.queue_listener.stop()
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path | None,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Initialize root logger with handlers via QueueListener.

    Called exactly once per process (or after clear_logger_state()).

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level (e.g., "INFO", "WARNING")
        file_level: File log level (e.g., "DEBUG", "INFO")
        log_file: Path to log file (required when file logging is enabled)
        enable_file_logging: Whether to enable file logging

    Raises:
        ConfigurationError: If handler setup fails

    """
    root_logger = logging.getLogger(LOGGER_ROOT_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    # Remove any existing handlers (for test isolation)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [_create_console_handler(console_level)]

    if enable_file_logging:
        if log_file is None:
            msg = "File logging enabled without a log file"
            raise ConfigurationError(msg)
        handlers.append(_create_file_handler(log_file, file_level))
        state.file_logging_enabled = True

    state.log_queue = queue.Queue(-1)
    _start_listener(state, handlers)

    root_logger.addHandler(QueueHandler(state.log_queue))

    state.root_initialized = True


def attach_file_handler(state, log_file: Path, file_level: str) -> None:
    """Add a rotating file handler to an already running root logger.

    The QueueListener handler set is fixed at construction, so the
    listener is restarted with the extended handler list.

    Args:
        state: Logger state object with an initialized root logger
        log_file: Path to log file
        file_level: Log level for file output

    Raises:
        ConfigurationError: If the root logger is not initialized or the
            file handler cannot be created

    """
    if state.queue_listener is None or state.log_queue is None:
        msg = "Root logger is not initialized"
        raise ConfigurationError(msg)

    file_handler = _create_file_handler(log_file, file_level)
    handlers = [*state.queue_listener.handlers, file_handler]
    _start_listener(state, handlers)
    state.file_logging_enabled = True

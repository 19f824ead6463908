"""Logging utilities for confdir.

This package provides structured logging with:
- No handlers until setup_logging(); importing confdir leaves the
  host application's logging alone (NullHandler, propagation)
- Colored console output with ANSI color codes (CLI only)
- Optional file rotation using RotatingFileHandler
- Non-blocking logging via QueueHandler/QueueListener
- Hierarchical logger naming (e.g., confdir.store, confdir.paths)

Architecture:
    Module loggers → QueueHandler → Queue → QueueListener Thread
                                                 ↓
                                       Console (+ File) Handlers

Usage:
    >>> from confdir.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Writing %s", path)  # Use %-style formatting

Environment Variables:
    CONFDIR_LOG_LEVEL: Console level override (DEBUG, INFO, WARNING, ...)
    CONFDIR_LOG_DIR: Log directory override for file logging

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls; use %-formatting
"""

from confdir.logger.config import set_console_level as _set_console_level
from confdir.logger.formatters import HybridConsoleFormatter
from confdir.logger.handlers import ConfigurationError
from confdir.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_file_logging,
    setup_logging,
)
from confdir.logger.state import _state, get_state

__all__ = [
    "ConfigurationError",
    "HybridConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "set_console_level",
    "setup_file_logging",
    "setup_logging",
]


def set_console_level(level: str) -> None:
    """Change the console handler level of the running root logger.

    Example:
        >>> from confdir.logger import set_console_level
        >>> set_console_level("DEBUG")  # e.g. for --verbose

    """
    _set_console_level(get_state(), level)

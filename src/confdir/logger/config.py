"""Configuration loading and updating for logging system.

Log settings come from environment variables with defaults from
confdir.constants. Handler levels can be changed at runtime, for
example when the CLI is run with --verbose.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from confdir.constants import (
    APP_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_DIR_NAME,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from confdir.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str]:
    """Load console and file log levels.

    Environment Variable Override:
        CONFDIR_LOG_LEVEL: Overrides the console level. Unknown level
        names fall back to the default.

    Returns:
        Tuple of (console_level, file_level) where:
            - console_level: Log level for console output (default: WARNING)
            - file_level: Log level for file output (default: INFO)

    """
    console_level = os.getenv(ENV_LOG_LEVEL, "").upper()
    if console_level not in logging.getLevelNamesMapping():
        console_level = DEFAULT_CONSOLE_LOG_LEVEL
    return console_level, DEFAULT_LOG_LEVEL


def default_log_file() -> Path:
    """Get the default log file path.

    Environment Variable Override:
        CONFDIR_LOG_DIR: Overrides the log directory. Used by the test
        suite to keep logs out of the real config directory.

        When set: $CONFDIR_LOG_DIR/confdir.log
        When not set: <confdir config dir>/logs/confdir.log

    Returns:
        Log file path

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME

    # Import here to avoid circular dependency (paths logs through us)
    from confdir.paths import get_dir_for  # noqa: PLC0415

    return get_dir_for(APP_NAME) / LOG_DIR_NAME / LOG_FILE_NAME


def set_console_level(state: "_LoggerState", level: str) -> None:
    """Set the level of the console handler in the QueueListener.

    File handlers keep their level. Does nothing before the root logger
    is initialized.

    Args:
        state: Logger state object (from logger.state module)
        level: Level name such as "DEBUG" or "WARNING"

    """
    if state.queue_listener is None:
        return

    console_level = getattr(logging, level.upper(), logging.WARNING)
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, RotatingFileHandler
        ):
            handler.setLevel(console_level)

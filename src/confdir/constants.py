"""Centralized constants module for confdir.

This module is the single source of truth for shared constants: default
file names, encodings, platform identifiers, extension dispatch and the
logging layout. Constants use typing.Final annotations to signal
immutability.

Usage:
    from confdir.constants import DEFAULT_FILE_NAME
"""

from typing import Final

# =============================================================================
# Store Constants
# =============================================================================

# File used when the caller does not name one
DEFAULT_FILE_NAME: Final[str] = "config.json"

# Encodings used for text formats (binary formats bypass them)
DEFAULT_READ_ENCODING: Final[str] = "utf-8"
DEFAULT_WRITE_ENCODING: Final[str] = "utf-8"

# =============================================================================
# Platform Constants
# =============================================================================

# Values as reported by sys.platform
PLATFORM_WINDOWS: Final[str] = "win32"
PLATFORM_MACOS: Final[str] = "darwin"

ENV_APPDATA: Final[str] = "APPDATA"
ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"

# Path parts joined under the home directory when the env var is unset
WINDOWS_ROAMING_SUBPATH: Final[tuple[str, ...]] = ("AppData", "Roaming")
MACOS_SUPPORT_SUBPATH: Final[tuple[str, ...]] = (
    "Library",
    "Application Support",
)
XDG_DEFAULT_SUBPATH: Final[tuple[str, ...]] = (".config",)

# =============================================================================
# Format Constants
# =============================================================================

FORMAT_PRETTY_JSON: Final[str] = "PRETTY_JSON"
FORMAT_JSON: Final[str] = "JSON"
FORMAT_YAML: Final[str] = "YAML"
FORMAT_YML: Final[str] = "YML"
FORMAT_INI: Final[str] = "INI"
FORMAT_BIN: Final[str] = "BIN"
FORMAT_ID: Final[str] = "ID"
FORMAT_LINES: Final[str] = "LINES"

# File suffix -> format id; anything else falls back to FORMAT_ID
EXTENSION_FORMATS: Final[dict[str, str]] = {
    ".json": FORMAT_PRETTY_JSON,
    ".yaml": FORMAT_YAML,
    ".yml": FORMAT_YAML,
    ".ini": FORMAT_INI,
    ".bin": FORMAT_BIN,
}

# =============================================================================
# Logging Constants
# =============================================================================

APP_NAME: Final[str] = "confdir"
LOGGER_ROOT_NAME: Final[str] = "confdir"
LOG_FILE_NAME: Final[str] = "confdir.log"
LOG_DIR_NAME: Final[str] = "logs"

ENV_LOG_DIR: Final[str] = "CONFDIR_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "CONFDIR_LOG_LEVEL"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

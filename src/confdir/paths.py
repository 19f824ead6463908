"""OS-convention configuration directory resolution.

Maps an application name and platform to the directory where that
application keeps its settings:

- Windows: ``%APPDATA%/<app>`` or ``~/AppData/Roaming/<app>``
- macOS: ``~/Library/Application Support/<app>``
- Others: ``$XDG_CONFIG_HOME/<app>`` or ``~/.config/<app>``

Paths are recomputed on every call so environment changes are always
picked up.
"""

import os
import sys
from pathlib import Path

from confdir.constants import (
    ENV_APPDATA,
    ENV_XDG_CONFIG_HOME,
    MACOS_SUPPORT_SUBPATH,
    PLATFORM_MACOS,
    PLATFORM_WINDOWS,
    WINDOWS_ROAMING_SUBPATH,
    XDG_DEFAULT_SUBPATH,
)
from confdir.logger import get_logger

logger = get_logger(__name__)


def get_dir_for(app_name: str, platform: str | None = None) -> Path:
    """Get the configuration directory for an application.

    The application name is used verbatim as the last path segment;
    it is not checked for separators or other unsafe characters.

    Args:
        app_name: Application name
        platform: sys.platform style identifier ("win32", "darwin",
            "linux", ...). Defaults to the running platform.

    Returns:
        Absolute configuration directory path

    Example:
        >>> get_dir_for("myapp", "linux")
        PosixPath('/home/alice/.config/myapp')

    """
    platform = platform or sys.platform

    if platform == PLATFORM_WINDOWS:
        appdata = os.environ.get(ENV_APPDATA)
        if appdata:
            return Path(appdata) / app_name
        return Path.home().joinpath(*WINDOWS_ROAMING_SUBPATH, app_name)

    if platform == PLATFORM_MACOS:
        return Path.home().joinpath(*MACOS_SUPPORT_SUBPATH, app_name)

    # freebsd, linux, sunos and anything else follow the XDG layout
    xdg_config_home = os.environ.get(ENV_XDG_CONFIG_HOME)
    if xdg_config_home:
        return Path(xdg_config_home) / app_name
    return Path.home().joinpath(*XDG_DEFAULT_SUBPATH, app_name)


def get_file_for(
    app_name: str, file: str, platform: str | None = None
) -> Path:
    """Get the path of a file inside an application's config directory.

    Args:
        app_name: Application name
        file: File name relative to the config directory
        platform: Optional platform override, see get_dir_for()

    Returns:
        Absolute file path

    """
    path = get_dir_for(app_name, platform) / file
    logger.debug("Resolved %s/%s -> %s", app_name, file, path)
    return path

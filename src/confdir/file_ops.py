"""Directory management for config directories.

Provides the two filesystem primitives the store builds on: recursive
directory creation (mkdir -p) and recursive, idempotent removal (rm -rf).
"""

import shutil
from pathlib import Path

from confdir.logger import get_logger

logger = get_logger(__name__)


def ensure_directory(path: Path) -> Path:
    """Create a directory and any missing parents.

    Args:
        path: Directory to create

    Returns:
        The directory path

    Raises:
        OSError: If the directory cannot be created (e.g. a file is in
            the way or permission is denied)

    """
    if not path.is_dir():
        logger.debug("Creating directory: %s", path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def remove_path(path: Path) -> bool:
    """Remove a file or directory tree if it exists.

    Symlinks are unlinked, never followed.

    Args:
        path: File or directory to remove

    Returns:
        True if something was removed, False if nothing was there

    Raises:
        OSError: If removal of an existing target fails

    """
    if path.is_dir() and not path.is_symlink():
        logger.debug("Removing directory tree: %s", path)
        shutil.rmtree(path)
        return True

    if path.exists() or path.is_symlink():
        logger.debug("Removing file: %s", path)
        path.unlink(missing_ok=True)
        return True

    return False

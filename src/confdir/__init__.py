"""Top-level package for confdir.

Locate and access per-application configuration files in the
OS-conventional config directory:

    >>> import confdir
    >>> confdir.get_dir_for("myapp")
    PosixPath('/home/alice/.config/myapp')
    >>> confdir.save("myapp", "config.json", {"theme": "dark"})
    '{\\n  "theme": "dark"\\n}'
    >>> confdir.get("myapp")
    {'theme': 'dark'}

The module-level functions delegate to ``default_store``; create a
ConfigStore for different encodings or a fixed platform.
"""

from importlib.metadata import PackageNotFoundError, version

from confdir.exceptions import (
    ConfdirError,
    ConfigParseError,
    UnknownFormatError,
)
from confdir.formats import FORMATS, Format, format_for_file, get_format
from confdir.paths import get_dir_for, get_file_for
from confdir.store import ConfigStore

try:
    __version__ = version("confdir")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

default_store = ConfigStore()

create = default_store.create
get = default_store.get
save = default_store.save
save_config = default_store.save_config
list_files = default_store.list_files
delete = default_store.delete

__all__ = [
    "FORMATS",
    "ConfdirError",
    "ConfigParseError",
    "ConfigStore",
    "Format",
    "UnknownFormatError",
    "create",
    "default_store",
    "delete",
    "format_for_file",
    "get",
    "get_dir_for",
    "get_file_for",
    "get_format",
    "list_files",
    "save",
    "save_config",
]

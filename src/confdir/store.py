"""Config store: read, write, list and delete per-application files.

The store resolves paths through confdir.paths, creates directories
through confdir.file_ops and picks a format from confdir.formats:

1. an explicit parser/stringifier argument wins
2. else the file extension decides (see formats.format_for_file)
3. on save, a mapping written to a file without a known extension is
   stored as pretty JSON

Every call is a single blocking filesystem operation; there is no
caching, locking or retry.
"""

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from confdir.constants import (
    DEFAULT_FILE_NAME,
    DEFAULT_READ_ENCODING,
    DEFAULT_WRITE_ENCODING,
)
from confdir.file_ops import ensure_directory, remove_path
from confdir.formats import ID, PRETTY_JSON, Format, format_for_file
from confdir.logger import get_logger
from confdir.paths import get_dir_for, get_file_for

logger = get_logger(__name__)

# A registered Format or a bare parse/stringify callable
Codec = Format | Callable[[Any], Any]


class ConfigStore:
    """Per-application configuration file access.

    Attributes:
        read_encoding: Encoding for text reads
        write_encoding: Encoding for text writes
        platform: Fixed platform for path resolution (None = running OS)

    """

    def __init__(
        self,
        read_encoding: str = DEFAULT_READ_ENCODING,
        write_encoding: str = DEFAULT_WRITE_ENCODING,
        platform: str | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            read_encoding: Encoding used when reading text formats
            write_encoding: Encoding used when writing text formats
            platform: Optional sys.platform style override

        """
        self.read_encoding = read_encoding
        self.write_encoding = write_encoding
        self.platform = platform

    def dir_for(self, app_name: str) -> Path:
        """Get the configuration directory for an application."""
        return get_dir_for(app_name, self.platform)

    def file_for(self, app_name: str, file: str) -> Path:
        """Get the path of a file in an application's config directory."""
        return get_file_for(app_name, file, self.platform)

    def create(self, app_name: str) -> Path:
        """Ensure the application's configuration directory exists.

        Args:
            app_name: Application name

        Returns:
            The configuration directory

        """
        return ensure_directory(self.dir_for(app_name))

    def get(
        self,
        app_name: str,
        file: str = DEFAULT_FILE_NAME,
        *,
        parser: Codec | None = None,
        default: Any = None,  # noqa: ANN401
    ) -> Any:  # noqa: ANN401
        """Read and parse a config file.

        When the file does not exist and ``default`` is given, ``default``
        is saved first and the freshly written content is parsed and
        returned, so the result equals what a later plain get() returns.

        Args:
            app_name: Application name
            file: File name inside the config directory
            parser: Format or callable overriding extension dispatch
            default: Contents used to initialize a missing file

        Returns:
            Parsed value, or None if the file is missing (and no default
            was given) or could not be read

        Raises:
            ConfigParseError: If the content is invalid for the format
            OSError: If writing the default contents fails

        """
        path = self.file_for(app_name, file)
        fmt = parser if isinstance(parser, Format) else format_for_file(file)
        # Bare callables always receive text
        custom = parser is not None and not isinstance(parser, Format)

        try:
            contents = self._read(path, binary=fmt.binary and not custom)
        except FileNotFoundError:
            contents = None
        except (OSError, UnicodeDecodeError) as e:
            # Reported to the caller as absent; only the log tells them apart
            logger.warning("Could not read config file %s: %s", path, e)
            return None

        if contents is not None:
            return self._parse(parser, fmt, contents, file)

        if default is None:
            logger.debug("No config file at %s", path)
            return None

        logger.debug("Initializing %s with default contents", path)
        stringifier = parser if isinstance(parser, Format) else None
        written = self.save(app_name, file, default, stringifier=stringifier)
        if parser is None:
            fmt = self._select_format(file, default)
        return self._parse(parser, fmt, written, file)

    def save(
        self,
        app_name: str,
        file: str,
        contents: Any,  # noqa: ANN401
        *,
        stringifier: Codec | None = None,
    ) -> str | bytes:
        """Stringify and write a config file, replacing any existing one.

        Args:
            app_name: Application name
            file: File name inside the config directory
            contents: Value to write
            stringifier: Format or callable overriding extension dispatch

        Returns:
            The exact content written

        Raises:
            OSError: If the directory or file cannot be written

        """
        self.create(app_name)

        if isinstance(stringifier, Format):
            stringify = stringifier.stringify
        elif stringifier is not None:
            stringify = stringifier
        else:
            fmt = self._select_format(file, contents)
            logger.debug("Saving %s as %s", file, fmt.name)
            stringify = fmt.stringify

        output = stringify(contents)
        path = self.file_for(app_name, file)

        if isinstance(output, (bytes, bytearray, memoryview)):
            path.write_bytes(output)
        else:
            with path.open("w", encoding=self.write_encoding, newline="") as f:
                f.write(output)

        logger.debug("Wrote %s", path)
        return output

    def save_config(
        self, app_name: str, config: Mapping[str, Any]
    ) -> str | bytes:
        """Write a mapping to the default config.json as pretty JSON.

        Args:
            app_name: Application name
            config: Configuration mapping

        Returns:
            The JSON text written

        """
        return self.save(
            app_name, DEFAULT_FILE_NAME, config, stringifier=PRETTY_JSON
        )

    def list_files(self, app_name: str) -> list[str] | None:
        """List entries of the configuration directory.

        Args:
            app_name: Application name

        Returns:
            Entry names in filesystem order, or None if the directory
            does not exist or cannot be read

        """
        config_dir = self.dir_for(app_name)
        try:
            return os.listdir(config_dir)
        except OSError as e:
            logger.debug("Cannot list %s: %s", config_dir, e)
            return None

    def delete(self, app_name: str, file: str | None = None) -> bool:
        """Remove a config file, or the whole directory if no file is given.

        Missing targets are not an error.

        Args:
            app_name: Application name
            file: File name; None removes the entire config directory

        Returns:
            True if something was removed

        """
        if file is None:
            target = self.dir_for(app_name)
        else:
            target = self.file_for(app_name, file)
        return remove_path(target)

    def _read(self, path: Path, *, binary: bool) -> str | bytes:
        if binary:
            return path.read_bytes()
        with path.open(encoding=self.read_encoding, newline="") as f:
            return f.read()

    @staticmethod
    def _select_format(file: str, contents: Any) -> Format:  # noqa: ANN401
        fmt = format_for_file(file)
        if fmt is ID and isinstance(contents, Mapping):
            return PRETTY_JSON
        return fmt

    @staticmethod
    def _parse(
        parser: Codec | None,
        fmt: Format,
        contents: str | bytes,
        file: str,
    ) -> Any:  # noqa: ANN401
        if parser is not None and not isinstance(parser, Format):
            return parser(contents)
        return fmt.load(contents, file)

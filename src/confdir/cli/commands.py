"""Command handlers for the confdir CLI.

Each handler maps one subcommand onto a ConfigStore call and prints the
result. Handlers return a process exit code.
"""

# ruff: noqa: T201

import sys
from abc import ABC, abstractmethod
from argparse import Namespace
from typing import Any

from confdir.formats import FORMATS, PRETTY_JSON, format_for_file, get_format
from confdir.logger import get_logger
from confdir.paths import get_dir_for, get_file_for
from confdir.store import ConfigStore

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers."""

    def __init__(self, store: ConfigStore) -> None:
        """Initialize the handler with the store it operates on.

        Args:
            store: Config store used by the command

        """
        self.store = store

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """Run the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """


class DirHandler(BaseCommandHandler):
    """Print the configuration directory of an app."""

    def execute(self, args: Namespace) -> int:
        print(get_dir_for(args.app, args.platform or self.store.platform))
        return 0


class PathHandler(BaseCommandHandler):
    """Print the path of a config file."""

    def execute(self, args: Namespace) -> int:
        platform = args.platform or self.store.platform
        print(get_file_for(args.app, args.file, platform))
        return 0


class CreateHandler(BaseCommandHandler):
    """Create the configuration directory of an app."""

    def execute(self, args: Namespace) -> int:
        config_dir = self.store.create(args.app)
        logger.info("Created %s", config_dir)
        return 0


class GetHandler(BaseCommandHandler):
    """Print the parsed contents of a config file."""

    def execute(self, args: Namespace) -> int:
        parser = get_format(args.format) if args.format else None
        value = self.store.get(args.app, args.file, parser=parser)
        if value is None:
            print(f"❌ No readable config file: {args.file}")
            return 1
        _print_value(value)
        return 0


class SetHandler(BaseCommandHandler):
    """Parse VALUE with the file's format and save it."""

    def execute(self, args: Namespace) -> int:
        if args.format:
            fmt = get_format(args.format)
        else:
            fmt = format_for_file(args.file)
        text = sys.stdin.read() if args.value == "-" else args.value
        value = fmt.load(text, args.file)
        written = self.store.save(args.app, args.file, value, stringifier=fmt)
        logger.debug("Saved %s as %s (%d)", args.file, fmt.name, len(written))
        logger.info("Saved %s", self.store.file_for(args.app, args.file))
        return 0


class ListHandler(BaseCommandHandler):
    """List files in the configuration directory."""

    def execute(self, args: Namespace) -> int:
        files = self.store.list_files(args.app)
        if files is None:
            print(f"❌ No configuration directory for '{args.app}'")
            return 1
        for name in files:
            print(name)
        return 0


class DeleteHandler(BaseCommandHandler):
    """Delete a config file or the whole configuration directory."""

    def execute(self, args: Namespace) -> int:
        removed = self.store.delete(args.app, args.file)
        target = args.file or self.store.dir_for(args.app)
        if removed:
            logger.info("Removed %s", target)
        else:
            logger.info("Nothing to remove at %s", target)
        return 0


class FormatsHandler(BaseCommandHandler):
    """List registered formats."""

    def execute(self, args: Namespace) -> int:  # noqa: ARG002
        for name, fmt in FORMATS.items():
            alias = f" (alias of {fmt.name})" if fmt.name != name else ""
            print(f"{name}{alias}")
        return 0


def _print_value(value: Any) -> None:  # noqa: ANN401
    """Print a parsed value: text as-is, bytes raw, anything else as JSON."""
    if isinstance(value, bytes):
        sys.stdout.buffer.write(value)
        sys.stdout.buffer.flush()
    elif isinstance(value, str):
        print(value)
    elif isinstance(value, list) and all(isinstance(v, str) for v in value):
        print("\n".join(value))
    else:
        print(PRETTY_JSON.stringify(value))

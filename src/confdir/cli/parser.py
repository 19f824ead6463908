"""CLI argument parser for confdir.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from confdir.constants import DEFAULT_FILE_NAME
from confdir.formats import FORMATS


class CLIParser:
    """Command-line argument parser for confdir."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; defaults to sys.argv[1:]

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="confdir",
            description="Per-application configuration files",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Where does myapp keep its settings?
  %(prog)s dir myapp
  %(prog)s dir myapp --platform darwin

  # Read and write files (format picked by extension)
  %(prog)s set myapp config.json '{"theme": "dark"}'
  %(prog)s get myapp
  %(prog)s get myapp notes.txt --format lines

  # Inspect and clean up
  %(prog)s list myapp
  %(prog)s delete myapp config.json
  %(prog)s delete myapp
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version and --verbose to the main parser."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show confdir version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add all subcommands to the parser."""
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_dir_command(subparsers)
        self._add_path_command(subparsers)
        self._add_create_command(subparsers)
        self._add_get_command(subparsers)
        self._add_set_command(subparsers)
        self._add_list_command(subparsers)
        self._add_delete_command(subparsers)
        self._add_formats_command(subparsers)

    def _add_platform_option(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--platform",
            help="Resolve for another platform (win32, darwin, linux, ...)",
        )

    def _add_format_option(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--format",
            type=str.upper,
            choices=list(FORMATS),
            metavar="FORMAT",
            help=(
                "Override extension-based format: "
                + ", ".join(FORMATS)
                + " (case-insensitive)"
            ),
        )

    def _add_dir_command(self, subparsers) -> None:
        dir_parser = subparsers.add_parser(
            "dir", help="Print the configuration directory of an app"
        )
        dir_parser.add_argument("app", help="Application name")
        self._add_platform_option(dir_parser)

    def _add_path_command(self, subparsers) -> None:
        path_parser = subparsers.add_parser(
            "path", help="Print the path of a config file"
        )
        path_parser.add_argument("app", help="Application name")
        path_parser.add_argument("file", help="File name")
        self._add_platform_option(path_parser)

    def _add_create_command(self, subparsers) -> None:
        create_parser = subparsers.add_parser(
            "create", help="Create the configuration directory of an app"
        )
        create_parser.add_argument("app", help="Application name")

    def _add_get_command(self, subparsers) -> None:
        get_parser = subparsers.add_parser(
            "get", help="Print the parsed contents of a config file"
        )
        get_parser.add_argument("app", help="Application name")
        get_parser.add_argument(
            "file",
            nargs="?",
            default=DEFAULT_FILE_NAME,
            help=f"File name (default: {DEFAULT_FILE_NAME})",
        )
        self._add_format_option(get_parser)

    def _add_set_command(self, subparsers) -> None:
        set_parser = subparsers.add_parser(
            "set",
            help="Write a config file",
            epilog="""
VALUE is parsed with the chosen format and saved with the same format,
so malformed input is rejected before anything is written. Use - to
read VALUE from stdin.
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        set_parser.add_argument("app", help="Application name")
        set_parser.add_argument("file", help="File name")
        set_parser.add_argument("value", help="File contents, or - for stdin")
        self._add_format_option(set_parser)

    def _add_list_command(self, subparsers) -> None:
        list_parser = subparsers.add_parser(
            "list", help="List files in the configuration directory"
        )
        list_parser.add_argument("app", help="Application name")

    def _add_delete_command(self, subparsers) -> None:
        delete_parser = subparsers.add_parser(
            "delete",
            help="Delete a config file, or the whole directory",
        )
        delete_parser.add_argument("app", help="Application name")
        delete_parser.add_argument(
            "file",
            nargs="?",
            help="File name (omit to remove the whole directory)",
        )

    def _add_formats_command(self, subparsers) -> None:
        subparsers.add_parser("formats", help="List registered formats")

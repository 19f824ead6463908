"""CLI runner for confdir.

Routes parsed arguments to the matching command handler and turns
errors into exit codes.
"""

# ruff: noqa: T201

from argparse import Namespace
from collections.abc import Sequence

from confdir import __version__
from confdir.cli.commands import (
    BaseCommandHandler,
    CreateHandler,
    DeleteHandler,
    DirHandler,
    FormatsHandler,
    GetHandler,
    ListHandler,
    PathHandler,
    SetHandler,
)
from confdir.cli.parser import CLIParser
from confdir.exceptions import ConfdirError
from confdir.logger import (
    ConfigurationError,
    get_logger,
    set_console_level,
    setup_file_logging,
    setup_logging,
)
from confdir.store import ConfigStore

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        store: ConfigStore | None = None,
        *,
        enable_file_logging: bool = True,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Console logging is configured here; the library alone never
        attaches handlers.

        Args:
            store: Store the commands operate on (default: new ConfigStore)
            enable_file_logging: Attach the rotating log file

        """
        self.store = store or ConfigStore()
        setup_logging()
        if enable_file_logging:
            self._setup_file_logging()
        self._init_command_handlers()

    def _setup_file_logging(self) -> None:
        """Attach the log file; a failure only costs the log file."""
        try:
            setup_file_logging()
        except ConfigurationError as e:
            logger.warning("File logging disabled: %s", e)

    def _init_command_handlers(self) -> None:
        """Create one handler per subcommand."""
        self.command_handlers: dict[str, BaseCommandHandler] = {
            "dir": DirHandler(self.store),
            "path": PathHandler(self.store),
            "create": CreateHandler(self.store),
            "get": GetHandler(self.store),
            "set": SetHandler(self.store),
            "list": ListHandler(self.store),
            "delete": DeleteHandler(self.store),
            "formats": FormatsHandler(self.store),
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Arguments to parse; defaults to sys.argv[1:]

        Returns:
            Process exit code

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if not args.command:
            print("❌ No command specified. Use --help.")
            return 1

        if args.verbose:
            set_console_level("DEBUG")

        try:
            return self._execute_command(args)
        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            return 1
        except (ConfdirError, OSError) as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"❌ {e}")
            return 1

    def _execute_command(self, args: Namespace) -> int:
        """Execute the specified command with the appropriate handler."""
        handler = self.command_handlers[args.command]
        logger.debug("Running command: %s", args.command)
        return handler.execute(args)

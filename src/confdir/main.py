"""Main CLI entry point for confdir."""

import sys

from confdir.cli import CLIRunner
from confdir.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status code."""
    try:
        sys.exit(CLIRunner().run())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)


if __name__ == "__main__":
    main()

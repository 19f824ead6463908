"""Command-line interface for confdir."""

from confdir.cli.parser import CLIParser
from confdir.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]

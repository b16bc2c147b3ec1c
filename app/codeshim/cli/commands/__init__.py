"""CLI commands for codeshim.

This package contains all subcommand implementations.
"""

from codeshim.cli.commands import config, launch, resolve

__all__ = ["config", "launch", "resolve"]

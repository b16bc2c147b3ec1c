"""CLI package for codeshim.

This package contains the Typer application, its subcommands, and the
argument-forwarding shim entry point.
"""

from codeshim.cli.main import app

__all__ = ["app"]

"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from codeshim import __version__
from codeshim.cli.commands import config, launch, resolve

# Create main Typer app
app = typer.Typer(
    name="codeshim",
    help="Editor launcher that repairs stale remote IPC sockets.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"codeshim version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at debug level if verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """codeshim - launch the editor CLI inside a remote session.

    Finds a live VSCODE_IPC_HOOK_CLI socket, cleaning up dead ones,
    and replaces itself with the editor executable.
    """
    configure_logging(verbose)


# Register commands
app.command(name="exec", context_settings=launch.CONTEXT_SETTINGS)(launch.exec_editor)
app.command(name="resolve")(resolve.resolve)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

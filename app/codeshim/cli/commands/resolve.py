"""Socket resolution command.

Resolves a socket hint without launching anything. The resolved path is
printed alone on stdout so it can be used in shell substitutions:

    export VSCODE_IPC_HOOK_CLI="$(codeshim resolve)"
"""

import os
from typing import Annotated

import typer

from codeshim.core.config import require_config
from codeshim.core.launch import read_hint, resolve_hint
from codeshim.utils.formatting import print_error, print_info, print_warning


def resolve(
    hint: Annotated[
        str | None,
        typer.Argument(help="Socket path to resolve (default: value of the hint variable)."),
    ] = None,
    no_scan: Annotated[
        bool,
        typer.Option("--no-scan", help="Only probe the hint, don't search its directory."),
    ] = False,
) -> None:
    """Find a live IPC socket and print its path.

    Dead sockets following the vscode-ipc-*.sock convention are removed
    along the way. Exits with code 1 if no live socket is found.
    """
    config = require_config()

    hint = hint or read_hint(os.environ, config.env_var)
    if hint is None:
        print_error(f"No socket path given and {config.env_var} is not set.")
        raise typer.Exit(code=1)

    resolution = resolve_hint(hint, scan_parent=config.scan_parent and not no_scan)

    if resolution.error is not None:
        print_error(f"Cannot resolve socket: {resolution.error}")
        raise typer.Exit(code=1)

    if resolution.resolved is None:
        print_warning(f"No live IPC socket found for {hint}")
        raise typer.Exit(code=1)

    if resolution.changed:
        print_info(f"[path]{hint}[/path] is stale, using sibling socket")

    typer.echo(resolution.resolved)

"""Launch command (codeshim exec).

Resolves the IPC socket hint and replaces the process with the editor,
forwarding every remaining argument unchanged.
"""

from typing import Annotated

import typer

from codeshim.core.config import require_config
from codeshim.core.launch import LaunchError, launch
from codeshim.utils.formatting import print_error

# Options the shim doesn't know are passed through to the editor
CONTEXT_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def exec_editor(
    ctx: typer.Context,
    executable: Annotated[
        str | None,
        typer.Option(
            "--executable",
            "-e",
            help="Editor executable to run (default: from config, else 'code').",
        ),
    ] = None,
) -> None:
    """Repair the IPC socket hint and exec the editor with ARGS.

    Examples:
        codeshim exec .                     # Open current directory
        codeshim exec --wait notes.md       # Options are forwarded
        codeshim exec -e code-insiders .    # Use another executable
    """
    config = require_config(executable=executable)

    try:
        launch(list(ctx.args), config=config)
    except LaunchError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

"""Configuration commands.

Show the effective shim configuration or write a default config file.
"""

from typing import Annotated

import tomli_w
import typer

from codeshim.core.config import ShimConfig, ShimConfigError, require_config, save_config
from codeshim.core.paths import ensure_config_dir, get_config_path
from codeshim.utils.formatting import console, print_error, print_success, print_warning
from codeshim.utils.shell import command_exists

app = typer.Typer(
    help="Show or initialize the shim configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    config = require_config()
    path = get_config_path()

    source = f"[path]{path}[/path]" if path.exists() else "defaults (no config file)"
    console.print(f"[muted]# Source:[/muted] {source}")
    console.print(tomli_w.dumps(config.model_dump()), markup=False, highlight=False)

    if not command_exists(config.executable):
        print_warning(f"Executable '{config.executable}' not found on PATH.")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_warning(f"Config already exists: [path]{path}[/path] (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ensure_config_dir()
        saved = save_config(ShimConfig(), path)
    except (RuntimeError, ShimConfigError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to [path]{saved}[/path]")

"""Drop-in editor shim entry point.

Installed as the ``codeshim-code`` console script. Unlike ``codeshim exec``
it does no option parsing at all: every argument, ``--help`` included,
belongs to the editor.
"""

import logging
import os
import sys

from codeshim.core.config import ShimConfigError, apply_overrides, load_config
from codeshim.core.launch import LaunchError, launch
from codeshim.utils.formatting import print_error

# Set to any non-empty value to enable debug logging
DEBUG_ENV_VAR = "CODESHIM_DEBUG"


def main(argv: list[str] | None = None) -> int:
    """Run the shim.

    Args:
        argv: Arguments to forward. Defaults to sys.argv[1:].

    Returns:
        Exit status. Only reached when the handoff failed.
    """
    args = sys.argv[1:] if argv is None else argv

    logging.basicConfig(
        level=logging.DEBUG if os.environ.get(DEBUG_ENV_VAR) else logging.WARNING,
        format="codeshim: %(levelname)s %(message)s",
    )

    try:
        config = apply_overrides(load_config())
    except ShimConfigError as e:
        print_error(f"Failed to load config: {e}")
        return 1

    try:
        launch(args, config=config)
    except LaunchError as e:
        print_error(str(e))
    return 1


def run() -> None:
    """Console script wrapper around main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()

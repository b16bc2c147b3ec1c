"""Process handoff utilities.

Replaces the current process with another executable.
"""

import os
import shutil
from collections.abc import Mapping
from typing import NoReturn


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def exec_replace(
    executable: str,
    argv: list[str],
    *,
    env: Mapping[str, str] | None = None,
) -> NoReturn:
    """Replace the current process with an executable looked up on PATH.

    The new program takes over the terminal and the process ID. This
    function never returns on success.

    Args:
        executable: Program name or path to execute.
        argv: Full argument vector, argv[0] included.
        env: Environment for the new program. If None, inherits os.environ.

    Raises:
        FileNotFoundError: If the executable is not found.
        OSError: If the executable cannot be run.
    """
    if env is None:
        os.execvp(executable, argv)
    else:
        os.execvpe(executable, argv, dict(env))

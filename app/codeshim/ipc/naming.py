"""Naming convention for editor IPC sockets.

The editor's command-line hook listens on Unix domain sockets named
``vscode-ipc-<id>.sock``. Only paths whose basename follows this
convention are ever probed or cleaned up.
"""

import os
from pathlib import PurePath

ENDPOINT_PREFIX = "vscode-ipc-"
ENDPOINT_SUFFIX = ".sock"


def looks_like_endpoint(path: str | os.PathLike[str]) -> bool:
    """Check if a path's basename follows the IPC socket naming convention.

    Pure string check, the path does not need to exist.

    Args:
        path: Filesystem path to classify.

    Returns:
        True if the basename starts with ``vscode-ipc-`` and ends with
        ``.sock``. False for paths without a basename or whose basename
        is not valid text.
    """
    basename = PurePath(os.fspath(path)).name
    if not basename or basename == "..":
        return False

    # Undecodable bytes surface as lone surrogates after os.fsdecode()
    try:
        basename.encode("utf-8")
    except UnicodeEncodeError:
        return False

    return basename.startswith(ENDPOINT_PREFIX) and basename.endswith(ENDPOINT_SUFFIX)

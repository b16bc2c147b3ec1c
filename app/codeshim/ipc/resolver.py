"""IPC socket resolution with directory-scan fallback.

Given a hint path (usually the value of VSCODE_IPC_HOOK_CLI), find a live
IPC socket:

1. The hint itself, if a listener accepts connections on it.
2. Otherwise the first live sibling socket in the hint's parent directory,
   in directory enumeration order.

Stale sockets following the naming convention are deleted along the way.
"""

import logging
import os
from pathlib import PurePath

from codeshim.ipc.probe import probe

logger = logging.getLogger(__name__)


def _parent_dir(hint: str) -> str | None:
    """Get the directory containing the hint, or None if it has none.

    The final component is taken the same way the name classifier takes
    it, so a trailing slash does not turn the socket into its own parent.
    """
    path = PurePath(hint)
    if len(path.parts) < 2:
        return None
    return str(path.parent)


def resolve_and_clean(hint_path: str | os.PathLike[str]) -> str | None:
    """Resolve a possibly stale hint to a live IPC socket path.

    The hint is probed first and returned unchanged if live, without
    scanning. Otherwise every entry of the hint's parent directory is
    probed until one is live. Entries that do not follow the naming
    convention are skipped without being touched, and a listing that
    fails part way through is treated as ending there.

    Args:
        hint_path: Path believed to identify a live IPC socket.

    Returns:
        Path of the first live socket found, or None if there is none.

    Raises:
        OSError: If the parent directory cannot be opened for listing, or
            no client socket can be created for probing.
    """
    hint = os.fspath(hint_path)

    first = probe(hint)
    if first.live:
        return first.path

    parent = _parent_dir(hint)
    if parent is None:
        logger.debug("Hint %s has no parent directory to scan", hint)
        return None

    with os.scandir(parent) as entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                logger.debug("Listing of %s stopped early: %s", parent, e)
                break

            # Already probed above
            if entry.path == first.path:
                continue
            result = probe(entry.path)
            if result.live:
                logger.debug("Resolved %s to sibling %s", hint, result.path)
                return result.path

    logger.debug("No live socket found in %s", parent)
    return None

"""Liveness probing for IPC sockets.

A candidate socket is live if a client connection succeeds. Candidates
that refuse the connection are stale leftovers of a terminated session
and are removed on the spot.
"""

import contextlib
import logging
import os
import socket
from dataclasses import dataclass
from enum import Enum

from codeshim.ipc.naming import looks_like_endpoint

logger = logging.getLogger(__name__)


class ProbeOutcome(str, Enum):
    """Result of probing a single path.

    Attributes:
        LIVE: A listener accepted the connection.
        DEAD_REMOVED: Connection failed; removal of the path was attempted.
        NOT_CANDIDATE: Path does not follow the naming convention and was not touched.
    """

    LIVE = "live"
    DEAD_REMOVED = "dead_removed"
    NOT_CANDIDATE = "not_candidate"


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Outcome of probing a candidate path.

    Attributes:
        path: The probed path, exactly as given.
        outcome: Liveness classification.
        removed: Whether the stale path was actually deleted.
    """

    path: str
    outcome: ProbeOutcome
    removed: bool = False

    @property
    def live(self) -> bool:
        """Check if the probe found a listening socket."""
        return self.outcome == ProbeOutcome.LIVE


def _connects(path: str) -> bool:
    """Attempt a throwaway client connection to a Unix socket."""
    with contextlib.closing(socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)) as client:
        try:
            client.connect(path)
        except OSError as e:
            logger.debug("Connect to %s failed: %s", path, e)
            return False
    return True


def _remove_stale(path: str) -> bool:
    """Delete a stale socket path, absorbing any error.

    Returns:
        True if the path was removed, False otherwise.
    """
    try:
        os.unlink(path)
    except OSError as e:
        logger.debug("Could not remove stale socket %s: %s", path, e)
        return False
    logger.info("Removed stale socket %s", path)
    return True


def probe(path: str | os.PathLike[str]) -> ProbeResult:
    """Probe a path for a live IPC socket, removing it if dead.

    Paths that do not follow the naming convention are returned as
    NOT_CANDIDATE without any filesystem access.

    Args:
        path: Candidate socket path.

    Returns:
        ProbeResult describing what happened.

    Raises:
        OSError: If no client socket can be created (for example when the
            process is out of file descriptors). The path is left untouched.
    """
    path_str = os.fspath(path)

    if not looks_like_endpoint(path_str):
        return ProbeResult(path=path_str, outcome=ProbeOutcome.NOT_CANDIDATE)

    if _connects(path_str):
        logger.debug("Live socket: %s", path_str)
        return ProbeResult(path=path_str, outcome=ProbeOutcome.LIVE)

    removed = _remove_stale(path_str)
    return ProbeResult(path=path_str, outcome=ProbeOutcome.DEAD_REMOVED, removed=removed)


def probe_and_clean(path: str | os.PathLike[str]) -> str | None:
    """Return the path if it is a live IPC socket, else clean it up.

    Args:
        path: Candidate socket path.

    Returns:
        The path string unchanged if a listener accepted the connection,
        None otherwise.

    Raises:
        OSError: If no client socket can be created.
    """
    result = probe(path)
    return result.path if result.live else None

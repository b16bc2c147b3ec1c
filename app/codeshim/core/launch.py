"""Launch coordination for the editor shim.

Reads the IPC socket hint from the environment, resolves it to a live
socket, writes the correction back, and hands the process over to the
editor executable. Resolution problems never stop the launch; only a
failed handoff is reported to the user.
"""

import logging
import os
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from typing import NoReturn

from codeshim.core.config import ShimConfig
from codeshim.ipc.probe import probe_and_clean
from codeshim.ipc.resolver import resolve_and_clean
from codeshim.utils.shell import exec_replace

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when the editor executable cannot be started."""


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving the IPC socket hint.

    Attributes:
        hint: Hint taken from the environment (None if unset).
        resolved: Live socket path, or None if none was found.
        error: Directory listing error that cut the search short, if any.
    """

    hint: str | None
    resolved: str | None = None
    error: str | None = None

    @property
    def changed(self) -> bool:
        """Check if resolution found a socket other than the hint."""
        return self.resolved is not None and self.resolved != self.hint


def read_hint(env: Mapping[str, str], var: str) -> str | None:
    """Read the socket hint from an environment mapping.

    An empty value counts as unset.
    """
    return env.get(var) or None


def resolve_hint(hint: str | None, *, scan_parent: bool = True) -> Resolution:
    """Resolve a socket hint, absorbing I/O failures.

    Args:
        hint: Hint path, or None when no session hint is available.
        scan_parent: If False, only the hint itself is probed.

    Returns:
        Resolution describing the outcome. A failure to list the parent
        directory or to open a client socket is recorded in ``error``
        instead of being raised.
    """
    if hint is None:
        return Resolution(hint=None)

    try:
        if scan_parent:
            resolved = resolve_and_clean(hint)
        else:
            resolved = probe_and_clean(hint)
    except OSError as e:
        logger.warning("Cannot resolve IPC socket from %s: %s", hint, e)
        return Resolution(hint=hint, error=str(e))

    return Resolution(hint=hint, resolved=resolved)


def repair_environment(env: MutableMapping[str, str], var: str, resolution: Resolution) -> bool:
    """Point the environment variable at the resolved socket.

    Args:
        env: Environment mapping to update in place.
        var: Name of the hint variable.
        resolution: Outcome of resolve_hint().

    Returns:
        True if the variable now holds a validated socket path.
    """
    if resolution.resolved is None:
        return False
    if resolution.changed:
        logger.info("Repointing %s: %s -> %s", var, resolution.hint, resolution.resolved)
    env[var] = resolution.resolved
    return True


def build_command(executable: str, args: Sequence[str]) -> list[str]:
    """Build the argument vector for the editor.

    Args:
        executable: Editor executable name, used as argv[0].
        args: Arguments to forward, in order.

    Returns:
        ``[executable, *args]``.
    """
    return [executable, *args]


def launch(
    args: Sequence[str],
    *,
    config: ShimConfig,
    env: MutableMapping[str, str] | None = None,
) -> NoReturn:
    """Resolve the IPC socket and replace this process with the editor.

    Args:
        args: Command-line arguments to forward to the editor.
        config: Effective shim configuration.
        env: Environment to read and repair. Defaults to os.environ, which
            is what the editor inherits.

    Raises:
        LaunchError: If the editor executable cannot be started.
    """
    environ = os.environ if env is None else env

    hint = read_hint(environ, config.env_var)
    if hint is None:
        logger.warning("%s is not set, not in a remote session", config.env_var)

    resolution = resolve_hint(hint, scan_parent=config.scan_parent)
    if hint is not None and not repair_environment(environ, config.env_var, resolution):
        logger.info("No live IPC socket found for %s, keeping it as is", hint)

    argv = build_command(config.executable, args)
    logger.debug("Executing %s", argv)
    try:
        exec_replace(config.executable, argv, env=environ)
    except OSError as e:
        raise LaunchError(f"Cannot execute '{config.executable}': {e}") from e

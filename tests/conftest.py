"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import socket
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the user's config and session variables."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.delenv("CODESHIM_EXECUTABLE", raising=False)
    monkeypatch.delenv("VSCODE_IPC_HOOK_CLI", raising=False)


@pytest.fixture
def sock_dir() -> Iterator[Path]:
    """Short-named temporary directory for Unix sockets.

    Socket paths are limited to ~108 bytes, which pytest's tmp_path can exceed.
    """
    with tempfile.TemporaryDirectory(prefix="cs-", dir="/tmp") as d:
        yield Path(d)


@pytest.fixture
def live_socket() -> Iterator[Callable[[Path], Path]]:
    """Factory that binds a listening Unix socket at the given path."""
    servers: list[socket.socket] = []

    def _listen(path: Path) -> Path:
        server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        server.bind(str(path))
        server.listen(16)
        servers.append(server)
        return path

    yield _listen

    for server in servers:
        server.close()


@pytest.fixture
def dead_socket() -> Callable[[Path], Path]:
    """Factory that leaves a socket file behind with nobody listening."""

    def _leave(path: Path) -> Path:
        server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        server.bind(str(path))
        server.close()
        return path

    return _leave

"""Unit tests for the IPC socket naming convention."""

import os
from pathlib import Path

import pytest
from codeshim.ipc.naming import ENDPOINT_PREFIX, ENDPOINT_SUFFIX, looks_like_endpoint


class TestLooksLikeEndpoint:
    """Tests for looks_like_endpoint function."""

    @pytest.mark.parametrize(
        "path",
        [
            "/tmp/vscode-ipc-aaaa.sock",
            "/run/user/1000/vscode-ipc-0b1c2d3e-4f50-6172-8394-a5b6c7d8e9f0.sock",
            "vscode-ipc-x.sock",
            "./vscode-ipc-.sock",
            "/tmp//vscode-ipc-aaaa.sock",
        ],
    )
    def test_matching_names(self, path: str) -> None:
        """Basenames with the prefix and suffix match."""
        assert looks_like_endpoint(path) is True

    @pytest.mark.parametrize(
        "path",
        [
            "/tmp/vscode-ipc-aaaa.txt",
            "/tmp/vscode-git-aaaa.sock",
            "/tmp/VSCODE-IPC-aaaa.sock",
            "/tmp/vscode-ipc-aaaa.SOCK",
            "/tmp/vscode-ipc-aaaa.sock.bak",
            "/tmp/x-vscode-ipc-aaaa.sock",
            "/tmp/vscode-ipc-*.sock/other",
            "/tmp/vscode-ipc.sock",
        ],
    )
    def test_non_matching_names(self, path: str) -> None:
        """Wrong prefix, suffix, or case does not match."""
        assert looks_like_endpoint(path) is False

    @pytest.mark.parametrize("path", ["/", "", ".", "..", "/tmp/vscode-ipc-a.sock/.."])
    def test_no_basename(self, path: str) -> None:
        """Paths without a usable basename do not match."""
        assert looks_like_endpoint(path) is False

    def test_trailing_slash(self) -> None:
        """A trailing slash is ignored when taking the basename."""
        assert looks_like_endpoint("/tmp/vscode-ipc-a.sock/") is True

    def test_undecodable_basename(self) -> None:
        """Basenames with invalid encoding are rejected without raising."""
        path = os.fsdecode(b"/tmp/vscode-ipc-\xff\xfe.sock")

        assert looks_like_endpoint(path) is False

    def test_accepts_path_objects(self) -> None:
        """pathlib paths are classified like strings."""
        assert looks_like_endpoint(Path("/tmp/vscode-ipc-aaaa.sock")) is True
        assert looks_like_endpoint(Path("/tmp/notes.txt")) is False

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        """Classification works for paths that don't exist."""
        missing = tmp_path / "nowhere" / f"{ENDPOINT_PREFIX}gone{ENDPOINT_SUFFIX}"

        assert looks_like_endpoint(missing) is True
        assert not missing.parent.exists()

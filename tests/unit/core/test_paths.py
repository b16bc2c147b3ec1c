"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from codeshim.core.paths import (
    APP_NAME,
    ensure_config_dir,
    get_config_dir,
    get_config_path,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {"HOME": "/home/tester"}, clear=True):
            result = get_config_dir()

        assert result == Path("/home/tester/.config") / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home_ignored(self) -> None:
        """An empty XDG_CONFIG_HOME falls back to the default."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestConfigFiles:
    """Tests for config file path functions."""

    def test_get_config_path(self, tmp_path: Path) -> None:
        """get_config_path returns config.toml in config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"

    def test_get_theme_path(self, tmp_path: Path) -> None:
        """get_theme_path returns theme.toml in config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_theme_path() == tmp_path / APP_NAME / "theme.toml"


class TestEnsureConfigDir:
    """Tests for ensure_config_dir function."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        """ensure_config_dir creates the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path / "config")}):
            result = ensure_config_dir()

        assert result == tmp_path / "config" / APP_NAME
        assert result.is_dir()

    def test_idempotent(self, tmp_path: Path) -> None:
        """ensure_config_dir can be called multiple times."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert ensure_config_dir() == ensure_config_dir()

    def test_raises_runtime_error(self, tmp_path: Path) -> None:
        """ensure_config_dir wraps OS errors in RuntimeError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(blocker)}),
            pytest.raises(RuntimeError, match="Cannot create config directory"),
        ):
            ensure_config_dir()

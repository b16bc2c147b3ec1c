"""Shim configuration and settings.

This module provides the configuration model and I/O functions for the
launcher: which editor executable to hand off to, which environment
variable carries the IPC socket hint, and whether to fall back to
scanning the hint's directory.

Configuration is stored in ~/.config/codeshim/config.toml. A missing file
means defaults.
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from codeshim.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "code"
DEFAULT_ENV_VAR = "VSCODE_IPC_HOOK_CLI"

# Environment variable overriding the configured executable
EXECUTABLE_ENV_OVERRIDE = "CODESHIM_EXECUTABLE"


class ShimConfig(BaseModel):
    """Configuration for the launcher shim.

    Attributes:
        executable: Editor executable to replace the process with.
        env_var: Environment variable holding the IPC socket hint.
        scan_parent: Search the hint's directory when the hint is stale.
    """

    model_config = ConfigDict(extra="forbid")

    executable: Annotated[
        str,
        Field(min_length=1, description="Editor executable (looked up on PATH)"),
    ] = DEFAULT_EXECUTABLE
    env_var: Annotated[
        str,
        Field(min_length=1, description="Environment variable with the IPC socket hint"),
    ] = DEFAULT_ENV_VAR
    scan_parent: Annotated[
        bool,
        Field(description="Scan the hint's directory for another live socket"),
    ] = True

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        """Reject blank executable names."""
        if not v.strip():
            msg = "executable must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("env_var")
    @classmethod
    def validate_env_var(cls, v: str) -> str:
        """Validate that env_var is a usable environment variable name."""
        if "=" in v or "\0" in v or not v.strip() or v != v.strip():
            msg = f"invalid environment variable name '{v}'"
            raise ValueError(msg)
        return v


class ShimConfigError(Exception):
    """Base exception for shim configuration errors."""


class ShimConfigParseError(ShimConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ShimConfig:
    """Load shim configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ShimConfig. Defaults if the file doesn't exist.

    Raises:
        ShimConfigParseError: If the TOML syntax is invalid.
        ShimConfigError: If the file cannot be read or the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return ShimConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ShimConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ShimConfigError(f"Failed to read config: {e}") from e

    try:
        return ShimConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ShimConfigError(f"Invalid config content in {config_path}: {e}") from e


def apply_overrides(
    config: ShimConfig,
    *,
    executable: str | None = None,
    env: Mapping[str, str] | None = None,
) -> ShimConfig:
    """Apply environment and command-line overrides to a loaded config.

    Precedence: explicit executable > CODESHIM_EXECUTABLE > config file.

    Args:
        config: Config loaded from file (or defaults).
        executable: Executable given on the command line, if any.
        env: Environment to read overrides from. Defaults to os.environ.

    Returns:
        A new ShimConfig with overrides applied.
    """
    environ = os.environ if env is None else env

    override = executable or environ.get(EXECUTABLE_ENV_OVERRIDE) or None
    if override is None:
        return config

    try:
        return ShimConfig.model_validate({**config.model_dump(), "executable": override})
    except (ValueError, ValidationError) as e:
        raise ShimConfigError(f"Invalid executable override: {e}") from e


def save_config(config: ShimConfig, path: Path | None = None) -> Path:
    """Save shim configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ShimConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ShimConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ShimConfigError(f"Failed to write config: {e}") from e

    return config_path


def require_config(path: Path | None = None, *, executable: str | None = None) -> ShimConfig:
    """Load the effective config or exit with a helpful error message.

    This is a convenience wrapper around load_config() and apply_overrides()
    that prints user-friendly messages and exits on errors.

    Args:
        path: Optional custom config path.
        executable: Executable given on the command line, if any.

    Returns:
        Effective ShimConfig.

    Raises:
        typer.Exit: If the config cannot be loaded.
    """
    import typer

    from codeshim.utils.formatting import print_error

    try:
        return apply_overrides(load_config(path), executable=executable)
    except ShimConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

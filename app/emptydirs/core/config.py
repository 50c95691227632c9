"""Cleanup configuration and settings.

This module provides the configuration model and I/O functions for
emptydirs. The configuration holds the scan policy defaults and the
confirmation thresholds used by the ``clean`` command.

Configuration is stored in ~/.config/emptydirs/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from emptydirs.cleaner.models import DEFAULT_IGNORE_PATTERNS, ScanPolicy
from emptydirs.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIRM_THRESHOLD = 50


class CleanupConfig(BaseModel):
    """Configuration for scanning and cleaning empty directories.

    Attributes:
        include_hidden: Inspect entries whose name starts with a dot.
        ignore_patterns: Names or wildcard patterns that keep a directory.
        ignore_init_py: Treat a lone ``__init__.py`` as no content.
        confirm_before_delete: Ask before deleting large batches.
        confirm_threshold: Batch size from which confirmation is required.
    """

    model_config = ConfigDict(extra="forbid")

    include_hidden: Annotated[
        bool,
        Field(description="Inspect hidden entries"),
    ] = False
    ignore_patterns: Annotated[
        list[str],
        Field(description="Entry names or '*' patterns that keep a directory"),
    ] = list(DEFAULT_IGNORE_PATTERNS)
    ignore_init_py: Annotated[
        bool,
        Field(description="Disregard __init__.py files"),
    ] = False
    confirm_before_delete: Annotated[
        bool,
        Field(description="Ask for confirmation before deleting"),
    ] = True
    confirm_threshold: Annotated[
        int,
        Field(ge=0, description="Number of folders from which to ask"),
    ] = DEFAULT_CONFIRM_THRESHOLD

    def to_policy(self) -> ScanPolicy:
        """Build the scan policy described by this configuration."""
        return ScanPolicy(
            include_hidden=self.include_hidden,
            ignore_patterns=tuple(self.ignore_patterns),
            ignore_init_py=self.ignore_init_py,
        )

    def needs_confirmation(self, count: int) -> bool:
        """Check if deleting ``count`` folders requires confirmation."""
        return self.confirm_before_delete and count >= self.confirm_threshold


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> CleanupConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CleanupConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return CleanupConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> CleanupConfig:
    """Load configuration, falling back to defaults if no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        CleanupConfig from the file, or the default configuration.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(config: CleanupConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The CleanupConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

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
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: CleanupConfig) -> dict[str, object]:
    """Convert CleanupConfig to a dictionary for TOML serialization.

    ``ignore_patterns`` is always written so the file documents the active
    list; other keys are only written when they differ from the default.

    Args:
        config: The CleanupConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {"ignore_patterns": list(config.ignore_patterns)}

    if config.include_hidden:
        result["include_hidden"] = True

    if config.ignore_init_py:
        result["ignore_init_py"] = True

    if not config.confirm_before_delete:
        result["confirm_before_delete"] = False

    if config.confirm_threshold != DEFAULT_CONFIRM_THRESHOLD:
        result["confirm_threshold"] = config.confirm_threshold

    return result


def get_default_config() -> CleanupConfig:
    """Create a default CleanupConfig.

    Returns:
        CleanupConfig with default settings.
    """
    return CleanupConfig()

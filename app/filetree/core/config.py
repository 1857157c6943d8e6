"""Application configuration.

Settings are stored in ~/.config/filetree/config.toml and validated
with pydantic. Missing files fall back to defaults where callers ask
for it.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from filetree.core.paths import ensure_config_dir, get_config_path
from filetree.files.handle import DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FiletreeConfig(BaseModel):
    """Configuration for filetree.

    Attributes:
        copy_chunk_size: Bytes per block when streaming a copy or move.
        sync_writes: Flush writes to stable storage before closing.
        log_level: Log level used when neither --verbose nor --quiet is given.
        show_hidden: Show entries starting with a dot when rendering trees.
    """

    model_config = ConfigDict(extra="forbid")

    copy_chunk_size: Annotated[
        int,
        Field(ge=1, le=64 * 1024 * 1024, description="Copy block size in bytes"),
    ] = DEFAULT_CHUNK_SIZE
    sync_writes: Annotated[
        bool,
        Field(description="fsync after writing file contents"),
    ] = True
    log_level: Annotated[
        LogLevel,
        Field(description="Default log level"),
    ] = "WARNING"
    show_hidden: Annotated[
        bool,
        Field(description="Render dot-entries in trees and listings"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FiletreeConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FiletreeConfig object.

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
        return FiletreeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def load_config_or_default(path: Path | None = None) -> FiletreeConfig:
    """Load configuration, returning defaults if no config file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return FiletreeConfig()


def save_config(config: FiletreeConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Args:
        config: Configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path the configuration was written to.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        ensure_config_dir()
        config_path = get_config_path()
    else:
        config_path = path

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(config.model_dump(), f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path

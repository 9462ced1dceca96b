"""User configuration for sbtctl.

This module provides the configuration model and I/O functions for the
settings that shape how sbt is launched and which plugin gets provisioned.
The configuration is passed explicitly to every component that needs it.

Configuration is stored in ~/.config/sbtctl/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sbtctl.core.paths import get_config_path, get_default_launcher_path

logger = logging.getLogger(__name__)

# sbt-bloop plugin version provisioned when none is configured
DEFAULT_BLOOP_VERSION = "1.5.6"


class UserConfig(BaseModel):
    """Settings for launching sbt and provisioning the workspace.

    Attributes:
        sbt_script: Custom sbt launcher script. When set, it replaces the
            java + launcher jar invocation entirely.
        java_home: JDK used to run the launcher jar. Falls back to JAVA_HOME.
        launcher_path: Location of sbt-launch.jar.
        bloop_version: sbt-bloop version written into the plugin descriptor.
        bloop_sbt_already_installed: Skip plugin provisioning because the
            user manages sbt-bloop themselves.
        fallback_sbt_version: sbt version pinned on the command line when the
            workspace does not pin one. None means the recommended version.
        home_dir: Home directory holding global sbt state. None means the
            current user's home.
    """

    model_config = ConfigDict(extra="forbid")

    sbt_script: Annotated[
        Path | None,
        Field(description="Custom sbt launcher script"),
    ] = None
    java_home: Annotated[
        Path | None,
        Field(description="JDK home used to run the sbt launcher"),
    ] = None
    launcher_path: Annotated[
        Path | None,
        Field(description="Path to sbt-launch.jar (None = cache default)"),
    ] = None
    bloop_version: Annotated[
        str,
        Field(min_length=1, description="sbt-bloop plugin version"),
    ] = DEFAULT_BLOOP_VERSION
    bloop_sbt_already_installed: Annotated[
        bool,
        Field(description="Do not write sbt-bloop plugin files"),
    ] = False
    fallback_sbt_version: Annotated[
        str | None,
        Field(description="sbt version used when the workspace pins none"),
    ] = None
    home_dir: Annotated[
        Path | None,
        Field(description="Home directory (None = current user's home)"),
    ] = None

    @property
    def effective_launcher_path(self) -> Path:
        """Get the launcher jar path, defaulting to the cache location."""
        return self.launcher_path or get_default_launcher_path()

    @property
    def effective_home_dir(self) -> Path:
        """Get the home directory, defaulting to the current user's."""
        return self.home_dir or Path.home()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> UserConfig:
    """Load user configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated UserConfig object.

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
        return UserConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> UserConfig:
    """Load user configuration, falling back to defaults if none exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        The stored UserConfig, or a default one when the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return UserConfig()


def save_config(config: UserConfig, path: Path | None = None) -> Path:
    """Save user configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The UserConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create config directory {config_path.parent}: {e}") from e

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: UserConfig) -> dict[str, object]:
    """Convert UserConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.

    Args:
        config: The UserConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "bloop_version": config.bloop_version,
        "bloop_sbt_already_installed": config.bloop_sbt_already_installed,
    }

    for key in ("sbt_script", "java_home", "launcher_path", "home_dir"):
        value = getattr(config, key)
        if value is not None:
            result[key] = str(value)

    if config.fallback_sbt_version is not None:
        result["fallback_sbt_version"] = config.fallback_sbt_version

    return result

"""Path management for sbtctl.

This module provides XDG-compliant locations for sbtctl's own files and
the well-known locations sbtctl reads or writes inside an sbt workspace.

XDG defaults:
- Config: ~/.config/sbtctl/
- Cache: ~/.cache/sbtctl/

Workspace layout:
- <workspace>/project/build.properties (sbt version pin)
- <workspace>/project/, <workspace>/project/project/, ... (meta-builds)
- <workspace>/.sbtopts, <workspace>/.jvmopts (launcher option files)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "sbtctl"

# Name of the generated plugin descriptor written into each meta-build
PLUGIN_FILENAME = "sbtctl.sbt"

# Name of the BSP bridge source written into <workspace>/project
BSP_PLUGIN_FILENAME = "SbtctlBsp.scala"

# Launcher option files, in the order their lines are appended
SBTOPTS_FILENAME = ".sbtopts"
JVMOPTS_FILENAME = ".jvmopts"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/sbtctl/ (or XDG_CONFIG_HOME/sbtctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_cache_dir() -> Path:
    """Get the cache directory path.

    Returns:
        Path to ~/.cache/sbtctl/ (or XDG_CACHE_HOME/sbtctl/).
    """
    return _get_xdg_dir("XDG_CACHE_HOME", ".cache")


def get_config_path() -> Path:
    """Get the user configuration file path.

    Returns:
        Path to ~/.config/sbtctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_launcher_path() -> Path:
    """Get the default location of the sbt launcher jar.

    sbtctl does not download or unpack the launcher itself; this is where
    it expects to find one when the user has not configured another path.

    Returns:
        Path to ~/.cache/sbtctl/sbt-launch.jar.
    """
    return get_cache_dir() / "sbt-launch.jar"


# =============================================================================
# Workspace paths
# =============================================================================


def get_project_dir(workspace: Path) -> Path:
    """Get the top-level meta-build directory of a workspace."""
    return workspace / "project"


def get_build_properties_path(workspace: Path) -> Path:
    """Get the path of the file that pins the workspace's sbt version.

    Returns:
        Path to <workspace>/project/build.properties.
    """
    return get_project_dir(workspace) / "build.properties"


def get_bsp_plugin_path(workspace: Path) -> Path:
    """Get the path of the BSP bridge source file.

    Returns:
        Path to <workspace>/project/SbtctlBsp.scala.
    """
    return get_project_dir(workspace) / BSP_PLUGIN_FILENAME


def get_option_file_paths(workspace: Path) -> list[Path]:
    """Get the launcher option files of a workspace, in reading order.

    Returns:
        Paths to <workspace>/.sbtopts and <workspace>/.jvmopts.
    """
    return [workspace / SBTOPTS_FILENAME, workspace / JVMOPTS_FILENAME]

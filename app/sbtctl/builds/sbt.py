"""sbt build tool adapter.

Computes the sbt invocations an editor launches to export a workspace
with sbt-bloop or to generate a BSP connection file, and primes the
workspace so those invocations succeed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sbtctl.builds.base import BuildTool
from sbtctl.core.config import UserConfig
from sbtctl.core.launcher import java_binary, workspace_options
from sbtctl.core.legacy import remove_legacy_global_plugin
from sbtctl.core.plugins import ensure_plugins_written, write_bsp_plugin
from sbtctl.core.version import (
    FIRST_SBT_VERSION_WITH_BSP,
    MINIMUM_SBT_VERSION,
    RECOMMENDED_SBT_VERSION,
    is_compatible_version,
    load_version,
)

logger = logging.getLogger(__name__)

# sbt tasks run after the launcher options
BLOOP_INSTALL_ARGS: tuple[str, ...] = (
    "-Dbloop.export-jar-classifiers=sources",
    "bloopInstall",
)
BSP_CONFIG_ARGS: tuple[str, ...] = ("bspConfig",)

# JVM flags that keep sbt output plain and machine-readable
_JAVA_FLAGS: tuple[str, ...] = (
    "-Djline.terminal=jline.UnsupportedTerminal",
    "-Dsbt.log.noformat=true",
    "-Dfile.encoding=UTF-8",
)


class SbtBuildTool(BuildTool):
    """Adapter for sbt workspaces.

    Attributes:
        workspace_version: sbt version pinned by the workspace, if any.
        config: User configuration controlling the launch.
    """

    def __init__(self, workspace_version: str | None, config: UserConfig) -> None:
        """Initialize the adapter.

        Args:
            workspace_version: Version from project/build.properties, or None.
            config: User configuration.
        """
        self.workspace_version = workspace_version
        self.config = config

    @classmethod
    def from_workspace(cls, workspace: Path, config: UserConfig) -> SbtBuildTool:
        """Create an adapter for the version pinned by a workspace.

        Raises:
            BuildPropertiesError: If build.properties exists but is unreadable.
        """
        return cls(load_version(workspace), config)

    @property
    def name(self) -> str:
        return "sbt"

    @property
    def minimum_version(self) -> str:
        return MINIMUM_SBT_VERSION

    @property
    def recommended_version(self) -> str:
        return self.config.fallback_sbt_version or RECOMMENDED_SBT_VERSION

    @property
    def version(self) -> str:
        return self.workspace_version or self.recommended_version

    def _launch_args(self, workspace: Path, sbt_args: tuple[str, ...], pin: bool) -> list[str]:
        """Assemble an sbt invocation.

        Args:
            workspace: Root directory of the sbt build.
            sbt_args: sbt tasks and their options.
            pin: Pin the sbt version on the command line when the
                workspace does not pin one itself.

        Returns:
            Command and arguments.
        """
        if self.config.sbt_script is not None:
            return [str(self.config.sbt_script), *sbt_args]

        args = [java_binary(self.config.java_home), *_JAVA_FLAGS]
        if pin and self.workspace_version is None:
            args.append(f"-Dsbt.version={self.version}")
        args.extend(workspace_options(workspace))
        args.extend(["-jar", str(self.config.effective_launcher_path)])
        args.extend(sbt_args)
        return args

    def compute_install_args(self, workspace: Path) -> list[str]:
        """Compute the bloopInstall invocation without touching the workspace."""
        return self._launch_args(workspace, BLOOP_INSTALL_ARGS, pin=True)

    def prepare_workspace(self, workspace: Path) -> list[Path]:
        """Bring the workspace and home directory in line for bloopInstall.

        Removes the legacy global plugin, then provisions the plugin
        descriptor into every meta-build.

        Returns:
            Plugin files that were written.

        Raises:
            OSError: If a plugin file cannot be written.
        """
        remove_legacy_global_plugin(self.version, self.config.effective_home_dir)
        return ensure_plugins_written(workspace, self.config)

    def bloop_install_args(self, workspace: Path) -> list[str]:
        """Build the bloopInstall invocation and prime the workspace for it.

        The workspace is always prepared, whichever launch path is used,
        so the returned command can be run as-is.

        Raises:
            OSError: If a plugin file cannot be written.
        """
        args = self.compute_install_args(workspace)
        self.prepare_workspace(workspace)
        return args

    def create_bsp_file_args(self, workspace: Path) -> list[str]:
        """Build the bspConfig invocation. The workspace is not modified."""
        return self._launch_args(workspace, BSP_CONFIG_ARGS, pin=False)

    def workspace_supports_bsp(self, workspace: Path) -> bool:
        """Check whether the workspace's sbt version can serve BSP.

        A supported workspace gets the BSP bridge source installed. A
        missing, unparsable or too old version is reported and yields
        False.

        Returns:
            True if the workspace supports BSP.

        Raises:
            BuildPropertiesError: If build.properties exists but is unreadable.
            OSError: If the bridge file cannot be written.
        """
        version = load_version(workspace)
        if version is None:
            logger.warning("No sbt version can be found for sbt workspace %s", workspace)
            return False

        logger.info("sbt %s found for workspace", version)
        try:
            supported = is_compatible_version(FIRST_SBT_VERSION_WITH_BSP, version)
        except ValueError:
            logger.warning("Unrecognized sbt version %r in %s", version, workspace)
            return False

        if not supported:
            logger.warning(
                "sbt %s does not support BSP, upgrade to %s or newer",
                version,
                FIRST_SBT_VERSION_WITH_BSP,
            )
            return False

        write_bsp_plugin(workspace)
        return True

"""Abstract base class for build tools.

This module defines the BuildTool interface that build tool adapters
implement to tell an editor how to export a workspace's build.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from sbtctl.core.version import is_compatible_version


class BuildTool(ABC):
    """Abstract base class for all build tool adapters.

    A build tool knows which version of itself a workspace uses and how
    to invoke it so that the build graph is exported for the editor.

    Example:
        >>> tool = SbtBuildTool.from_workspace(workspace, config)
        >>> args = tool.bloop_install_args(workspace)
        >>> run_interactive(args, cwd=str(workspace))
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the build tool's name."""

    @property
    def executable_name(self) -> str:
        """Return the name of the build tool's command line executable."""
        return self.name

    @property
    @abstractmethod
    def minimum_version(self) -> str:
        """Return the oldest version the build import works with."""

    @property
    @abstractmethod
    def recommended_version(self) -> str:
        """Return the version used when the workspace does not pin one."""

    @property
    @abstractmethod
    def version(self) -> str:
        """Return the version in effect for the workspace."""

    @abstractmethod
    def bloop_install_args(self, workspace: Path) -> list[str]:
        """Build the invocation that exports the build graph.

        Args:
            workspace: Root directory of the build.

        Returns:
            Command and arguments to launch as a subprocess.
        """

    @abstractmethod
    def create_bsp_file_args(self, workspace: Path) -> list[str]:
        """Build the invocation that writes the BSP connection file.

        Args:
            workspace: Root directory of the build.

        Returns:
            Command and arguments to launch as a subprocess.
        """

    def is_minimum_version_supported(self) -> bool:
        """Check whether the effective version meets the minimum.

        Returns:
            True if supported, False if too old or unparsable.
        """
        try:
            return is_compatible_version(self.minimum_version, self.version)
        except ValueError:
            return False

    def __str__(self) -> str:
        return self.name

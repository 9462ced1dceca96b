"""Build tool adapters for sbtctl.

This module exports the available build tool implementations.
"""

from sbtctl.builds.base import BuildTool
from sbtctl.builds.sbt import SbtBuildTool

__all__ = ["BuildTool", "SbtBuildTool"]

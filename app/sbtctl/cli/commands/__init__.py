"""CLI commands for sbtctl.

This package contains all subcommand implementations.
"""

from sbtctl.cli.commands import bsp, config, info, install

__all__ = ["bsp", "config", "info", "install"]

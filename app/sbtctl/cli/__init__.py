"""CLI package for sbtctl.

This package contains the Typer application and all subcommands.
"""

from sbtctl.cli.main import app

__all__ = ["app"]

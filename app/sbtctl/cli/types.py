"""Shared types and utilities for CLI commands.

This module provides the argument types and helpers used across
multiple CLI command modules to avoid code duplication.
"""

import json
import shlex
from pathlib import Path
from typing import Annotated

import typer

from sbtctl.builds.sbt import SbtBuildTool
from sbtctl.core.config import ConfigError, UserConfig, load_config_or_default
from sbtctl.utils.formatting import print_error
from sbtctl.utils.shell import command_exists, run_interactive

WorkspaceArg = Annotated[
    Path,
    typer.Argument(
        help="Root directory of the sbt build.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
]


def get_config(ctx: typer.Context) -> UserConfig:
    """Load the user configuration selected by the global --config option.

    Exits with code 1 if the configuration is invalid.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        The loaded configuration, or defaults when no file exists.
    """
    config_path = ctx.obj.get("config_path") if ctx.obj else None
    try:
        return load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_build_tool(ctx: typer.Context, workspace: Path) -> SbtBuildTool:
    """Create the sbt adapter for a workspace.

    Exits with code 1 if build.properties cannot be read.
    """
    config = get_config(ctx)
    try:
        return SbtBuildTool.from_workspace(workspace, config)
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def emit_command(args: list[str], json_output: bool) -> None:
    """Print an invocation as a shell line or a JSON array."""
    if json_output:
        typer.echo(json.dumps(args))
    else:
        typer.echo(shlex.join(args))


def launch(args: list[str], workspace: Path) -> None:
    """Run an invocation in the workspace and exit with its exit code.

    Args:
        args: Command and arguments.
        workspace: Working directory for the command.
    """
    if not command_exists(args[0]):
        print_error(f"Command not found: {args[0]}")
        raise typer.Exit(code=1)

    if "-jar" in args:
        launcher = Path(args[args.index("-jar") + 1])
        if not launcher.is_file():
            print_error(f"sbt launcher not found: {launcher}")
            raise typer.Exit(code=1)

    exit_code = run_interactive(args, cwd=str(workspace))
    raise typer.Exit(code=exit_code)

"""Install command implementation.

Primes a workspace for build import and prints (or runs) the sbt
invocation that exports it with sbt-bloop.
"""

from pathlib import Path
from typing import Annotated

import typer

from sbtctl.cli.types import WorkspaceArg, emit_command, get_build_tool, launch
from sbtctl.utils.formatting import print_error


def install(
    ctx: typer.Context,
    workspace: WorkspaceArg = Path("."),
    run: Annotated[
        bool,
        typer.Option(
            "--run",
            "-r",
            help="Run the command in the workspace instead of printing it.",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the command as a JSON array.",
        ),
    ] = False,
) -> None:
    """Prepare WORKSPACE for build import and print the bloopInstall command.

    Removes the legacy global plugin and writes the sbt-bloop plugin
    descriptor into every meta-build before the command is printed.

    Examples:
        sbtctl install              # Current directory
        sbtctl install ~/src/app --json
        sbtctl install --run        # Export the build now
    """
    tool = get_build_tool(ctx, workspace)

    try:
        args = tool.bloop_install_args(workspace)
    except OSError as e:
        print_error(f"Failed to prepare workspace: {e}")
        raise typer.Exit(code=1) from e

    if run:
        launch(args, workspace)

    emit_command(args, json_output)

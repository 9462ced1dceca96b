"""BSP command implementation.

Prints (or runs) the sbt invocation that writes the workspace's BSP
connection file. The workspace itself is left untouched.
"""

from pathlib import Path
from typing import Annotated

import typer

from sbtctl.cli.types import WorkspaceArg, emit_command, get_build_tool, launch


def bsp(
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
    """Print the command that generates WORKSPACE's BSP connection file."""
    tool = get_build_tool(ctx, workspace)
    args = tool.create_bsp_file_args(workspace)

    if run:
        launch(args, workspace)

    emit_command(args, json_output)

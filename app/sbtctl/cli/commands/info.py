"""Info command implementation.

Reports the sbt version a workspace uses and whether it can serve BSP.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from sbtctl.cli.types import WorkspaceArg, get_build_tool
from sbtctl.utils.formatting import console, create_summary_table, print_error, print_warning


def info(
    ctx: typer.Context,
    workspace: WorkspaceArg = Path("."),
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show the sbt version of WORKSPACE and whether it supports BSP.

    A workspace that supports BSP gets the BSP bridge plugin installed
    into its project/ directory.
    """
    tool = get_build_tool(ctx, workspace)

    try:
        supports_bsp = tool.workspace_supports_bsp(workspace)
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    report: dict[str, object] = {
        "workspace": str(workspace),
        "workspace_version": tool.workspace_version,
        "effective_version": tool.version,
        "minimum_version": tool.minimum_version,
        "minimum_version_supported": tool.is_minimum_version_supported(),
        "supports_bsp": supports_bsp,
    }

    if json_output:
        typer.echo(json.dumps(report, indent=2))
        return

    _print_table(report)

    if not report["minimum_version_supported"]:
        print_warning(
            f"sbt {tool.version} is older than {tool.minimum_version}; "
            "build import is not supported."
        )


def _print_table(report: dict[str, object]) -> None:
    """Print the report as a Rich table.

    Args:
        report: Values collected for the workspace.
    """
    table = create_summary_table("sbt Workspace")
    table.add_row("Workspace", str(report["workspace"]))
    table.add_row("Pinned version", str(report["workspace_version"] or "-"))
    table.add_row("Effective version", str(report["effective_version"]))
    table.add_row("BSP", "[success]supported[/]" if report["supports_bsp"] else "[muted]no[/]")
    console.print(table)

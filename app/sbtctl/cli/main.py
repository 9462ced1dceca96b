"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from sbtctl import __version__
from sbtctl.cli.commands import bsp, config, info, install
from sbtctl.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="sbtctl",
    help="Prepare sbt workspaces for editor build import.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sbtctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ~/.config/sbtctl/config.toml).",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """sbtctl - prepare sbt workspaces for editor build import.

    Detects the workspace's sbt version, provisions the sbt-bloop plugin
    into its meta-builds and prints the sbt invocations an editor runs.
    """
    configure_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="info")(info.info)
app.command(name="install")(install.install)
app.command(name="bsp")(bsp.bsp)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

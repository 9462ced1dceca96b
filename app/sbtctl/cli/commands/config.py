"""Config command implementation.

Shows and initializes the user configuration file.
"""

from typing import Annotated

import typer

from sbtctl.cli.types import get_config
from sbtctl.core.config import ConfigError, UserConfig, config_to_dict, save_config
from sbtctl.core.paths import get_config_path
from sbtctl.utils.formatting import (
    console,
    create_summary_table,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Show or initialize the sbtctl configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the configuration in effect."""
    config = get_config(ctx)

    table = create_summary_table("sbtctl Configuration")
    for key, value in config_to_dict(config).items():
        table.add_row(key, str(value))
    table.add_row("launcher (effective)", str(config.effective_launcher_path))
    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = (ctx.obj or {}).get("config_path") or get_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        return

    try:
        saved = save_config(UserConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")

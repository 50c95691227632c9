"""Configuration commands.

Provides commands to show, create and locate the emptydirs
configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from emptydirs.cli.types import get_config
from emptydirs.core.config import ConfigError, get_default_config, save_config
from emptydirs.core.paths import get_config_path
from emptydirs.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show and manage configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = get_config(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("include_hidden", str(config.include_hidden).lower())
    table.add_row("ignore_patterns", escape(", ".join(config.ignore_patterns)) or "-")
    table.add_row("ignore_init_py", str(config.ignore_init_py).lower())
    table.add_row("confirm_before_delete", str(config.confirm_before_delete).lower())
    table.add_row("confirm_threshold", str(config.confirm_threshold))

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a configuration file with default settings."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    config_path = obj.get("config_path") or get_config_path()

    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the configuration file location."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    typer.echo(str(obj.get("config_path") or get_config_path()))

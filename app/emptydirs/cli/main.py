"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from emptydirs import __version__
from emptydirs.cli.commands import check, clean, config, scan
from emptydirs.core.log import setup_logging

# Create main Typer app
app = typer.Typer(
    name="emptydirs",
    help="Find and remove empty folders.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"emptydirs version {__version__}")
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
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a config file (default: ~/.config/emptydirs/config.toml).",
        ),
    ] = None,
) -> None:
    """emptydirs - find and remove empty folders.

    A folder is empty when it holds nothing but hidden entries (unless
    --hidden is given) and other empty folders. Folders containing an
    entry that matches an ignore pattern, such as .git, are never touched.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="scan")(scan.scan)
app.command(name="clean")(clean.clean)
app.command(name="check")(check.check)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

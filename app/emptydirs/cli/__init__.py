"""CLI package for emptydirs.

This package contains the Typer application and all subcommands.
"""

from emptydirs.cli.main import app

__all__ = ["app"]

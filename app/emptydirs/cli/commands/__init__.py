"""CLI commands for emptydirs.

This package contains all subcommand implementations.
"""

from emptydirs.cli.commands import check, clean, config, scan

__all__ = ["check", "clean", "config", "scan"]

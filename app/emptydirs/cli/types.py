"""Shared types and utilities for CLI commands.

This module provides the policy options shared by the scan, clean and
check commands, and helpers to turn them into a ScanPolicy.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from emptydirs.cleaner.models import ScanPolicy
from emptydirs.cleaner.scanner import EmptyDirScanner
from emptydirs.core.config import CleanupConfig, ConfigError, load_config, load_config_or_default
from emptydirs.utils.formatting import print_error

RootsArgument = Annotated[
    list[Path],
    typer.Argument(
        help="Directories to scan.",
        show_default=False,
    ),
]
HiddenOption = Annotated[
    bool | None,
    typer.Option(
        "--hidden/--no-hidden",
        help="Inspect hidden entries (default from config).",
        show_default=False,
    ),
]
IgnoreOption = Annotated[
    list[str] | None,
    typer.Option(
        "--ignore",
        "-i",
        help="Ignore pattern; repeat to give several. Replaces the configured list.",
        show_default=False,
    ),
]
NoIgnoreOption = Annotated[
    bool,
    typer.Option(
        "--no-ignore",
        help="Disable all ignore patterns.",
    ),
]
InitPyOption = Annotated[
    bool | None,
    typer.Option(
        "--init-py/--no-init-py",
        help="Treat a lone __init__.py as no content (default from config).",
        show_default=False,
    ),
]


def get_config(ctx: typer.Context) -> CleanupConfig:
    """Load the configuration selected by the global --config option.

    An explicit --config path must exist; the default location falls
    back to built-in defaults when no file is present.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Loaded CleanupConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    config_path: Path | None = obj.get("config_path")

    try:
        if config_path is not None:
            return load_config(config_path)
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def build_policy(
    config: CleanupConfig,
    *,
    hidden: bool | None = None,
    ignore: list[str] | None = None,
    no_ignore: bool = False,
    init_py: bool | None = None,
) -> ScanPolicy:
    """Merge command-line overrides into the configured policy.

    Args:
        config: Loaded configuration.
        hidden: Override for include_hidden, None keeps the config value.
        ignore: Replacement ignore patterns, None keeps the config value.
        no_ignore: Clear all ignore patterns.
        init_py: Override for ignore_init_py, None keeps the config value.

    Returns:
        ScanPolicy for this invocation.
    """
    base = config.to_policy()

    if no_ignore:
        patterns: tuple[str, ...] = ()
    elif ignore:
        patterns = tuple(ignore)
    else:
        patterns = tuple(base.ignore_patterns)

    return ScanPolicy(
        include_hidden=base.include_hidden if hidden is None else hidden,
        ignore_patterns=patterns,
        ignore_init_py=base.ignore_init_py if init_py is None else init_py,
    )


def require_directories(paths: list[Path]) -> None:
    """Check that every path is an existing directory.

    Raises:
        typer.Exit: If any path is not a directory.
    """
    for path in paths:
        if not path.is_dir():
            print_error(f"Not a directory: {escape(str(path))}")
            raise typer.Exit(code=1)


def collect_empty_dirs(roots: list[Path], policy: ScanPolicy) -> list[str]:
    """Scan several roots and merge their results.

    Args:
        roots: Directories to scan (already validated).
        policy: Classification rules.

    Returns:
        Distinct empty directories across all roots, deepest first.
    """
    scanner = EmptyDirScanner(policy)
    found: list[str] = []
    for root in roots:
        found.extend(scanner.scan(root))
    return sorted(dict.fromkeys(found), key=len, reverse=True)

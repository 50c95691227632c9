"""Scan command implementation.

Lists empty directories under one or more roots without modifying
anything.
"""

import json
import time
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from emptydirs.cleaner.models import ScanPolicy
from emptydirs.cli.display import create_empty_dirs_table, policy_summary
from emptydirs.cli.types import (
    HiddenOption,
    IgnoreOption,
    InitPyOption,
    NoIgnoreOption,
    RootsArgument,
    build_policy,
    collect_empty_dirs,
    get_config,
    require_directories,
)
from emptydirs.utils.formatting import (
    console,
    format_duration,
    print_error,
    print_info,
    print_success,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def scan(
    ctx: typer.Context,
    roots: RootsArgument,
    hidden: HiddenOption = None,
    ignore: IgnoreOption = None,
    no_ignore: NoIgnoreOption = False,
    init_py: InitPyOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export results to JSON file.",
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of results displayed.",
        ),
    ] = None,
) -> None:
    """Scan directories for empty folders.

    Nothing is deleted. Results are ordered deepest first.

    Examples:
        emptydirs scan .                      # Scan the current directory
        emptydirs scan src tests              # Scan several roots
        emptydirs scan . --hidden             # Count dotfiles as content
        emptydirs scan . -i build -i "*.egg-info"
        emptydirs scan . --format json        # Output as JSON
        emptydirs scan . --export empty.json  # Export to JSON file
    """
    require_directories(roots)
    policy = build_policy(
        get_config(ctx),
        hidden=hidden,
        ignore=ignore,
        no_ignore=no_ignore,
        init_py=init_py,
    )

    start = time.perf_counter()
    empty_dirs = collect_empty_dirs(roots, policy)
    elapsed = format_duration(time.perf_counter() - start)

    # Export all results, regardless of --limit
    if export_path is not None:
        _export_results(roots, policy, empty_dirs, export_path)

    display_dirs = empty_dirs[:limit] if limit else empty_dirs

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_to_dict(roots, policy, display_dirs)))
        return

    if not empty_dirs:
        print_success(f"No empty folders found ({len(roots)} root(s) scanned in {elapsed}).")
        return

    console.print(create_empty_dirs_table(display_dirs))
    console.print(f"\n[dim]Found {len(empty_dirs)} empty folder(s) in {elapsed}[/dim]")
    console.print(f"[dim]Policy: {policy_summary(policy)}[/dim]")
    if limit and len(display_dirs) < len(empty_dirs):
        console.print(
            f"[dim](showing {len(display_dirs)} of {len(empty_dirs)}, limited to {limit})[/dim]"
        )


def _to_dict(roots: list[Path], policy: ScanPolicy, empty_dirs: list[str]) -> dict[str, object]:
    """Build the JSON document for a scan."""
    return {
        "roots": [str(r) for r in roots],
        "policy": {
            "include_hidden": policy.include_hidden,
            "ignore_patterns": list(policy.ignore_patterns),
            "ignore_init_py": policy.ignore_init_py,
        },
        "count": len(empty_dirs),
        "empty_dirs": empty_dirs,
    }


def _export_results(
    roots: list[Path],
    policy: ScanPolicy,
    empty_dirs: list[str],
    export_path: Path,
) -> None:
    """Export scan results to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(_to_dict(roots, policy, empty_dirs), indent=2))
        print_info(f"Results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e

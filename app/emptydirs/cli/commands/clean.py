"""Clean command implementation.

Scans one or more roots for empty directories and removes them,
deepest first, after an optional confirmation.
"""

import logging
import time
from typing import Annotated

import typer

from emptydirs.cleaner.remover import EmptyDirRemover
from emptydirs.cli.display import (
    create_empty_dirs_table,
    create_results_table,
    print_removal_summary,
)
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
from emptydirs.utils.formatting import console, format_duration, print_info, print_success

logger = logging.getLogger(__name__)

# Number of failures echoed to the log after a run
_MAX_LOGGED_FAILURES = 10


def clean(
    ctx: typer.Context,
    roots: RootsArgument,
    hidden: HiddenOption = None,
    ignore: IgnoreOption = None,
    no_ignore: NoIgnoreOption = False,
    init_py: InitPyOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove empty folders below the given directories.

    Folders are removed deepest first. Only empty folders are removed;
    anything that gained content since the scan is reported as failed.

    Examples:
        emptydirs clean .                 # Scan and remove, asking if many
        emptydirs clean . --dry-run       # Preview only
        emptydirs clean . -y --init-py    # No prompt, drop lone __init__.py
    """
    require_directories(roots)
    config = get_config(ctx)
    policy = build_policy(
        config,
        hidden=hidden,
        ignore=ignore,
        no_ignore=no_ignore,
        init_py=init_py,
    )

    start = time.perf_counter()
    for root in roots:
        logger.info("Scanning folder: %s", root)
    empty_dirs = collect_empty_dirs(roots, policy)

    if not empty_dirs:
        elapsed = format_duration(time.perf_counter() - start)
        print_success(f"No empty folders found ({len(roots)} root(s) scanned in {elapsed}).")
        return

    title = "Planned Removals (dry-run)" if dry_run else "Planned Removals"
    console.print(create_empty_dirs_table(empty_dirs, title=title))

    if not dry_run and not yes and config.needs_confirmation(len(empty_dirs)):
        confirmed = typer.confirm(
            f"\nAbout to delete {len(empty_dirs)} folder(s). Continue?",
            default=False,
        )
        if not confirmed:
            logger.info("User cancelled deletion.")
            print_info("Aborted.")
            raise typer.Exit(code=0)

    remover = EmptyDirRemover(dry_run=dry_run, ignore_init_py=policy.ignore_init_py)
    outcome = remover.remove(empty_dirs)
    elapsed = format_duration(time.perf_counter() - start)

    console.print(create_results_table(outcome))
    print_removal_summary(outcome, elapsed)

    if dry_run:
        logger.info("Dry run: found %d empty folders; no deletions performed.", len(empty_dirs))
        return

    logger.info(
        "Deleted %d folders in %s (%d failures).",
        len(outcome.deleted),
        elapsed,
        len(outcome.failed),
    )
    if outcome.has_failures:
        shown = outcome.failed[:_MAX_LOGGED_FAILURES]
        logger.warning(
            "Failures (%d): %s",
            len(outcome.failed),
            "; ".join(f"{f.path}: {f.error}" for f in shown),
        )
        raise typer.Exit(code=1)

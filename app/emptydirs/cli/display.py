"""Shared Rich display functions for scan and removal results.

Provides table builders and summary printers used by the scan and
clean commands.
"""

from rich.markup import escape
from rich.table import Table

from emptydirs.cleaner.models import RemovalOutcome, ScanPolicy
from emptydirs.utils.formatting import print_info, print_success, print_warning


def create_empty_dirs_table(paths: list[str], title: str = "Empty Directories") -> Table:
    """Create a Rich table listing empty directories.

    Args:
        paths: Directory paths, in display order.
        title: Table title.

    Returns:
        Rich Table configured for path display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", style="muted", justify="right", width=5)
    table.add_column("Directory", style="path", overflow="fold")

    for index, path in enumerate(paths, start=1):
        table.add_row(str(index), escape(path))

    return table


def create_results_table(outcome: RemovalOutcome) -> Table:
    """Create a Rich table displaying removal results.

    Args:
        outcome: Result of a batch removal.

    Returns:
        Rich Table with one row per processed path.
    """
    table = Table(
        title="Removal Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Directory", overflow="fold")
    table.add_column("Details", style="muted")

    for path in outcome.deleted:
        if outcome.dry_run:
            table.add_row("[info]dry-run[/]", escape(path), "Would remove")
        else:
            table.add_row("[success]OK[/]", escape(path), "")

    for failure in outcome.failed:
        table.add_row("[error]FAIL[/]", escape(failure.path), escape(failure.error))

    return table


def policy_summary(policy: ScanPolicy) -> str:
    """Describe a scan policy in one line."""
    patterns = ", ".join(policy.ignore_patterns) or "none"
    return escape(
        f"hidden={'yes' if policy.include_hidden else 'no'}, "
        f"ignore=[{patterns}], "
        f"__init__.py={'ignored' if policy.ignore_init_py else 'counted'}"
    )


def print_removal_summary(outcome: RemovalOutcome, elapsed: str) -> None:
    """Print a summary of a batch removal.

    Args:
        outcome: Result of a batch removal.
        elapsed: Pre-formatted elapsed time.
    """
    if outcome.dry_run:
        print_info(f"Dry-run: {len(outcome.deleted)} folder(s) would be removed.")
        return

    message = (
        f"Removed {len(outcome.deleted)} folder(s) in {elapsed}. {len(outcome.failed)} failed."
    )
    if outcome.has_failures:
        print_warning(message)
    else:
        print_success(message)

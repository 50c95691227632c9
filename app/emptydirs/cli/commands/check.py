"""Check command implementation.

Classifies a single directory without scanning for results.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from emptydirs.cleaner.scanner import EmptyDirScanner
from emptydirs.cli.types import (
    HiddenOption,
    IgnoreOption,
    InitPyOption,
    NoIgnoreOption,
    build_policy,
    get_config,
    require_directories,
)
from emptydirs.utils.formatting import console


def check(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(help="Directory to check.", show_default=False),
    ],
    hidden: HiddenOption = None,
    ignore: IgnoreOption = None,
    no_ignore: NoIgnoreOption = False,
    init_py: InitPyOption = None,
) -> None:
    """Check whether a single directory is empty.

    Exits with code 0 if the directory is empty and 1 otherwise, so the
    command can be used in shell conditions.
    """
    require_directories([path])
    policy = build_policy(
        get_config(ctx),
        hidden=hidden,
        ignore=ignore,
        no_ignore=no_ignore,
        init_py=init_py,
    )

    if EmptyDirScanner(policy).is_empty(path):
        console.print(f"[success]empty[/] {escape(str(path))}")
        return

    console.print(f"[warning]not empty[/] {escape(str(path))}")
    raise typer.Exit(code=1)

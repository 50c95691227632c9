"""Deepest-first removal of empty directories.

Removes directories one by one, children before parents, and records
each path as deleted or failed. A failure never aborts the batch.
Removal never recurses: a directory that still has content stays in
place and is reported as failed.
"""

import logging
import os
import stat
from collections.abc import Callable, Iterable

from emptydirs.cleaner.models import INIT_PY, RemovalFailure, RemovalOutcome

logger = logging.getLogger(__name__)


def _remove_strict(path: str) -> None:
    """Remove a directory only if it is empty."""
    os.rmdir(path)


def _remove_forced(path: str) -> None:
    """Clear the read-only bit on a directory, then remove it if empty.

    The original mode is put back when the directory stays in place.
    """
    mode = stat.S_IMODE(os.stat(path, follow_symlinks=False).st_mode)
    os.chmod(path, mode | stat.S_IWUSR)
    try:
        os.rmdir(path)
    except OSError:
        try:
            os.chmod(path, mode)
        except OSError as e:
            logger.warning("Could not restore mode %o on %s: %s", mode, path, e)
        raise


# Tried in order until one succeeds
REMOVAL_STRATEGIES: tuple[tuple[str, Callable[[str], None]], ...] = (
    ("rmdir", _remove_strict),
    ("force", _remove_forced),
)


class EmptyDirRemover:
    """Removes directories in deepest-first order.

    Args:
        dry_run: If True, report every path as deleted without touching
            the filesystem.
        ignore_init_py: If True, delete an ``__init__.py`` file inside each
            directory before removing it.
    """

    def __init__(self, *, dry_run: bool = False, ignore_init_py: bool = False) -> None:
        self._dry_run = dry_run
        self._ignore_init_py = ignore_init_py

    @property
    def dry_run(self) -> bool:
        """Whether removals are simulated."""
        return self._dry_run

    def remove(self, paths: Iterable[str]) -> RemovalOutcome:
        """Remove directories and report per-path results.

        Paths are deduplicated and sorted by descending length, so that
        children are removed before their parents even when the caller
        passes them out of order.

        Args:
            paths: Directory paths to remove.

        Returns:
            RemovalOutcome listing each path exactly once.
        """
        ordered = sorted(dict.fromkeys(paths), key=len, reverse=True)
        outcome = RemovalOutcome(dry_run=self._dry_run)

        for path in ordered:
            error = self._remove_single(path)
            if error is None:
                outcome.deleted.append(path)
            else:
                outcome.failed.append(RemovalFailure(path=path, error=error))

        return outcome

    def _remove_single(self, path: str) -> str | None:
        """Remove one directory.

        Args:
            path: Directory path to remove.

        Returns:
            None on success, otherwise the last error message.
        """
        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return None

        if self._ignore_init_py:
            self._remove_init_py(path)

        last_error = ""
        for name, strategy in REMOVAL_STRATEGIES:
            try:
                strategy(path)
            except OSError as e:
                logger.debug("Removal strategy %r failed for %s: %s", name, path, e)
                last_error = str(e)
                continue
            logger.debug("Removed %s (%s)", path, name)
            return None

        return last_error or f"Could not remove {path}"

    @staticmethod
    def _remove_init_py(path: str) -> None:
        """Delete the ``__init__.py`` sentinel, ignoring any failure."""
        init_file = os.path.join(path, INIT_PY)
        try:
            os.unlink(init_file)
        except OSError as e:
            logger.debug("Could not remove %s: %s", init_file, e)


def remove_dirs(
    paths: Iterable[str],
    *,
    dry_run: bool = False,
    ignore_init_py: bool = False,
) -> RemovalOutcome:
    """Remove directories deepest-first.

    Convenience wrapper around EmptyDirRemover.

    Args:
        paths: Directory paths to remove.
        dry_run: Simulate without touching the filesystem.
        ignore_init_py: Delete ``__init__.py`` inside each directory first.

    Returns:
        RemovalOutcome listing each path exactly once.
    """
    return EmptyDirRemover(dry_run=dry_run, ignore_init_py=ignore_init_py).remove(paths)

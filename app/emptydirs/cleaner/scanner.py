"""Depth-first classifier for empty directories.

Walks a directory tree and collects every directory that has no
meaningful content under the active ScanPolicy. A directory is empty
when all of its visible entries are skipped or are themselves empty
directories. Symlinks are never followed and always count as content.
Unreadable directories count as content too, so a directory is never
reported empty while its contents are unknown.
"""

import logging
import os
import time
from collections.abc import Iterable
from pathlib import Path

from emptydirs.cleaner.models import (
    DEFAULT_IGNORE_PATTERNS,
    HIDDEN_PREFIX,
    INIT_PY,
    ScanPolicy,
)
from emptydirs.cleaner.patterns import matches_ignore

logger = logging.getLogger(__name__)


class EmptyDirScanner:
    """Collects empty directories below a root.

    A scanner holds only its policy; all traversal state (the result
    accumulator and the visited set used for cycle detection) lives
    inside a single scan() call, so one instance can be reused for
    several roots.

    Args:
        policy: Classification rules. Defaults to ScanPolicy().
    """

    def __init__(self, policy: ScanPolicy | None = None) -> None:
        self._policy = policy if policy is not None else ScanPolicy()

    @property
    def policy(self) -> ScanPolicy:
        """Policy used by this scanner."""
        return self._policy

    def scan(self, root: str | os.PathLike[str]) -> list[str]:
        """Scan a directory tree and return its empty directories.

        The root is included in the result when it is empty itself.
        The caller is responsible for checking that root is a directory.

        Args:
            root: Directory to scan.

        Returns:
            Distinct directory paths, ordered by descending path length
            so that descendants come before their ancestors.
        """
        start = time.perf_counter()
        found: list[str] = []
        visited: set[str] = set()

        self._check_dir(os.fspath(root), found, visited)

        # Longer paths first: a proxy for depth, ties are unrelated branches
        result = sorted(dict.fromkeys(found), key=len, reverse=True)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Scanned %s: %d empty director%s in %.0fms",
            root,
            len(result),
            "y" if len(result) == 1 else "ies",
            elapsed_ms,
        )
        return result

    def is_empty(self, path: str | os.PathLike[str]) -> bool:
        """Check a single directory with this scanner's policy.

        See is_empty_dir() for the semantics.
        """
        return is_empty_dir(
            path,
            include_hidden=self._policy.include_hidden,
            ignore_patterns=self._policy.ignore_patterns,
            ignore_init_py=self._policy.ignore_init_py,
        )

    def _check_dir(self, directory: str, found: list[str], visited: set[str]) -> bool:
        """Classify one directory and recurse into its subdirectories.

        Empty directories are appended to ``found`` after all of their
        descendants, which keeps the accumulator in post-order. Child
        paths are joined onto ``directory`` as given, so results keep the
        spelling of the root.

        Args:
            directory: Directory to classify.
            found: Accumulator for empty directory paths.
            visited: Resolved paths already classified during this scan.

        Returns:
            True if the directory is empty under the policy.
        """
        real = _resolve(directory)
        if real in visited:
            # Cycle: assume empty, the first visit decides membership
            logger.debug("Already visited %s (resolves to %s)", directory, real)
            return True
        visited.add(real)

        entries = _list_entries(Path(directory))
        if entries is None:
            return False

        if not entries:
            found.append(directory)
            return True

        if _contains_ignored(entries, self._policy.ignore_patterns):
            logger.debug("Ignore pattern matched in %s, keeping tree untouched", directory)
            return False

        empty = True
        for entry in entries:
            if _is_skipped(entry.name, self._policy.include_hidden, self._policy.ignore_init_py):
                continue

            if _is_real_dir(entry):
                # Siblings are still walked after the parent turns non-empty
                if not self._check_dir(os.path.join(directory, entry.name), found, visited):
                    empty = False
            else:
                empty = False

        if empty:
            found.append(directory)
        return empty


def scan_empty_dirs(
    root: str | os.PathLike[str],
    policy: ScanPolicy | None = None,
) -> list[str]:
    """Return the empty directories below root, deepest first.

    Convenience wrapper around EmptyDirScanner.

    Args:
        root: Directory to scan.
        policy: Classification rules. Defaults to ScanPolicy().

    Returns:
        Distinct directory paths, descendants before ancestors.
    """
    return EmptyDirScanner(policy).scan(root)


def is_empty_dir(
    path: str | os.PathLike[str],
    include_hidden: bool = False,
    ignore_patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS,
    ignore_init_py: bool = False,
) -> bool:
    """Check whether a single directory is empty.

    Applies the same entry rules as EmptyDirScanner recursively, but
    collects nothing, stops at the first non-empty entry and has no
    cycle protection.

    Args:
        path: Directory to check.
        include_hidden: Inspect entries whose name starts with a dot.
        ignore_patterns: Patterns that force the directory to be non-empty.
        ignore_init_py: Disregard ``__init__.py`` files.

    Returns:
        True if the directory is empty, False if it has content or
        cannot be read.
    """
    patterns = tuple(ignore_patterns)
    entries = _list_entries(Path(path))
    if entries is None:
        return False

    if _contains_ignored(entries, patterns):
        return False

    for entry in entries:
        if _is_skipped(entry.name, include_hidden, ignore_init_py):
            continue
        if not _is_real_dir(entry):
            return False
        if not is_empty_dir(entry, include_hidden, patterns, ignore_init_py):
            return False

    return True


def _resolve(directory: str) -> str:
    """Return the symlink-resolved form of a path, or the path itself."""
    try:
        return str(Path(directory).resolve())
    except (OSError, RuntimeError):
        return directory


def _list_entries(directory: Path) -> list[Path] | None:
    """List directory entries, or return None if the listing fails."""
    try:
        return list(directory.iterdir())
    except OSError as e:
        _log_access_error(directory, e)
    return None


def _is_real_dir(entry: Path) -> bool:
    """Check if an entry is a directory and not a symlink.

    Anything else counts as content, including entries whose type cannot
    be read.
    """
    try:
        return not entry.is_symlink() and entry.is_dir()
    except OSError as e:
        _log_access_error(entry, e)
        return False


def _log_access_error(path: Path, error: OSError) -> None:
    if isinstance(error, PermissionError):
        logger.warning("Permission denied reading %s", path)
    else:
        logger.debug("Cannot inspect %s: %s", path, error)


def _contains_ignored(entries: list[Path], patterns: Iterable[str]) -> bool:
    """Check if any entry name matches an ignore pattern."""
    patterns = tuple(patterns)
    if not patterns:
        return False
    return any(matches_ignore(entry.name, patterns) for entry in entries)


def _is_skipped(name: str, include_hidden: bool, ignore_init_py: bool) -> bool:
    """Check if an entry is invisible to classification."""
    if not include_hidden and name.startswith(HIDDEN_PREFIX):
        return True
    return ignore_init_py and name == INIT_PY

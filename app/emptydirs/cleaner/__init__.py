"""Empty directory classification and removal.

This module provides the depth-first classifier that collects empty
directories, the ignore-pattern matcher it relies on, and the
deepest-first remover that deletes them.
"""

from emptydirs.cleaner.models import (
    DEFAULT_IGNORE_PATTERNS,
    HIDDEN_PREFIX,
    INIT_PY,
    RemovalFailure,
    RemovalOutcome,
    ScanPolicy,
)
from emptydirs.cleaner.patterns import matches_ignore
from emptydirs.cleaner.remover import EmptyDirRemover, remove_dirs
from emptydirs.cleaner.scanner import EmptyDirScanner, is_empty_dir, scan_empty_dirs

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "HIDDEN_PREFIX",
    "INIT_PY",
    "EmptyDirRemover",
    "EmptyDirScanner",
    "RemovalFailure",
    "RemovalOutcome",
    "ScanPolicy",
    "is_empty_dir",
    "matches_ignore",
    "remove_dirs",
    "scan_empty_dirs",
]

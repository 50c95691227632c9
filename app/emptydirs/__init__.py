"""emptydirs - find and remove empty directories.

The public API re-exports the classifier, the remover and the
single-directory point check from :mod:`emptydirs.cleaner`.
"""

from emptydirs.cleaner import (
    DEFAULT_IGNORE_PATTERNS,
    EmptyDirRemover,
    EmptyDirScanner,
    RemovalFailure,
    RemovalOutcome,
    ScanPolicy,
    is_empty_dir,
    remove_dirs,
    scan_empty_dirs,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "EmptyDirRemover",
    "EmptyDirScanner",
    "RemovalFailure",
    "RemovalOutcome",
    "ScanPolicy",
    "__version__",
    "is_empty_dir",
    "remove_dirs",
    "scan_empty_dirs",
]

"""Domain models for empty directory scanning and removal.

This module defines the scan policy consumed by the classifier and
the structured outcome returned by the remover.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

# Entries whose name starts with this marker are hidden
HIDDEN_PREFIX = "."

# Sentinel file that may be disregarded when ignore_init_py is enabled
INIT_PY = "__init__.py"

DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (".git", "node_modules", ".vscode")


@dataclass(frozen=True, slots=True)
class ScanPolicy:
    """Rules that decide whether a directory counts as empty.

    Attributes:
        include_hidden: If True, entries starting with a dot are inspected
            like any other entry. If False they are invisible.
        ignore_patterns: Names or ``*`` wildcard patterns. A directory that
            contains a matching entry is never considered empty.
        ignore_init_py: If True, an ``__init__.py`` file does not count
            toward non-emptiness.
    """

    include_hidden: bool = False
    ignore_patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS
    ignore_init_py: bool = False

    def __post_init__(self) -> None:
        """Normalize ignore patterns to an immutable tuple."""
        if isinstance(self.ignore_patterns, str):
            msg = "ignore_patterns must be a sequence of strings, not a string"
            raise TypeError(msg)
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))


@dataclass(frozen=True, slots=True)
class RemovalFailure:
    """A directory that could not be removed.

    Attributes:
        path: Directory path that was operated on.
        error: Human-readable description of the last removal error.
    """

    path: str
    error: str


@dataclass(slots=True)
class RemovalOutcome:
    """Result of a batch removal.

    Every input path ends up in exactly one of ``deleted`` or ``failed``.

    Attributes:
        deleted: Paths that were removed (or would be, in dry-run mode),
            in the order they were processed.
        failed: Paths that could not be removed, with the error message.
        dry_run: Whether the batch was simulated.
    """

    deleted: list[str] = field(default_factory=list)
    failed: list[RemovalFailure] = field(default_factory=list)
    dry_run: bool = False

    @property
    def total(self) -> int:
        """Number of paths processed."""
        return len(self.deleted) + len(self.failed)

    @property
    def has_failures(self) -> bool:
        """Whether at least one path could not be removed."""
        return bool(self.failed)

    @property
    def failed_paths(self) -> list[str]:
        """Paths of all failed removals."""
        return [f.path for f in self.failed]

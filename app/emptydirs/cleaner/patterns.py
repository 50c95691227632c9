"""Ignore-pattern matching for directory entries.

An ignore pattern marks a directory as belonging to special tooling
(version control, dependency caches, editor settings). Patterns are
matched against a single entry name, never a full path.
"""

import re
from collections.abc import Iterable
from functools import lru_cache


@lru_cache(maxsize=256)
def _wildcard_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``*``-only wildcard pattern into an anchored regex.

    Every character other than ``*`` is matched literally, so patterns
    such as ``build[1]`` or ``a?b`` are not treated as glob classes.
    """
    parts = (re.escape(part) for part in pattern.split("*"))
    return re.compile("^" + ".*".join(parts) + "$", re.DOTALL)


def matches_pattern(name: str, pattern: str) -> bool:
    """Check a single entry name against a single ignore pattern.

    Matching rules, in order:
    1. Exact equality.
    2. Patterns containing ``*`` must match the whole name.
    3. Patterns without ``*`` also match as a substring of the name.

    Args:
        name: Entry name (basename).
        pattern: Ignore pattern. Empty patterns never match.

    Returns:
        True if the name matches the pattern.
    """
    if not pattern:
        return False
    if pattern == name:
        return True
    if "*" in pattern:
        return _wildcard_regex(pattern).match(name) is not None
    return pattern in name


def matches_ignore(name: str, patterns: Iterable[str]) -> bool:
    """Check if an entry name matches any ignore pattern.

    Patterns are checked in the given order and the first match wins.

    Args:
        name: Entry name (basename).
        patterns: Ignore patterns.

    Returns:
        True if any pattern matches.
    """
    return any(matches_pattern(name, pattern) for pattern in patterns)

"""Unit tests for EmptyDirScanner and is_empty_dir.

Tests classification of nested empty trees, hidden entries, ignore
patterns, __init__.py handling, symlinks, unreadable directories,
cycle protection and deepest-first ordering.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from emptydirs.cleaner.models import ScanPolicy
from emptydirs.cleaner.scanner import EmptyDirScanner, is_empty_dir, scan_empty_dirs


def _rel(root: Path, paths: list[str]) -> list[str]:
    """Convert absolute result paths to paths relative to root."""
    return [os.path.relpath(p, root) for p in paths]


class TestScenarios:
    """End-to-end classification scenarios."""

    def test_nested_empty_chain(self, make_tree) -> None:
        """Nested empty folders are reported child first; a folder with a file is not."""
        root = make_tree({"a/b/c": None, "d/file.txt": "data"})

        result = scan_empty_dirs(root)

        assert _rel(root, result) == [
            os.path.join("a", "b", "c"),
            os.path.join("a", "b"),
            "a",
        ]
        assert str(root / "d") not in result
        assert str(root) not in result

    def test_git_marker_keeps_directory(self, make_tree) -> None:
        """A folder holding only an empty .git folder is kept."""
        root = make_tree({"e/.git": None})

        result = scan_empty_dirs(root, ScanPolicy(ignore_patterns=[".git"]))

        assert str(root / "e") not in result
        assert str(root / "e" / ".git") not in result

    def test_hidden_file_invisible_by_default(self, make_tree) -> None:
        """A folder holding only a hidden file is empty unless hidden entries are included."""
        root = make_tree({"h/.hiddenfile": "x"})
        h = root / "h"

        assert scan_empty_dirs(h, ScanPolicy(include_hidden=False)) == [str(h)]
        assert scan_empty_dirs(h, ScanPolicy(include_hidden=True)) == []

    def test_init_py_counts_unless_ignored(self, make_tree) -> None:
        """A lone __init__.py keeps a folder unless ignore_init_py is set."""
        root = make_tree({"initFolder/__init__.py": ""})
        init_folder = str(root / "initFolder")

        assert init_folder not in scan_empty_dirs(root, ScanPolicy(ignore_init_py=False))
        assert init_folder in scan_empty_dirs(root, ScanPolicy(ignore_init_py=True))

    def test_symlink_counts_as_content(self, make_tree) -> None:
        """A folder holding a symlink is never empty."""
        root = make_tree({"src/file.txt": "data", "linkHolder": None})
        (root / "linkHolder" / "link").symlink_to(root / "src")

        result = scan_empty_dirs(root)

        assert str(root / "linkHolder") not in result
        assert result == []


class TestEmptyDirScanner:
    """Tests for EmptyDirScanner behavior."""

    def test_empty_root_is_reported(self, tmp_path: Path) -> None:
        """An empty root directory is itself part of the result."""
        assert EmptyDirScanner().scan(tmp_path) == [str(tmp_path)]

    def test_root_with_only_empty_children(self, make_tree) -> None:
        """A root whose children are all empty is reported after them."""
        root = make_tree({"x": None, "y/z": None})

        result = EmptyDirScanner().scan(root)

        assert result[-1] == str(root)
        assert set(result) == {str(root), str(root / "x"), str(root / "y"), str(root / "y" / "z")}

    def test_accepts_string_root(self, make_tree) -> None:
        """Root may be given as a plain string."""
        root = make_tree({"a": None})

        assert EmptyDirScanner().scan(str(root)) == [str(root / "a"), str(root)]

    def test_descendants_precede_ancestors(self, make_tree) -> None:
        """Every descendant appears before each of its ancestors."""
        root = make_tree(
            {
                "p/q/r/s": None,
                "p/q/t": None,
                "u/v": None,
                "w/keep.txt": "x",
                "w/x/y": None,
            }
        )

        result = EmptyDirScanner().scan(root)

        position = {path: i for i, path in enumerate(result)}
        for path in result:
            for other in result:
                if other != path and other.startswith(path + os.sep):
                    assert position[other] < position[path]

    def test_results_are_distinct(self, make_tree) -> None:
        """No path is reported twice."""
        root = make_tree({"a/b": None, "c": None})

        result = EmptyDirScanner().scan(root)

        assert len(result) == len(set(result))

    def test_hidden_directory_skipped(self, make_tree) -> None:
        """Hidden subfolders are neither inspected nor reported by default."""
        root = make_tree({"h/.cache/data.bin": "x"})

        result = EmptyDirScanner().scan(root)

        assert str(root / "h") in result
        assert str(root / "h" / ".cache") not in result

    def test_hidden_directory_included(self, make_tree) -> None:
        """With include_hidden, hidden folders are classified like any other."""
        root = make_tree({"h/.empty": None, "k/.cache/data.bin": "x"})

        result = EmptyDirScanner(ScanPolicy(include_hidden=True)).scan(root)

        assert str(root / "h" / ".empty") in result
        assert str(root / "h") in result
        assert str(root / "k") not in result

    def test_ignore_pattern_dominates_other_content(self, make_tree) -> None:
        """An ignored entry keeps a folder even when everything else is empty."""
        root = make_tree({"proj/node_modules": None, "proj/empty": None})

        result = EmptyDirScanner().scan(root)

        assert str(root / "proj") not in result
        # Trees holding tooling markers are not descended into
        assert str(root / "proj" / "empty") not in result

    def test_ignore_pattern_matches_visible_file(self, make_tree) -> None:
        """Ignore patterns also apply to files."""
        root = make_tree({"a/build.lock": ""})

        result = EmptyDirScanner(ScanPolicy(ignore_patterns=["*.lock"])).scan(root)

        assert result == []

    def test_ignore_pattern_substring(self, make_tree) -> None:
        """A pattern without wildcard matches as a substring of the name."""
        root = make_tree({"a/.github": None, "b/.other": None})

        result = EmptyDirScanner(ScanPolicy(ignore_patterns=[".git"])).scan(root)

        assert str(root / "a") not in result
        assert str(root / "b") in result

    def test_no_ignore_patterns(self, make_tree) -> None:
        """With no patterns, a folder with only hidden marker folders is empty."""
        root = make_tree({"e/.git": None})

        result = EmptyDirScanner(ScanPolicy(ignore_patterns=())).scan(root)

        assert str(root / "e") in result

    def test_empty_sibling_after_file_is_collected(self, make_tree) -> None:
        """Empty subfolders are collected even when a sibling file makes the parent non-empty."""
        root = make_tree({"mixed/aaa.txt": "x", "mixed/zzz/deep": None, "mixed/bbb": None})

        result = EmptyDirScanner().scan(root)

        assert str(root / "mixed") not in result
        assert str(root / "mixed" / "zzz" / "deep") in result
        assert str(root / "mixed" / "zzz") in result
        assert str(root / "mixed" / "bbb") in result

    def test_init_py_in_nested_folders(self, make_tree) -> None:
        """ignore_init_py applies at every level of the tree."""
        root = make_tree({"pkg/__init__.py": "", "pkg/sub/__init__.py": ""})

        result = EmptyDirScanner(ScanPolicy(ignore_init_py=True)).scan(root)

        assert result[:2] == [str(root / "pkg" / "sub"), str(root / "pkg")]

    def test_dead_symlink_counts_as_content(self, make_tree) -> None:
        """Dead symlinks are content too."""
        root = make_tree({"holder": None})
        (root / "holder" / "dead").symlink_to(root / "missing")

        assert EmptyDirScanner().scan(root) == []

    def test_symlink_to_empty_directory_not_followed(self, make_tree) -> None:
        """A symlink to an empty folder keeps its parent and is not reported."""
        root = make_tree({"target": None, "holder": None})
        (root / "holder" / "link").symlink_to(root / "target", target_is_directory=True)

        result = EmptyDirScanner().scan(root)

        assert str(root / "target") in result
        assert str(root / "holder") not in result
        assert str(root / "holder" / "link") not in result

    def test_unreadable_directory_is_not_empty(self, make_tree) -> None:
        """A folder that cannot be listed is treated as non-empty."""
        root = make_tree({"locked": None, "other": None})
        locked = root / "locked"
        original_iterdir = Path.iterdir

        def _iterdir(self: Path):
            if self == locked:
                raise PermissionError("Permission denied")
            return original_iterdir(self)

        with patch.object(Path, "iterdir", autospec=True, side_effect=_iterdir):
            result = EmptyDirScanner().scan(root)

        assert str(locked) not in result
        assert str(root) not in result
        assert result == [str(root / "other")]

    def test_unreadable_entry_type_is_not_empty(self, make_tree) -> None:
        """An entry whose type cannot be read counts as content instead of raising."""
        root = make_tree({"locked/f.txt": "x", "other": None})
        blocked = root / "locked" / "f.txt"
        original_is_symlink = Path.is_symlink

        def _is_symlink(self: Path) -> bool:
            if self == blocked:
                raise PermissionError("Permission denied")
            return original_is_symlink(self)

        with patch.object(Path, "is_symlink", autospec=True, side_effect=_is_symlink):
            result = EmptyDirScanner().scan(root)

        assert result == [str(root / "other")]

    def test_results_keep_root_spelling(self, make_tree, monkeypatch) -> None:
        """Result paths are joined onto the root exactly as it was given."""
        root = make_tree({"a": None})
        monkeypatch.chdir(root.parent)

        assert EmptyDirScanner().scan("./root") == [
            os.path.join("./root", "a"),
            "./root",
        ]
        assert EmptyDirScanner().scan(str(root) + os.sep) == [
            os.path.join(str(root) + os.sep, "a"),
            str(root) + os.sep,
        ]

    def test_vanished_root_returns_nothing(self, tmp_path: Path) -> None:
        """A root that disappeared before the scan yields an empty result."""
        assert EmptyDirScanner().scan(tmp_path / "gone") == []

    def test_revisited_directory_treated_as_empty(self, make_tree) -> None:
        """A directory resolving to an already visited path is not walked again."""
        root = make_tree({"loop": None})

        with patch("emptydirs.cleaner.scanner._resolve", return_value="/same/real/path"):
            result = EmptyDirScanner().scan(root)

        # The child counts as empty but is not reported a second time
        assert result == [str(root)]

    def test_scanner_reusable(self, make_tree) -> None:
        """Repeated scans with one instance give the same result."""
        root = make_tree({"a/b": None})
        scanner = EmptyDirScanner()

        assert scanner.scan(root) == scanner.scan(root)

    def test_default_policy(self) -> None:
        """A scanner without explicit policy uses the defaults."""
        assert EmptyDirScanner().policy == ScanPolicy()


class TestIsEmptyDir:
    """Tests for the single-directory point check."""

    def test_empty_directory(self, tmp_path: Path) -> None:
        """A directory without entries is empty."""
        assert is_empty_dir(tmp_path) is True

    def test_nested_empty_directories(self, make_tree) -> None:
        """A directory holding only empty directories is empty."""
        root = make_tree({"a/b/c": None})

        assert is_empty_dir(root) is True

    def test_file_makes_non_empty(self, make_tree) -> None:
        """A nested file makes every ancestor non-empty."""
        root = make_tree({"a/b/file.txt": "x"})

        assert is_empty_dir(root) is False

    @pytest.mark.parametrize(
        ("include_hidden", "expected"),
        [(False, True), (True, False)],
    )
    def test_hidden_policy(self, make_tree, include_hidden: bool, expected: bool) -> None:
        """Hidden files only count when include_hidden is set."""
        root = make_tree({".hidden": "x"})

        assert is_empty_dir(root, include_hidden=include_hidden) is expected

    def test_ignore_pattern(self, make_tree) -> None:
        """A matching entry makes the directory non-empty."""
        root = make_tree({"node_modules": None})

        assert is_empty_dir(root) is False
        assert is_empty_dir(root, ignore_patterns=[]) is True

    def test_init_py_nested(self, make_tree) -> None:
        """ignore_init_py applies to nested directories as well."""
        root = make_tree({"pkg/__init__.py": ""})

        assert is_empty_dir(root) is False
        assert is_empty_dir(root, ignore_init_py=True) is True

    def test_symlink(self, make_tree) -> None:
        """A symlink makes the directory non-empty."""
        root = make_tree({"target": None})
        (root / "link").symlink_to(root / "target", target_is_directory=True)

        assert is_empty_dir(root / "target") is True
        assert is_empty_dir(root) is False

    def test_unreadable_entry_type(self, make_tree) -> None:
        """An entry whose type cannot be read makes the directory non-empty."""
        root = make_tree({"sub": None})
        original_is_dir = Path.is_dir

        def _is_dir(self: Path) -> bool:
            if self.name == "sub":
                raise PermissionError("Permission denied")
            return original_is_dir(self)

        with patch.object(Path, "is_dir", autospec=True, side_effect=_is_dir):
            assert is_empty_dir(root) is False

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory is reported as non-empty."""
        assert is_empty_dir(tmp_path / "missing") is False

    def test_scanner_is_empty_uses_policy(self, make_tree) -> None:
        """EmptyDirScanner.is_empty applies the scanner policy."""
        root = make_tree({".hidden": "x"})

        assert EmptyDirScanner(ScanPolicy(include_hidden=False)).is_empty(root) is True
        assert EmptyDirScanner(ScanPolicy(include_hidden=True)).is_empty(root) is False

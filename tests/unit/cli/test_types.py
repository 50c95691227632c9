"""Unit tests for shared CLI helpers."""

from pathlib import Path

from emptydirs.cleaner.models import ScanPolicy
from emptydirs.cli.types import build_policy, collect_empty_dirs
from emptydirs.core.config import CleanupConfig


class TestBuildPolicy:
    """Tests for build_policy."""

    def test_config_values_used_by_default(self) -> None:
        """Without overrides the configured policy is returned."""
        config = CleanupConfig(include_hidden=True, ignore_patterns=["x"], ignore_init_py=True)

        assert build_policy(config) == config.to_policy()

    def test_overrides(self) -> None:
        """Flags override individual settings."""
        policy = build_policy(CleanupConfig(), hidden=True, ignore=["dist"], init_py=True)

        assert policy == ScanPolicy(
            include_hidden=True, ignore_patterns=("dist",), ignore_init_py=True
        )

    def test_no_ignore_wins(self) -> None:
        """--no-ignore clears patterns even when --ignore is given."""
        policy = build_policy(CleanupConfig(), ignore=["dist"], no_ignore=True)

        assert policy.ignore_patterns == ()

    def test_explicit_false_overrides_config(self) -> None:
        """A False flag is not confused with an absent flag."""
        config = CleanupConfig(include_hidden=True, ignore_init_py=True)

        policy = build_policy(config, hidden=False, init_py=False)

        assert policy.include_hidden is False
        assert policy.ignore_init_py is False


class TestCollectEmptyDirs:
    """Tests for collect_empty_dirs."""

    def test_overlapping_roots_deduplicated(self, tmp_path: Path) -> None:
        """A root nested in another root does not duplicate results."""
        (tmp_path / "a" / "b").mkdir(parents=True)

        result = collect_empty_dirs([tmp_path, tmp_path / "a"], ScanPolicy())

        assert result == [str(tmp_path / "a" / "b"), str(tmp_path / "a"), str(tmp_path)]

"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

TreeLayout = dict[str, str | None]


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg_config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Build a directory tree under tmp_path/root.

    Keys are paths relative to the root. A value of None creates a
    directory, a string creates a file with that content.
    """

    def _make(layout: TreeLayout) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for rel, content in layout.items():
            target = root / rel
            if content is None:
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content)
        return root

    return _make

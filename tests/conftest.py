from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation from the PERCENT/IGNORE environment overrides.
3. Helpers that build real directory trees with exact file sizes.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_scan_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment overrides so defaults are predictable."""
    monkeypatch.delenv("PERCENT", raising=False)
    monkeypatch.delenv("IGNORE", raising=False)


def write_sized_file(path: Path, size: int) -> Path:
    """Create a file (and its parents) containing exactly `size` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, int]], Path]:
    """
    Return a factory that materializes a {relative_path: size} layout.

    Keys ending in '/' create empty directories.

    Returns:
        Callable: Factory returning the root of the created tree.
    """
    def _make(layout: Dict[str, int], name: str = "root") -> Path:
        root = tmp_path / name
        root.mkdir()
        for rel, size in layout.items():
            if rel.endswith("/"):
                (root / rel).mkdir(parents=True, exist_ok=True)
            else:
                write_sized_file(root / rel, size)
        return root

    return _make


@pytest.fixture
def sample_tree(make_tree: Callable[..., Path]) -> Path:
    """
    Create a small mixed tree.

    Structure:
    /root
      big.bin        (8000)
      small.txt      (100)
      /docs
        guide.md     (3000)
        /img
          logo.png   (5000)
      /empty
    """
    return make_tree({
        "big.bin": 8000,
        "small.txt": 100,
        "docs/guide.md": 3000,
        "docs/img/logo.png": 5000,
        "empty/": 0,
    })

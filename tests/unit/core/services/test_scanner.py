from __future__ import annotations

"""
Unit tests for the Directory Enumeration Service.

Verifies classification of entries, ignore filtering, and that per-entry
metadata failures are absorbed instead of aborting enumeration.
"""

import os
from pathlib import Path
from typing import Callable, Dict, List
from unittest.mock import patch

import pytest

from sizescout.core.pipeline.components.filters import IgnoreRules
from sizescout.core.services import scanner
from sizescout.core.services.scanner import (
    classify_entry,
    iter_scan_entries,
    read_directory,
)
from sizescout.domain.scan_models import ScanError


def _by_name(entries: List[os.DirEntry]) -> Dict[str, os.DirEntry]:
    return {e.name: e for e in entries}


def test_read_directory_lists_immediate_entries(sample_tree: Path) -> None:
    names = {e.name for e in read_directory(str(sample_tree))}
    assert names == {"big.bin", "small.txt", "docs", "empty"}


def test_read_directory_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_directory(str(tmp_path / "nope"))


def test_classify_file_and_directory(sample_tree: Path) -> None:
    entries = _by_name(read_directory(str(sample_tree)))

    big = classify_entry(entries["big.bin"])
    docs = classify_entry(entries["docs"])

    assert big is not None and not big.is_dir and big.size == 8000
    assert big.path == str(sample_tree / "big.bin")
    assert docs is not None and docs.is_dir and docs.size == 0


def test_hidden_entries_kept_without_rules(make_tree: Callable[..., Path]) -> None:
    root = make_tree({".secret": 10, "visible": 20})
    entries = _by_name(read_directory(str(root)))

    assert classify_entry(entries[".secret"]) is not None


def test_hidden_entries_dropped_with_rules(make_tree: Callable[..., Path]) -> None:
    root = make_tree({".secret": 10, "visible": 20})
    rules = IgnoreRules.for_root(str(root))
    entries = _by_name(read_directory(str(root)))

    assert classify_entry(entries[".secret"], rules) is None
    assert classify_entry(entries["visible"], rules) is not None


def test_ignore_file_patterns_applied(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"app.log": 500, "app.py": 50})
    (root / ".gitignore").write_text("*.log\n", encoding="utf-8")
    rules = IgnoreRules.for_root(str(root))
    entries = _by_name(read_directory(str(root)))

    assert classify_entry(entries["app.log"], rules) is None
    assert classify_entry(entries["app.py"], rules) is not None


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks_are_skipped(make_tree: Callable[..., Path]) -> None:
    """Links are neither files nor directories for the scanner."""
    root = make_tree({"target.bin": 100, "sub/inner": 1})
    try:
        os.symlink(root / "target.bin", root / "file_link")
        os.symlink(root / "sub", root / "dir_link", target_is_directory=True)
    except OSError:
        pytest.skip("symlink creation not permitted")

    entries = _by_name(read_directory(str(root)))

    assert classify_entry(entries["file_link"]) is None
    assert classify_entry(entries["dir_link"]) is None


def test_iter_scan_entries_absorbs_metadata_errors(sample_tree: Path) -> None:
    """A failing entry is recorded and the remaining entries still come through."""
    real_classify = scanner.classify_entry

    def flaky(entry, rules=None):
        if entry.name == "small.txt":
            raise PermissionError(13, "Permission denied", entry.path)
        return real_classify(entry, rules)

    errors: List[ScanError] = []
    with patch("sizescout.core.services.scanner.classify_entry", side_effect=flaky):
        results = list(iter_scan_entries(read_directory(str(sample_tree)), None, errors))

    names = {os.path.basename(r.path) for r in results}
    assert names == {"big.bin", "docs", "empty"}
    assert errors == [ScanError(path=str(sample_tree / "small.txt"), error="Permission denied")]


def test_iter_scan_entries_absorbs_vanished_file(sample_tree: Path) -> None:
    """A file deleted between listing and stat is skipped."""
    entries = read_directory(str(sample_tree))
    (sample_tree / "big.bin").unlink()

    errors: List[ScanError] = []
    results = list(iter_scan_entries(entries, None, errors))

    assert "big.bin" not in {os.path.basename(r.path) for r in results}
    assert [os.path.basename(e.path) for e in errors] == ["big.bin"]

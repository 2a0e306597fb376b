from __future__ import annotations

"""
Unit tests for the CLI application controller.

Logging bootstrap is patched out so handlers do not outlive the captured
streams of a single test.
"""

from pathlib import Path
from typing import Callable, Iterator
from unittest.mock import patch

import pytest

from sizescout.interface.cli import app


@pytest.fixture(autouse=True)
def no_logging_bootstrap() -> Iterator[None]:
    with patch("sizescout.interface.cli.app.configure_logging"):
        yield


def test_report_and_summary_lines(make_tree: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    root = make_tree({"a.bin": 100, "b.bin": 10000})

    code = app.main([str(root), "-p", "50"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == [
        f"9 KiB    d {root}",
        f"9 KiB    f {root / 'b.bin'}",
        "Total size: 9 KiB",
        "Largest child: 9 KiB",
    ]


def test_missing_directory_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = app.main([str(tmp_path / "missing")])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "ERROR: Cannot scan" in captured.err
    assert "does not exist" in captured.err


def test_bad_percent_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = app.main([str(tmp_path), "-p", "half"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "Invalid percent" in captured.err


def test_percent_from_environment(
        make_tree: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    root = make_tree({"a.bin": 100, "b.bin": 10000})
    monkeypatch.setenv("PERCENT", "0")

    assert app.main([str(root)]) == 0
    printed = capsys.readouterr().out
    assert str(root / "a.bin") in printed


def test_ignore_from_environment(
        make_tree: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    root = make_tree({"keep.bin": 2000, "skip.log": 9000})
    (root / ".gitignore").write_text("*.log\n", encoding="utf-8")
    monkeypatch.setenv("IGNORE", "1")

    assert app.main([str(root), "-p", "0"]) == 0
    printed = capsys.readouterr().out

    assert "skip.log" not in printed
    assert "Largest child: 1 KiB" in printed


def test_unexpected_failure_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with patch("sizescout.interface.cli.app.run_scan", side_effect=RuntimeError("kaput")):
        code = app.main([str(tmp_path)])

    assert code == 1
    assert "kaput" in capsys.readouterr().err


def test_keyboard_interrupt_exit_code(tmp_path: Path) -> None:
    with patch("sizescout.interface.cli.app.run_scan", side_effect=KeyboardInterrupt):
        assert app.main([str(tmp_path)]) == 130

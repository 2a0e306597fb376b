from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: argument parsing, environment overrides, exit codes
and stream output (stdout/stderr).
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "sizescout" / "main.py"


def run_cli(args: List[str], extra_env: Optional[Dict[str, str]] = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and strips the PERCENT and
    IGNORE overrides from the inherited environment.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        extra_env: Additional environment variables for the child process.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env.pop("PERCENT", None)
    env.pop("IGNORE", None)
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env.update(extra_env or {})

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a project-like tree for E2E testing.

    Structure:
    /input
      .gitignore          ("dist/\\n")
      /assets
        video.mp4         (200000)
        thumb.png         (1000)
      /dist
        bundle.js         (500000)
      README.md           (50)
    """
    root = tmp_path / "input"
    (root / "assets").mkdir(parents=True)
    (root / "dist").mkdir()

    (root / ".gitignore").write_text("dist/\n", encoding="utf-8")
    (root / "assets" / "video.mp4").write_bytes(b"v" * 200000)
    (root / "assets" / "thumb.png").write_bytes(b"t" * 1000)
    (root / "dist" / "bundle.js").write_bytes(b"b" * 500000)
    (root / "README.md").write_text("x" * 50, encoding="utf-8")
    return root


def test_cli_happy_path(sample_project: Path) -> None:
    """Standard run prints the big entries and the summary (Exit Code 0)."""
    result = run_cli([str(sample_project)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    lines = result.stdout.splitlines()

    assert lines[-2] == "Total size: 684 KiB"
    assert lines[-1] == "Largest child: 488 KiB"

    printed = {line.split(maxsplit=3)[-1] for line in lines[:-2]}
    assert printed == {str(sample_project), str(sample_project / "dist"), str(sample_project / "dist" / "bundle.js")}


def test_cli_ignore_flag(sample_project: Path) -> None:
    result = run_cli([str(sample_project), "--ignore", "-p", "10"])

    assert result.returncode == 0, result.stderr
    assert "dist" not in result.stdout
    assert str(sample_project / "assets" / "video.mp4") in result.stdout
    assert "Largest child: 195 KiB" in result.stdout


def test_cli_environment_overrides(sample_project: Path) -> None:
    result = run_cli([str(sample_project)], extra_env={"PERCENT": "0", "IGNORE": "true"})

    assert result.returncode == 0, result.stderr
    assert str(sample_project / "README.md") in result.stdout
    assert "bundle.js" not in result.stdout


def test_cli_path_expansion(sample_project: Path) -> None:
    result = run_cli(["$SCAN_ROOT"], extra_env={"SCAN_ROOT": str(sample_project)})

    assert result.returncode == 0, result.stderr
    assert "Total size: 684 KiB" in result.stdout


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """Invalid root gives a single diagnostic and no report."""
    result = run_cli([str(tmp_path / "non_existent_folder")])

    assert result.returncode == 2
    assert result.stdout == ""
    assert "does not exist" in result.stderr


def test_cli_rejects_bad_percent(sample_project: Path) -> None:
    result = run_cli([str(sample_project), "-p", "fifty"])

    assert result.returncode == 2
    assert result.stdout == ""
    assert "Invalid percent" in result.stderr


def test_cli_help_message() -> None:
    """Smoke test for argparse."""
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: sizescout" in result.stdout

from __future__ import annotations

"""
Scan Domain Data Models.

Defines the data structures exchanged between the scanner, the tree builder
and the interface layer, plus factory functions for the final scan result.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sizescout.domain.tree_models import DirNode

# -----------------------------------------------------------------------------
# ENUMERATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanEntry:
    """
    A single classified directory entry produced by the enumerator.

    Attributes:
        path: Filesystem path of the entry.
        size: Size in bytes (0 for directories).
        is_dir: True if the entry is a directory to descend into.
    """
    path: str
    size: int
    is_dir: bool


@dataclass(frozen=True)
class ScanError:
    """
    Encapsulates a non-fatal failure on one entry during the walk.

    Attributes:
        path: Path of the entry that was skipped.
        error: Descriptive exception or error message.
    """
    path: str
    error: str

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass
class BuildResult:
    """
    Output of the parallel tree builder.

    Attributes:
        root: Fully populated root directory node.
        errors: Entries skipped during the walk.
    """
    root: DirNode
    errors: List[ScanError] = field(default_factory=list)


@dataclass(frozen=True)
class ScanResult:
    """
    Unified result object of a complete scan.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Normalized root directory scanned.
        percent: Threshold percentage applied.
        respect_ignore: Whether ignore rules were honored.
        root: The size-annotated tree (None on failure).
        total_size: Cumulative size of the root.
        largest_child: Largest file size anywhere in the tree.
        cutoff: Byte threshold used for the report.
        report_lines: Rendered report lines.
        errors: Entries skipped during the walk.
    """
    ok: bool
    error: str

    base_path: str
    percent: float
    respect_ignore: bool

    root: Optional[DirNode] = None
    total_size: int = 0
    largest_child: int = 0
    cutoff: int = 0

    report_lines: List[str] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, cfg: Dict[str, Any]) -> ScanResult:
    """
    Create a failed scan result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.

    Returns:
        ScanResult: An immutable error result object.
    """
    return ScanResult(
        ok=False,
        error=error,
        base_path=str(cfg.get("input_path", "")),
        percent=_as_float(cfg.get("percent")),
        respect_ignore=bool(cfg.get("respect_ignore", False)),
    )


def create_success_result(
        cfg: Dict[str, Any],
        root: DirNode,
        total_size: int,
        largest_child: int,
        cutoff: int,
        report_lines: List[str],
        errors: Optional[List[ScanError]] = None,
) -> ScanResult:
    """
    Create a successful scan result instance.

    Args:
        cfg: Validated configuration used during execution.
        root: Size-annotated tree.
        total_size: Cumulative size of the root.
        largest_child: Largest file size in the tree.
        cutoff: Byte threshold used for the report.
        report_lines: Rendered report lines.
        errors: Entries skipped during the walk.

    Returns:
        ScanResult: An immutable success result object.
    """
    return ScanResult(
        ok=True,
        error="",
        base_path=cfg["input_path"],
        percent=cfg["percent"],
        respect_ignore=cfg["respect_ignore"],
        root=root,
        total_size=total_size,
        largest_child=largest_child,
        cutoff=cutoff,
        report_lines=report_lines,
        errors=errors or [],
    )


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0

from __future__ import annotations

"""
Threshold Report Renderer.

Walks a size-annotated tree top-down and emits one line per node whose
size reaches the cutoff. A directory below the cutoff hides its whole
subtree.
"""

from typing import List

from sizescout.domain.tree_models import DirNode, FsItem, is_file, node_size
from sizescout.utils.formatting import bytes_to_nice

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def compute_cutoff(largest: int, percent: float) -> int:
    """
    Convert a percentage of the largest file into a byte threshold.

    Args:
        largest: Largest file size in bytes.
        percent: Threshold percentage (50 means half of largest).

    Returns:
        int: Byte cutoff, truncated toward zero.
    """
    return int(largest * (percent / 100.0))


def format_line(node: FsItem) -> str:
    """Render a single report line: size, kind marker, path."""
    marker = "f" if is_file(node) else "d"
    return f"{bytes_to_nice(node_size(node)):<8} {marker} {node.path}"


def render_report(root: FsItem, cutoff: int) -> List[str]:
    """
    Produce the report lines for every node at or above the cutoff.

    Siblings are emitted in path order so that repeated scans of an
    unchanged tree print identical reports.

    Args:
        root: Size-annotated tree.
        cutoff: Minimum size in bytes (inclusive) for files and directories.

    Returns:
        List[str]: Report lines in pre-order.
    """
    lines: List[str] = []
    stack: List[FsItem] = [root]

    while stack:
        node = stack.pop()
        if node_size(node) < cutoff:
            continue
        lines.append(format_line(node))
        if isinstance(node, DirNode):
            # Reversed so the smallest path is popped first
            stack.extend(sorted(node.children, key=lambda c: c.path, reverse=True))

    return lines

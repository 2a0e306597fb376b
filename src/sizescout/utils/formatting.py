from __future__ import annotations

"""
Human-Readable Size Formatting.

Converts raw byte counts into short binary-unit labels for the report.
"""

from typing import Tuple

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB

# Ordered from the largest unit down
_UNITS: Tuple[Tuple[int, str], ...] = (
    (GIB, "GiB"),
    (MIB, "MiB"),
    (KIB, "KiB"),
)


def bytes_to_nice(num_bytes: int) -> str:
    """
    Format a byte count using the largest unit it strictly exceeds.

    Values are truncated, not rounded (e.g. 1536 -> "1 KiB").

    Args:
        num_bytes: Size in bytes.

    Returns:
        str: Label such as "12 MiB" or "512 B".
    """
    for factor, label in _UNITS:
        if num_bytes > factor:
            return f"{num_bytes // factor} {label}"
    return f"{num_bytes} B"

from __future__ import annotations

"""
Directory Enumeration Service.

Lists the immediate entries of a directory and classifies each one as a
file or a directory, reading its size from filesystem metadata. When ignore
rules are supplied, hidden and ignore-matched entries are filtered out.
Recursion is driven by the tree builder.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional

from sizescout.core.pipeline.components.filters import IgnoreRules, is_hidden
from sizescout.domain.scan_models import ScanEntry, ScanError

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def read_directory(dir_path: str) -> List[os.DirEntry]:
    """
    Read the raw entries of a single directory.

    Args:
        dir_path: Directory to list.

    Returns:
        List[os.DirEntry]: Unclassified entries, in filesystem order.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    with os.scandir(dir_path) as it:
        return list(it)


def classify_entry(entry: os.DirEntry, rules: Optional[IgnoreRules] = None) -> Optional[ScanEntry]:
    """
    Turn a raw directory entry into a ScanEntry.

    Symlinks are never followed. Entries that are neither regular files nor
    directories, and entries excluded by ignore rules, yield None.

    Args:
        entry: Raw entry from read_directory.
        rules: Ignore rules in effect for the entry's parent, or None when
            ignore mode is disabled.

    Returns:
        Optional[ScanEntry]: Classified entry, or None if it must be skipped.

    Raises:
        OSError: If the entry's metadata cannot be read.
    """
    if rules is not None and is_hidden(entry.name):
        return None

    if entry.is_dir(follow_symlinks=False):
        is_dir = True
    elif entry.is_file(follow_symlinks=False):
        is_dir = False
    else:
        logger.debug(f"Skipping special entry (not a regular file or directory): {entry.path}")
        return None

    if rules is not None and rules.is_ignored(entry.path, is_dir):
        logger.debug(f"Ignored by rules: {entry.path}")
        return None

    size = 0 if is_dir else entry.stat(follow_symlinks=False).st_size
    return ScanEntry(path=entry.path, size=size, is_dir=is_dir)


def iter_scan_entries(
        entries: Iterable[os.DirEntry],
        rules: Optional[IgnoreRules],
        errors: List[ScanError],
) -> Iterator[ScanEntry]:
    """
    Classify a batch of raw entries, absorbing per-entry failures.

    Entries whose metadata cannot be read are logged, appended to errors
    and skipped.

    Args:
        entries: Raw entries to classify.
        rules: Ignore rules in effect, or None.
        errors: Accumulator for skipped entries.

    Yields:
        ScanEntry: Every entry that survived classification and filtering.
    """
    for entry in entries:
        try:
            scan_entry = classify_entry(entry, rules)
        except OSError as e:
            logger.warning(f"Skipping '{entry.path}': {describe_os_error(e)}")
            errors.append(ScanError(path=entry.path, error=describe_os_error(e)))
            continue
        if scan_entry is not None:
            yield scan_entry


# ==============================================================================
# HELPERS
# ==============================================================================

def describe_os_error(e: OSError) -> str:
    """Short human-readable form of an OSError."""
    return e.strerror or str(e)

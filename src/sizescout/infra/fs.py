from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path expansion and root directory validation. Acts as an
abstraction over the 'os' module to ensure uniform behavior across Windows
and Unix-like systems.
"""

import os

from sizescout.domain.errors import ScanRootError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: str) -> str:
    """
    Normalize a user-supplied path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/).

    Args:
        path: Raw input path string.

    Returns:
        str: Normalized absolute path, or an empty string for empty input.
    """
    p = (path or "").strip()
    if not p:
        return ""
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def ensure_scannable_dir(path: str) -> None:
    """
    Verify that a path is an existing, listable directory.

    Args:
        path: Absolute directory path.

    Raises:
        ScanRootError: If the path is empty, missing, not a directory or
            not readable.
    """
    if not path:
        raise ScanRootError(path, "no directory given")
    if not os.path.exists(path):
        raise ScanRootError(path, "path does not exist")
    if not os.path.isdir(path):
        raise ScanRootError(path, "not a directory")
    if not os.access(path, os.R_OK | os.X_OK):
        raise ScanRootError(path, "permission denied")

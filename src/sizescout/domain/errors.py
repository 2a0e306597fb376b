from __future__ import annotations

"""
Domain Exception Hierarchy.

Only conditions that invalidate a whole scan are raised as exceptions.
Problems with individual entries are recorded as ScanError values instead.
"""


class SizeScoutError(Exception):
    """Base class for fatal scan failures."""


class ConfigurationError(SizeScoutError):
    """Raised when a configuration value cannot be used (e.g. bad percentage)."""


class ScanRootError(SizeScoutError):
    """Raised when the root directory is missing or cannot be listed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot scan '{path}': {reason}")
        self.path = path
        self.reason = reason

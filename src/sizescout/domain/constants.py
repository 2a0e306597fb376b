from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide defaults, environment variable names and
versioning.
"""

from typing import FrozenSet, Tuple

APP_NAME = "SizeScout"
APP_VERSION = "1.0.0"

DEFAULT_PERCENT = 50.0
DEFAULT_RESPECT_IGNORE = False

# Environment overrides for CLI options
PERCENT_ENV_VAR = "PERCENT"
IGNORE_ENV_VAR = "IGNORE"

# Per-directory files holding gitignore-style patterns, lowest precedence first
IGNORE_FILE_NAMES: Tuple[str, ...] = (".gitignore", ".ignore")

TRUTHY_VALUES: FrozenSet[str] = frozenset({"1", "true", "yes", "on", "y", "t"})
FALSY_VALUES: FrozenSet[str] = frozenset({"0", "false", "no", "off", "n", "f", ""})

# Number of directory entries folded by a single builder task
ENTRY_CHUNK_SIZE = 64

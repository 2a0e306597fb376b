from __future__ import annotations

"""
Ignore-File Filtering Engine.

Implements the exclusion rules applied when ignore mode is enabled: hidden
entries are skipped, and every directory may declare gitignore-style
patterns (.gitignore, .ignore) that apply to itself and its descendants.
Rules from deeper directories take precedence over shallower ones; within
a single directory the last matching pattern wins.
"""

import logging
import os
from typing import List, Optional, Sequence, Tuple

import pathspec
from pathspec.pattern import Pattern

from sizescout.domain.constants import IGNORE_FILE_NAMES

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CLASSIFICATION HELPERS
# -----------------------------------------------------------------------------

def is_hidden(name: str) -> bool:
    """
    Classify an entry name as hidden by Unix convention.

    Args:
        name: Base name of the entry.

    Returns:
        bool: True if the name starts with a dot.
    """
    return name.startswith(".") and name not in (".", "..")

# -----------------------------------------------------------------------------
# IGNORE FILE PARSING
# -----------------------------------------------------------------------------

def load_ignore_patterns(dir_path: str) -> List[Pattern]:
    """
    Parse the ignore files declared in a directory.

    Files are read in IGNORE_FILE_NAMES order so that later files override
    earlier ones. An unreadable file is logged and treated as empty.

    Args:
        dir_path: Directory that may contain ignore files.

    Returns:
        List[Pattern]: Compiled gitwildmatch patterns (comments included as no-ops).
    """
    patterns: List[Pattern] = []
    for file_name in IGNORE_FILE_NAMES:
        ignore_path = os.path.join(dir_path, file_name)
        if not os.path.isfile(ignore_path):
            continue
        try:
            with open(ignore_path, "r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()
        except OSError as e:
            logger.warning(f"Cannot read ignore file '{ignore_path}': {e}")
            continue

        spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
        patterns.extend(spec.patterns)
        logger.debug(f"Loaded {len(spec.patterns)} patterns from {ignore_path}")
    return patterns

# -----------------------------------------------------------------------------
# SCOPED RULE CHAIN
# -----------------------------------------------------------------------------

class IgnoreRules:
    """
    Ignore patterns in effect for one directory.

    Each instance holds the patterns declared by one directory and links to
    the rules inherited from its ancestors. Instances are immutable once
    built, so they are shared freely between worker threads.
    """

    def __init__(
            self,
            base_dir: str,
            patterns: Sequence[Pattern] = (),
            parent: Optional["IgnoreRules"] = None,
    ):
        self.base_dir = base_dir
        self.patterns: Tuple[Pattern, ...] = tuple(p for p in patterns if p.include is not None)
        self.parent = parent

    @classmethod
    def for_root(cls, root_path: str) -> "IgnoreRules":
        """Create the rule chain for the scan root."""
        return cls(root_path, load_ignore_patterns(root_path))

    def for_child(self, dir_path: str) -> "IgnoreRules":
        """
        Derive the rules in effect inside a subdirectory.

        Returns self when the subdirectory declares no patterns of its own.
        """
        patterns = load_ignore_patterns(dir_path)
        if not patterns:
            return self
        return IgnoreRules(dir_path, patterns, parent=self)

    def is_ignored(self, path: str, is_dir: bool) -> bool:
        """
        Decide whether an entry is excluded by the rule chain.

        Args:
            path: Entry path, located under base_dir.
            is_dir: Directory-only patterns ("build/") apply only when True.

        Returns:
            bool: True if the last decisive pattern ignores the entry.
        """
        rules: Optional[IgnoreRules] = self
        while rules is not None:
            verdict = rules._match(path, is_dir)
            if verdict is not None:
                return verdict
            rules = rules.parent
        return False

    def _match(self, path: str, is_dir: bool) -> Optional[bool]:
        """Return True/False for the last matching local pattern, None if none match."""
        if not self.patterns:
            return None

        rel_path = os.path.relpath(path, self.base_dir).replace(os.sep, "/")
        if is_dir:
            rel_path += "/"

        for pattern in reversed(self.patterns):
            if pattern.match_file(rel_path) is not None:
                return bool(pattern.include)
        return None

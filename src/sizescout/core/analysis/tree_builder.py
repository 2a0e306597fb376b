from __future__ import annotations

"""
Parallel Tree Builder.

Walks a directory hierarchy on a bounded thread pool and produces a fully
populated DirNode tree. Each directory's entries are split into chunks;
every chunk is folded by one worker into a private list of nodes which is
then appended to the parent directory under that directory's lock.
Subdirectories discovered by a worker are queued as new tasks instead of
being walked recursively in place, so the pool never waits on itself.
"""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

from sizescout.core.pipeline.components.filters import IgnoreRules
from sizescout.core.services.scanner import (
    describe_os_error,
    iter_scan_entries,
    read_directory,
)
from sizescout.domain.constants import ENTRY_CHUNK_SIZE
from sizescout.domain.errors import ScanRootError
from sizescout.domain.scan_models import BuildResult, ScanError
from sizescout.domain.tree_models import DirNode, FileNode, FsItem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        root_path: str,
        respect_ignore: bool = False,
        max_workers: Optional[int] = None,
        chunk_size: int = ENTRY_CHUNK_SIZE,
) -> BuildResult:
    """
    Build the complete file/directory tree below a root path.

    Args:
        root_path: Directory to scan.
        respect_ignore: Skip hidden entries and ignore-file matches.
        max_workers: Pool size; defaults to the ThreadPoolExecutor heuristic.
        chunk_size: Number of entries folded by one task.

    Returns:
        BuildResult: The populated root node and every entry that was skipped.

    Raises:
        ScanRootError: If the root directory cannot be listed.
    """
    builder = _TreeBuilder(respect_ignore=respect_ignore, max_workers=max_workers, chunk_size=chunk_size)
    return builder.build(root_path)

# -----------------------------------------------------------------------------
# BUILDER IMPLEMENTATION
# -----------------------------------------------------------------------------

class _TreeBuilder:
    """
    Single-use coordinator for one parallel walk.

    Tracks outstanding tasks so that build() can return as soon as the last
    directory has been folded. Per-entry failures are collected; any other
    exception raised by a worker is re-raised from build().
    """

    def __init__(self, respect_ignore: bool, max_workers: Optional[int], chunk_size: int):
        self._respect_ignore = respect_ignore
        self._max_workers = max_workers
        self._chunk_size = max(1, int(chunk_size))

        self._state_lock = threading.Lock()
        self._pending = 0
        self._finished = threading.Event()
        self._errors: List[ScanError] = []
        self._failure: Optional[BaseException] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    def build(self, root_path: str) -> BuildResult:
        rules = IgnoreRules.for_root(root_path) if self._respect_ignore else None

        try:
            entries = read_directory(root_path)
        except OSError as e:
            raise ScanRootError(root_path, describe_os_error(e)) from e

        root = DirNode(path=root_path)
        logger.debug(f"Root listing returned {len(entries)} entries")

        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="ScanWorker") as executor:
            self._executor = executor
            # The dispatcher holds its own token so the count cannot reach
            # zero while root chunks are still being queued.
            with self._state_lock:
                self._pending += 1
            try:
                self._dispatch(root, entries, rules)
            finally:
                self._release_token()
            self._finished.wait()
        self._executor = None

        if self._failure is not None:
            raise self._failure

        return BuildResult(root=root, errors=list(self._errors))

    # -------------------------------------------------------------------------
    # Task accounting
    # -------------------------------------------------------------------------

    def _submit(self, fn: Callable[..., None], *args: Any) -> None:
        assert self._executor is not None
        with self._state_lock:
            self._pending += 1
        self._executor.submit(self._run_task, fn, *args)

    def _run_task(self, fn: Callable[..., None], *args: Any) -> None:
        try:
            fn(*args)
        except Exception as e:
            logger.error(f"Unexpected failure in scan worker: {e}", exc_info=True)
            with self._state_lock:
                if self._failure is None:
                    self._failure = e
        finally:
            self._release_token()

    def _release_token(self) -> None:
        with self._state_lock:
            self._pending -= 1
            if self._pending == 0:
                self._finished.set()

    # -------------------------------------------------------------------------
    # Map / fold / reduce
    # -------------------------------------------------------------------------

    def _dispatch(self, parent: DirNode, entries: Sequence[os.DirEntry], rules: Optional[IgnoreRules]) -> None:
        """Partition a directory listing into fold tasks."""
        for start in range(0, len(entries), self._chunk_size):
            self._submit(self._fold_chunk, parent, entries[start:start + self._chunk_size], rules)

    def _fold_chunk(self, parent: DirNode, chunk: Sequence[os.DirEntry], rules: Optional[IgnoreRules]) -> None:
        """Fold a chunk of entries into nodes and merge them into the parent."""
        items: List[FsItem] = []
        subdirs: List[DirNode] = []
        errors: List[ScanError] = []

        for scan_entry in iter_scan_entries(chunk, rules, errors):
            if scan_entry.is_dir:
                child = DirNode(path=scan_entry.path)
                items.append(child)
                subdirs.append(child)
            else:
                items.append(FileNode(path=scan_entry.path, size=scan_entry.size))

        parent.merge_children(items)
        self._record_errors(errors)

        for child in subdirs:
            self._submit(self._expand_directory, child, rules)

    def _expand_directory(self, node: DirNode, parent_rules: Optional[IgnoreRules]) -> None:
        """List a subdirectory and queue fold tasks for its entries."""
        rules = parent_rules.for_child(node.path) if parent_rules is not None else None

        try:
            entries = read_directory(node.path)
        except OSError as e:
            # The directory stays in the tree as an empty node
            reason = describe_os_error(e)
            logger.warning(f"Cannot list directory '{node.path}': {reason}")
            self._record_errors([ScanError(path=node.path, error=reason)])
            return

        self._dispatch(node, entries, rules)

    def _record_errors(self, errors: List[ScanError]) -> None:
        if not errors:
            return
        with self._state_lock:
            self._errors.extend(errors)

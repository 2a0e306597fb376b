from __future__ import annotations

"""
Size-Annotated Tree Data Models.

Provides the closed set of node types produced by the scanner: leaf files
with a fixed size, and directories whose total size is filled in once the
tree has been fully built.
"""

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the scanned tree.

    Attributes:
        path: Filesystem path to the file.
        size: Size in bytes, read once from filesystem metadata.
    """
    path: str
    size: int


@dataclass(eq=False)
class DirNode:
    """
    Represents a directory entry in the scanned tree.

    Children are appended by builder workers while the tree is under
    construction and are read-only afterwards.

    Attributes:
        path: Filesystem path to the directory.
        children: Direct descendants (files and directories).
        size: Cumulative size in bytes, None until computed.
    """
    path: str
    children: List["FsItem"] = field(default_factory=list)
    size: Optional[int] = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def merge_children(self, items: List["FsItem"]) -> None:
        """
        Append a worker's private batch of nodes to this directory.

        Args:
            items: Nodes collected by a single worker.
        """
        if not items:
            return
        with self._lock:
            self.children.extend(items)


FsItem = Union[FileNode, DirNode]

# -----------------------------------------------------------------------------
# DISPATCH HELPERS
# -----------------------------------------------------------------------------

def is_file(node: FsItem) -> bool:
    """Return True if the node is a leaf file."""
    return isinstance(node, FileNode)


def node_size(node: FsItem) -> int:
    """
    Return the size of a node in bytes.

    Directories that have not been through size propagation report 0.
    """
    if isinstance(node, FileNode):
        return node.size
    return node.size if node.size is not None else 0

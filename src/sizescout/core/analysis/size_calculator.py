from __future__ import annotations

"""
Size and Largest-Leaf Propagation.

Bottom-up passes over a fully built tree. Both traversals use an explicit
stack so that deeply nested trees do not hit the interpreter recursion limit.
"""

from typing import List, Tuple

from sizescout.domain.tree_models import DirNode, FileNode, FsItem, node_size

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def calc_size(node: FsItem) -> int:
    """
    Fill in the cumulative size of every directory below (and including) a node.

    Children are always sized before their parent.

    Args:
        node: Root of the subtree.

    Returns:
        int: Total size of the node in bytes.
    """
    if isinstance(node, FileNode):
        return node.size

    # Post-order via (node, children_done) markers
    stack: List[Tuple[DirNode, bool]] = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if children_done:
            current.size = sum(node_size(child) for child in current.children)
            continue
        stack.append((current, True))
        for child in current.children:
            if isinstance(child, DirNode):
                stack.append((child, False))

    return node_size(node)


def largest_leaf(node: FsItem) -> int:
    """
    Return the largest file size anywhere below a node.

    A file reports its own size; a directory reports the maximum over its
    descendants (0 when it contains no files).
    """
    if isinstance(node, FileNode):
        return node.size

    largest = 0
    stack: List[DirNode] = [node]
    while stack:
        current = stack.pop()
        for child in current.children:
            if isinstance(child, FileNode):
                if child.size > largest:
                    largest = child.size
            else:
                stack.append(child)
    return largest


def propagate(root: DirNode) -> Tuple[int, int]:
    """
    Run both propagation passes over a finished tree.

    Args:
        root: Fully built root directory.

    Returns:
        Tuple[int, int]: (total size, largest leaf size).
    """
    total = calc_size(root)
    return total, largest_leaf(root)

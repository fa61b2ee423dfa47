"""Test fixtures for OrderTreeLib consumers.

These helpers build well-known trees and check structural invariants
without exposing the node type as part of the public API.
"""

from typing import Any, Iterable, List, Optional

from ..core.node import BSTNode
from ..core.tree import OrderedTree

# Insertion order giving a perfectly balanced three-level tree:
#         5
#       /   \
#      3     8
#     / \   / \
#    1   4 7   9
SAMPLE_ELEMENTS = (5, 3, 8, 1, 4, 7, 9)


def make_sample_tree(elements: Optional[Iterable[Any]] = None) -> OrderedTree:
    """Build a tree from ``elements`` (default ``SAMPLE_ELEMENTS``)."""
    tree = OrderedTree()
    for e in (SAMPLE_ELEMENTS if elements is None else elements):
        tree.add(e)
    return tree


class TreeInvariantChecker:
    """Verifies the search-tree ordering and the size counter of a tree.

    Example:
        checker = TreeInvariantChecker(tree)
        assert checker.is_valid(), checker.problems()
    """

    def __init__(self, tree: OrderedTree):
        self._tree = tree

    def problems(self) -> List[str]:
        """Return every invariant violation found, empty when the tree is sound."""
        found: List[str] = []
        count = 0
        # (node, exclusive lower bound, exclusive upper bound)
        pending: List[tuple] = []
        root: Optional[BSTNode] = self._tree._root
        if root is not None:
            pending.append((root, None, None))
        while pending:
            node, low, high = pending.pop()
            count += 1
            if node.data is None:
                found.append("None element stored")
            elif low is not None and not low < node.data:
                found.append(f"{node.data!r} not greater than ancestor {low!r}")
            elif high is not None and not node.data < high:
                found.append(f"{node.data!r} not less than ancestor {high!r}")
            if node.left is not None:
                pending.append((node.left, low, node.data))
            if node.right is not None:
                pending.append((node.right, node.data, high))
        if count != len(self._tree):
            found.append(f"size is {len(self._tree)} but {count} nodes are reachable")
        return found

    def is_valid(self) -> bool:
        return not self.problems()

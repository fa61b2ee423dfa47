"""Snapshot traversal iterators for OrderTreeLib.

Each iterator walks the tree once, at construction time, and stores the
elements on a LIFO buffer in reverse emission order. ``__next__`` then just
pops. The buffer is an independent snapshot: mutating the tree afterwards
does not change what an existing iterator yields.

The walks use explicit stacks so chain-shaped trees of any size can be
traversed without touching the interpreter recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Union

from .node import BSTNode
from .._common.config import TraversalOrder, parse_order


class SnapshotIterator(ABC):
    """Abstract base class for snapshot traversal strategies.

    Subclasses only decide how the reversed buffer is built; consumption is
    shared.
    """

    def __init__(self, root: Optional[BSTNode]):
        """Materialize the traversal of the subtree at ``root``.

        Args:
            root: Root of the subtree to snapshot (None for an empty tree)
        """
        self._stack: List[Any] = self._build_reversed(root) if root is not None else []

    @abstractmethod
    def _build_reversed(self, root: BSTNode) -> List[Any]:
        """Return the elements in reverse emission order.

        The last item of the returned list is the first one ``next()``
        produces.
        """
        pass

    def has_next(self) -> bool:
        """Check whether another element is available."""
        return bool(self._stack)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration
        return self._stack.pop()

    def __length_hint__(self) -> int:
        return len(self._stack)


class InOrderIterator(SnapshotIterator):
    """Left subtree, node, right subtree: ascending order for a BST."""

    def _build_reversed(self, root: BSTNode) -> List[Any]:
        # Mirrored in-order walk (right, node, left) yields descending order
        buffer: List[Any] = []
        pending: List[BSTNode] = []
        node: Optional[BSTNode] = root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.right
            node = pending.pop()
            buffer.append(node.data)
            node = node.left
        return buffer


class PreOrderIterator(SnapshotIterator):
    """Node first, then left subtree, then right subtree.

    Good for copying trees: reinserting a pre-order sequence into an empty
    tree reproduces the original shape.
    """

    def _build_reversed(self, root: BSTNode) -> List[Any]:
        buffer: List[Any] = []
        pending: List[BSTNode] = [root]
        while pending:
            node = pending.pop()
            buffer.append(node.data)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        buffer.reverse()
        return buffer


class PostOrderIterator(SnapshotIterator):
    """Left subtree, right subtree, then the node itself."""

    def _build_reversed(self, root: BSTNode) -> List[Any]:
        # node, right, left is exactly post-order reversed
        buffer: List[Any] = []
        pending: List[BSTNode] = [root]
        while pending:
            node = pending.pop()
            buffer.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return buffer


_ITERATORS = {
    TraversalOrder.IN_ORDER: InOrderIterator,
    TraversalOrder.PRE_ORDER: PreOrderIterator,
    TraversalOrder.POST_ORDER: PostOrderIterator,
}


def create_iterator(order: Union[TraversalOrder, str],
                    root: Optional[BSTNode]) -> SnapshotIterator:
    """Create a snapshot iterator by traversal order.

    Args:
        order: TraversalOrder member or alias (``"in"``, ``"pre"``, ``"post"``, ...)
        root: Root node of the subtree to traverse

    Returns:
        SnapshotIterator instance

    Raises:
        ValueError: If the order name is not recognized
    """
    return _ITERATORS[parse_order(order)](root)

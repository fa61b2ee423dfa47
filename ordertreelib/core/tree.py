"""OrderedTree: an unbalanced binary search tree with ordered-set semantics.

The tree stores each element at most once, orders elements by their natural
``<`` comparison and never stores ``None``. Besides membership it answers
ordered navigation queries (``higher``, ``lower``, ``ceiling``, ``floor``)
and hands out snapshot iterators in in-order, pre-order and post-order.

Values that cannot be compared with the stored elements (``TypeError`` from
``<``) are treated as rejected input: lookups report "not found" and
mutators report ``False``. Nothing is rebalanced, so inserting sorted data
degrades the tree into a chain; every walk here is iterative so such trees
still work at any size.
"""

import logging
from collections.abc import Collection
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .node import BSTNode
from .traverser import (
    SnapshotIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    create_iterator,
)
from .._common.config import RenderConfig, TraversalOrder
from .._common.errors import (
    EmptyTreeError,
    InvalidConfigError,
    UnsupportedCapabilityError,
)

logger = logging.getLogger(__name__)


class OrderedTree(Collection):
    """Binary search tree exposing an ordered set of comparable elements.

    Example:
        >>> tree = OrderedTree()
        >>> for value in (5, 3, 8, 1, 4, 7, 9):
        ...     _ = tree.add(value)
        >>> list(tree.pre_order())
        [5, 3, 1, 4, 8, 7, 9]
        >>> tree.ceiling(6), tree.floor(6)
        (7, 5)
    """

    def __init__(self, render_config: Optional[RenderConfig] = None):
        """Create an empty tree.

        Args:
            render_config: Options for ``str()`` and ``to_tree_string()``

        Raises:
            InvalidConfigError: If ``render_config`` fails validation
        """
        self.render_config = _checked_config(render_config)
        self._root: Optional[BSTNode] = None
        self._size = 0

    # Mutators

    def add(self, e: Any) -> bool:
        """Insert an element.

        Args:
            e: Element to insert

        Returns:
            True if the element was inserted, False if it is None, not
            comparable with the stored elements, or already present
        """
        if e is None:
            logger.debug("Rejected None insertion")
            return False

        if self._root is None:
            self._root = BSTNode(e)
            self._size = 1
            logger.debug("Inserted %r as root", e)
            return True

        try:
            parent, node = self._locate(e)
        except TypeError:
            logger.debug("Rejected %r: not comparable with stored elements", e)
            return False

        if node is not None:
            return False

        if e < parent.data:
            parent.left = BSTNode(e)
        else:
            parent.right = BSTNode(e)
        self._size += 1
        logger.debug("Inserted %r under %r (size=%d)", e, parent.data, self._size)
        return True

    def remove(self, o: Any) -> bool:
        """Remove an element if present.

        A node with two children takes over its in-order predecessor's
        element, and the predecessor's node (which has no right child) is
        unlinked instead.

        Returns:
            True if an element was removed, False otherwise
        """
        if o is None or self._root is None:
            return False

        try:
            parent, node = self._locate(o)
        except TypeError:
            return False

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.data = pred.data
            if pred_parent is node:
                node.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.right is None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1
        logger.debug("Removed %r (size=%d)", o, self._size)
        return True

    def clear(self) -> None:
        """Remove every element."""
        self._root = None
        self._size = 0
        logger.debug("Cleared tree")

    def add_all(self, elements: Iterable[Any]) -> bool:
        raise UnsupportedCapabilityError('add_all', type(self).__name__)

    def remove_all(self, elements: Iterable[Any]) -> bool:
        raise UnsupportedCapabilityError('remove_all', type(self).__name__)

    def retain_all(self, elements: Iterable[Any]) -> bool:
        raise UnsupportedCapabilityError('retain_all', type(self).__name__)

    # Queries

    def contains(self, o: Any) -> bool:
        """Check membership; None and incomparable values are never found."""
        if o is None or self._root is None:
            return False
        try:
            _, node = self._locate(o)
        except TypeError:
            return False
        return node is not None

    def __contains__(self, o: Any) -> bool:
        return self.contains(o)

    def contains_all(self, elements: Iterable[Any]) -> bool:
        """True iff every element of ``elements`` is in the tree."""
        for o in elements:
            if not self.contains(o):
                return False
        return True

    def get(self, value: Any) -> Any:
        """Return the stored element equal to ``value``, or None."""
        if value is None or self._root is None:
            return None
        try:
            _, node = self._locate(value)
        except TypeError:
            return None
        return node.data if node is not None else None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def first(self) -> Any:
        """Return the lowest element.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("first() called on an empty tree")
        cursor = self._root
        while cursor.left is not None:
            cursor = cursor.left
        return cursor.data

    def last(self) -> Any:
        """Return the highest element.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("last() called on an empty tree")
        cursor = self._root
        while cursor.right is not None:
            cursor = cursor.right
        return cursor.data

    def ceiling(self, e: Any) -> Any:
        """Least element greater than or equal to ``e``, or None."""
        if self.contains(e):
            return e
        return self.higher(e)

    def floor(self, e: Any) -> Any:
        """Greatest element less than or equal to ``e``, or None."""
        if self.contains(e):
            return e
        return self.lower(e)

    def higher(self, e: Any) -> Any:
        """Least element strictly greater than ``e``, or None.

        Every node greater than ``e`` met on the way down is a candidate and
        each later one is smaller than the one before, so the last candidate
        recorded is the answer.
        """
        if e is None:
            return None
        candidate: Optional[BSTNode] = None
        node = self._root
        try:
            while node is not None:
                if e < node.data:
                    candidate = node
                    node = node.left
                else:
                    node = node.right
        except TypeError:
            return None
        return candidate.data if candidate is not None else None

    def lower(self, e: Any) -> Any:
        """Greatest element strictly less than ``e``, or None."""
        if e is None:
            return None
        candidate: Optional[BSTNode] = None
        node = self._root
        try:
            while node is not None:
                if node.data < e:
                    candidate = node
                    node = node.right
                else:
                    node = node.left
        except TypeError:
            return None
        return candidate.data if candidate is not None else None

    # Iteration

    def __iter__(self) -> Iterator[Any]:
        return InOrderIterator(self._root)

    def in_order(self) -> SnapshotIterator:
        """Fresh snapshot iterator in ascending order."""
        return InOrderIterator(self._root)

    def pre_order(self) -> SnapshotIterator:
        """Fresh snapshot iterator: node, left subtree, right subtree."""
        return PreOrderIterator(self._root)

    def post_order(self) -> SnapshotIterator:
        """Fresh snapshot iterator: left subtree, right subtree, node."""
        return PostOrderIterator(self._root)

    def iter_order(self, order: Union[TraversalOrder, str]) -> SnapshotIterator:
        """Fresh snapshot iterator for an order given by enum or name."""
        return create_iterator(order, self._root)

    def to_array(self) -> List[Any]:
        """In-order elements in a list of length ``len(self)``."""
        return list(self.in_order())

    # Copying and comparison

    def copy(self) -> 'OrderedTree':
        """Return a tree with the same elements and shape but no shared nodes.

        Elements themselves are not copied.
        """
        result = type(self)(render_config=self.render_config)
        for e in self.pre_order():
            result.add(e)
        return result

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they hold the same elements, whatever the shape."""
        if not isinstance(other, OrderedTree):
            return NotImplemented
        if other is self:
            return True
        if self._size != other._size:
            return False
        for e in other.in_order():
            if not self.contains(e):
                return False
        return True

    __hash__ = None

    # Rendering

    def __str__(self) -> str:
        separator = self.render_config.separator
        return "[" + separator.join(str(e) for e in self.in_order()) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_array()!r})"

    def to_tree_string(self, config: Optional[RenderConfig] = None) -> str:
        """Render the tree shape, one slot per line, in pre-order.

        Children are indented by depth and absent children are shown with
        the placeholder, e.g. for ``add(2); add(1)``::

            2
            |--1
               |--null
               |--null
            |--null

        Args:
            config: Rendering options (defaults to the tree's own)

        Raises:
            InvalidConfigError: If ``config`` fails validation
        """
        config = _checked_config(config) if config is not None else self.render_config

        lines: List[str] = []
        pending: List[Tuple[Optional[BSTNode], int]] = [(self._root, 0)]
        while pending:
            node, depth = pending.pop()
            prefix = config.indent * (depth - 1) + config.branch if depth > 0 else ""
            if node is None:
                lines.append(prefix + config.placeholder)
                continue
            lines.append(prefix + str(node.data))
            pending.append((node.right, depth + 1))
            pending.append((node.left, depth + 1))
        return "\n".join(lines)

    def walk(self) -> Iterator[Tuple[Any, int, bool]]:
        """Yield ``(element, depth, is_leaf)`` for every node in pre-order.

        Unlike the snapshot iterators this is a live generator; do not
        mutate the tree while consuming it.
        """
        if self._root is None:
            return
        pending: List[Tuple[BSTNode, int]] = [(self._root, 0)]
        while pending:
            node, depth = pending.pop()
            yield node.data, depth, node.is_leaf()
            if node.right is not None:
                pending.append((node.right, depth + 1))
            if node.left is not None:
                pending.append((node.left, depth + 1))

    # Internals

    def _locate(self, value: Any) -> Tuple[Optional[BSTNode], Optional[BSTNode]]:
        """Walk from the root towards ``value``.

        Returns:
            ``(parent, node)`` where ``node`` holds an element equal to
            ``value``, or ``(last_visited, None)`` when it is absent

        Raises:
            TypeError: If ``value`` cannot be compared with a stored element
        """
        parent: Optional[BSTNode] = None
        node = self._root
        while node is not None:
            if value < node.data:
                parent, node = node, node.left
            elif node.data < value:
                parent, node = node, node.right
            else:
                return parent, node
        return parent, None


def _checked_config(config: Optional[RenderConfig]) -> RenderConfig:
    if config is None:
        return RenderConfig()
    errors = config.validate()
    if errors:
        raise InvalidConfigError(f"Invalid render configuration: {'; '.join(errors)}")
    return config

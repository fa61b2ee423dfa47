"""Node types for OrderTreeLib collections.

Nodes are plain data containers. All navigation and ordering logic lives in
the owning collection, so a node never knows its parent or its owner.
"""

from typing import Any, Optional


class BSTNode:
    """A binary search tree node owning at most two children."""

    __slots__ = ('data', 'left', 'right')

    def __init__(self, data: Any,
                 left: Optional['BSTNode'] = None,
                 right: Optional['BSTNode'] = None):
        self.data = data
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """True when both child slots are empty."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"


class ListNode:
    """A singly linked list node."""

    __slots__ = ('data', 'next')

    def __init__(self, data: Any, next: Optional['ListNode'] = None):
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"

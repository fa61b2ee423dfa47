"""Core binary search tree components."""

from .node import BSTNode, ListNode
from .traverser import (
    SnapshotIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    create_iterator,
)
from .tree import OrderedTree

__all__ = [
    'BSTNode',
    'ListNode',
    'SnapshotIterator',
    'InOrderIterator',
    'PreOrderIterator',
    'PostOrderIterator',
    'create_iterator',
    'OrderedTree',
]

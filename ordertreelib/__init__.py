"""OrderTreeLib - Teaching Collections Library.

OrderTreeLib provides an ordered-set binary search tree with snapshot
traversals, a singly linked list, and binary/decimal/hexadecimal string
conversion.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from ordertreelib import OrderedTree

    tree = OrderedTree()
    for value in (5, 3, 8, 1, 4, 7, 9):
        tree.add(value)
    tree.ceiling(6)          # 7
    list(tree.pre_order())   # [5, 3, 1, 4, 8, 7, 9]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .core import (
    OrderedTree,
    SnapshotIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    create_iterator,
)
from .linked import LinkedList, LinkedListIterator
from ._common import (
    TraversalOrder,
    RenderConfig,
    parse_order,
    OrderTreeError,
    UnsupportedCapabilityError,
    EmptyTreeError,
    ConversionError,
    InvalidConfigError,
)
from .convert import (
    binary_to_decimal,
    binary_to_hex,
    decimal_to_binary,
    hex_to_binary,
)
from .api import (
    build_tree,
    traverse_tree,
    count_nodes,
    find_elements,
    get_leaf_elements,
    tree_height,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Collections
    'OrderedTree',
    'LinkedList',
    'LinkedListIterator',
    'SnapshotIterator',
    'InOrderIterator',
    'PreOrderIterator',
    'PostOrderIterator',
    'create_iterator',
    # Config
    'TraversalOrder',
    'RenderConfig',
    'parse_order',
    # Errors
    'OrderTreeError',
    'UnsupportedCapabilityError',
    'EmptyTreeError',
    'ConversionError',
    'InvalidConfigError',
    # Conversion
    'binary_to_decimal',
    'binary_to_hex',
    'decimal_to_binary',
    'hex_to_binary',
    # API
    'build_tree',
    'traverse_tree',
    'count_nodes',
    'find_elements',
    'get_leaf_elements',
    'tree_height',
    'get_tree_stats',
]

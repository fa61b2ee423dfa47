"""High-level API for OrderTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented OrderedTree API for
ease of use in simple cases.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from .core.tree import OrderedTree
from ._common.config import RenderConfig, TraversalOrder, parse_order

logger = logging.getLogger(__name__)


def build_tree(elements: Iterable[Any],
               render_config: Optional[RenderConfig] = None) -> OrderedTree:
    """Build a tree by inserting ``elements`` one at a time, in order.

    Rejected elements (None, duplicates, incomparable values) are skipped.

    Args:
        elements: Elements to insert; insertion order decides the shape
        render_config: Optional rendering options for the new tree

    Returns:
        OrderedTree holding the accepted elements

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4, 7, 9])
        >>> list(traverse_tree(tree, "post"))
        [1, 4, 3, 7, 9, 8, 5]
    """
    tree = OrderedTree(render_config=render_config)
    skipped = 0
    for e in elements:
        if not tree.add(e):
            skipped += 1
    if skipped:
        logger.debug("build_tree skipped %d rejected element(s)", skipped)
    return tree


def traverse_tree(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> Iterator[Any]:
    """Iterate over the elements of ``tree`` in the given order.

    Args:
        tree: Tree to traverse
        order: Traversal order (in_order, pre_order, post_order or alias)

    Returns:
        Snapshot iterator of elements
    """
    return tree.iter_order(parse_order(order))


def count_nodes(tree: OrderedTree,
                predicate: Optional[Callable[[Any], bool]] = None) -> int:
    """Count elements, optionally only those matching ``predicate``."""
    if predicate is None:
        return len(tree)
    return sum(1 for e in tree.in_order() if predicate(e))


def find_elements(tree: OrderedTree, predicate: Callable[[Any], bool]) -> List[Any]:
    """Return the elements matching ``predicate``, in ascending order."""
    return [e for e in tree.in_order() if predicate(e)]


def get_leaf_elements(tree: OrderedTree) -> List[Any]:
    """Return the elements stored in leaf nodes, in ascending order."""
    leaves = [e for e, _, is_leaf in tree.walk() if is_leaf]
    leaves.sort()
    return leaves


def tree_height(tree: OrderedTree) -> int:
    """Number of edges on the longest root-to-leaf path, -1 for an empty tree."""
    return max((depth for _, depth, _ in tree.walk()), default=-1)


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['leaf_nodes'], stats['height']
        (2, 1)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
        'min': None,
        'max': None,
    }

    for _, depth, is_leaf in tree.walk():
        stats['total_nodes'] += 1

        if is_leaf:
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    if not tree.is_empty():
        stats['min'] = tree.first()
        stats['max'] = tree.last()

    return stats

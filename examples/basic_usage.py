#!/usr/bin/env python3
"""
Basic OrderTreeLib usage.

This example demonstrates:
- Building an OrderedTree and navigating it
- The three traversal orders and snapshot iterators
- Tree statistics and the tree-shaped rendering
- LinkedList and the base-conversion helpers
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ordertreelib import (
    LinkedList,
    OrderedTree,
    binary_to_hex,
    decimal_to_binary,
    get_tree_stats,
    traverse_tree,
)


def tree_demo() -> None:
    tree = OrderedTree()
    for value in (5, 3, 8, 1, 4, 7, 9):
        tree.add(value)

    print(f"Elements:   {tree}")
    for order in ("in_order", "pre_order", "post_order"):
        print(f"{order:<11} {list(traverse_tree(tree, order))}")

    print(f"ceiling(6) = {tree.ceiling(6)}, floor(6) = {tree.floor(6)}")
    print(f"higher(5)  = {tree.higher(5)}, lower(5) = {tree.lower(5)}")

    snapshot = tree.in_order()
    tree.remove(5)
    print(f"Snapshot taken before removing 5: {list(snapshot)}")
    print(f"Tree after removing 5:            {tree}")

    stats = get_tree_stats(tree)
    print(f"Height {stats['height']}, {stats['leaf_nodes']} leaves")
    print(tree.to_tree_string())


def linked_list_demo() -> None:
    lst = LinkedList()
    for word in ("pear", "apple", "fig"):
        lst.add(word)
    lst.sort()
    print(f"\nSorted list: {lst}")


def conversion_demo() -> None:
    binary = decimal_to_binary(2024)
    print(f"\n2024 -> {binary} -> {binary_to_hex(binary)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    tree_demo()
    linked_list_demo()
    conversion_demo()

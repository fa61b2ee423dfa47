"""Testing utilities for OrderTreeLib consumers."""

from .fixtures import SAMPLE_ELEMENTS, TreeInvariantChecker, make_sample_tree

__all__ = ['SAMPLE_ELEMENTS', 'TreeInvariantChecker', 'make_sample_tree']

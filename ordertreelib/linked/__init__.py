"""Linked list collection."""

from .linked_list import LinkedList, LinkedListIterator

__all__ = ['LinkedList', 'LinkedListIterator']

"""Singly linked list with manual node management.

The list keeps head and tail references so appends are O(1). It never stores
``None``; like OrderedTree it reports rejected input with ``False`` and
refuses the bulk mutators.
"""

import logging
from collections.abc import Collection
from typing import Any, Iterable, Iterator, List, Optional

from ..core.node import ListNode
from .._common.errors import UnsupportedCapabilityError

logger = logging.getLogger(__name__)


class LinkedListIterator:
    """Cursor over the nodes of a LinkedList, head to tail.

    The cursor starts on a sentinel placed before the head, so ``has_next``
    only has to look one link ahead.
    """

    def __init__(self, head: Optional[ListNode]):
        self._cursor = ListNode(None, head)

    def has_next(self) -> bool:
        return self._cursor.next is not None

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        self._cursor = self._cursor.next
        return self._cursor.data


class LinkedList(Collection):
    """Singly linked list of non-None elements."""

    def __init__(self):
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0

    def add(self, e: Any) -> bool:
        """Append ``e`` at the tail.

        Returns:
            True if appended, False if ``e`` is None
        """
        if e is None:
            logger.debug("Rejected None append")
            return False
        node = ListNode(e)
        if self._head is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return True

    def add_all(self, elements: Iterable[Any]) -> bool:
        raise UnsupportedCapabilityError('add_all', type(self).__name__)

    def remove_all(self, elements: Iterable[Any]) -> bool:
        raise UnsupportedCapabilityError('remove_all', type(self).__name__)

    def retain_all(self, elements: Iterable[Any]) -> bool:
        raise UnsupportedCapabilityError('retain_all', type(self).__name__)

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def index_of(self, o: Any) -> int:
        """Index of the first element equal to ``o``, or -1."""
        if o is None:
            return -1
        for index, e in enumerate(self):
            if o == e:
                return index
        return -1

    def contains(self, o: Any) -> bool:
        return self.index_of(o) >= 0

    def __contains__(self, o: Any) -> bool:
        return self.contains(o)

    def contains_all(self, elements: Optional[Iterable[Any]]) -> bool:
        """True iff every element of ``elements`` is in the list.

        A None collection is never contained.
        """
        if elements is None:
            return False
        for o in elements:
            if not self.contains(o):
                return False
        return True

    def remove(self, o: Any) -> bool:
        """Unlink the first element equal to ``o``.

        Returns:
            True if an element was removed
        """
        if o is None or self._head is None:
            return False

        before: Optional[ListNode] = None
        node = self._head
        while node is not None and not node.data == o:
            before, node = node, node.next
        if node is None:
            return False

        if before is None:
            self._head = node.next
        else:
            before.next = node.next
        if node is self._tail:
            self._tail = before
        self._size -= 1
        logger.debug("Removed %r (size=%d)", o, self._size)
        return True

    def get(self, index: int) -> Any:
        """Return the element at ``index``.

        Raises:
            IndexError: If ``index`` is outside ``[0, len(self))``
        """
        if index < 0 or index >= self._size:
            raise IndexError(f"list index {index} out of range for size {self._size}")
        cursor = self._head
        for _ in range(index):
            cursor = cursor.next
        return cursor.data

    def to_array(self) -> List[Any]:
        return list(self)

    def sort(self) -> None:
        """Reorder the elements by their natural order."""
        ordered = sorted(self)
        self.clear()
        for e in ordered:
            self.add(e)

    def __iter__(self) -> LinkedListIterator:
        return LinkedListIterator(self._head)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if other is None or type(other) is not type(self):
            return NotImplemented
        if self._size != other._size:
            return False
        for mine, theirs in zip(self, other):
            if not mine == theirs:
                return False
        return True

    __hash__ = None

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_array()!r})"

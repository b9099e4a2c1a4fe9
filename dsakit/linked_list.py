"""A singly linked list of values."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list with head and tail references."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"node index {index} out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._length += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at zero-based ``index``.

        ``index`` may range from 0 to the current length inclusive.
        """
        if not 0 <= index <= self._length:
            raise IndexError(f"insert index {index} out of range")
        if index == self._length:
            self.append(value)
            return
        if index == 0:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(value, previous.next)
        self._length += 1

    def delete(self, position: int) -> Any:
        """Remove and return the element at one-based ``position``."""
        if not 1 <= position <= self._length:
            raise IndexError(f"delete position {position} out of range")
        if position == 1:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 2)
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._length -= 1
        return removed.data

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def total(self) -> Any:
        """Return the sum of all elements."""
        return sum(self)

    def maximum(self) -> Any:
        """Return the largest element."""
        if self._head is None:
            raise ValueError("maximum() of an empty list")
        return max(self)

    def search(self, key: Any) -> Optional[Any]:
        """Return the first element equal to ``key``, or None if absent."""
        for value in self:
            if value == key:
                return value
        return None

    def binary_search(self, key: Any) -> Optional[Any]:
        """Find ``key`` in an ascending list by halving positions.

        Returns the element found, or None when it is absent.
        """
        low, high = 0, self._length - 1
        while low <= high:
            mid = (low + high) // 2
            value = self._node_at(mid).data
            if value == key:
                return value
            if value < key:
                low = mid + 1
            else:
                high = mid - 1
        return None
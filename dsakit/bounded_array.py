"""A fixed-capacity array supporting append, insert, delete and resize."""

from collections.abc import Iterable, Iterator
from typing import Any


class ArrayFullError(Exception):
    """Raised when an element is added to an array at full capacity."""


class BoundedArray:
    """A sequence of elements that never grows beyond its capacity."""

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ArrayFullError(
                f"{len(items)} values do not fit in capacity {capacity}"
            )
        self._capacity = capacity
        self._items = items

    @property
    def capacity(self) -> int:
        """The maximum number of elements the array can hold."""
        return self._capacity

    def _check_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise ArrayFullError(f"array is full (capacity {self._capacity})")

    def append(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        self._check_room()
        self._items.append(value)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index``, shifting later elements right.

        ``index`` may range from 0 to the current length inclusive.
        """
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} out of range")
        self._check_room()
        self._items.insert(index, value)

    def delete(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete index {index} out of range")
        return self._items.pop(index)

    def resize(self, capacity: int, fill: Any = 0) -> None:
        """Change the capacity and pad the array with ``fill`` up to it.

        After resizing, every slot up to the new capacity holds an element.
        """
        if capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} is smaller than length {len(self._items)}"
            )
        self._items.extend([fill] * (capacity - len(self._items)))
        self._capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._capacity}, {self._items!r})"
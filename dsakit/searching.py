"""Linear and binary search over sequences."""

from collections.abc import Sequence
from typing import Any, Optional


def linear_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> Optional[int]:
    """Find ``target`` in the ascending ``items`` by recursive halving.

    Returns the index found, or None when the target is absent.
    """

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def binary_search_iterative(items: Sequence[Any], target: Any) -> Optional[int]:
    """Find ``target`` in the ascending ``items`` with a loop.

    Returns the index found, or None when the target is absent.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None
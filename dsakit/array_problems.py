"""Classic problems on lists of numbers."""

import bisect
import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any, Optional


def is_sorted(values: Iterable[Any]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


def insert_sorted(values: Iterable[Any], x: Any) -> list:
    """Return a copy of the sorted ``values`` with ``x`` placed in order.

    ``x`` goes after any elements equal to it.
    """
    result = list(values)
    bisect.insort_right(result, x)
    return result


def duplicates_sorted(values: Iterable[Any]) -> list:
    """Return each value repeated in the sorted ``values``, once."""
    duplicates: list = []
    for left, right in pairwise(values):
        if left == right and (not duplicates or duplicates[-1] != left):
            duplicates.append(left)
    return duplicates


def duplicates_hashing(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers that occur more than once, ascending."""
    counts = Counter(values)
    if any(value < 0 for value in counts):
        raise ValueError("values must be non-negative integers")
    return sorted(value for value, count in counts.items() if count > 1)


def duplicates_unsorted(values: Iterable[Any]) -> list:
    """Return values occurring more than once, in order of first appearance."""
    counts = Counter(values)
    return [value for value, count in counts.items() if count > 1]


def min_and_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(minimum, maximum)`` found in a single pass."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_and_max() of an empty sequence") from None
    for value in iterator:
        if value > largest:
            largest = value
        if value < smallest:
            smallest = value
    return smallest, largest


def merge(a: Iterable[Any], b: Iterable[Any]) -> list:
    """Merge two ascending sequences into one ascending list."""
    # On ties the element from b comes first.
    return list(heapq.merge(b, a))


def missing_element(values: Sequence[int]) -> int:
    """Return the one number missing from ``values``, which hold 1..n+1 but one."""
    n = len(values)
    return (n + 1) * (n + 2) // 2 - sum(values)


def first_missing_in_sequence(values: Sequence[int]) -> Optional[int]:
    """Return the first gap in an ascending run of consecutive integers.

    Returns None when the run has no gap.
    """
    if not values:
        return None
    offset = values[0]
    for index, value in enumerate(values):
        if value - index != offset:
            return index + offset
    return None


def missing_elements(values: Sequence[int]) -> list[int]:
    """Return every integer missing from an ascending run of integers."""
    if not values:
        return []
    missing: list[int] = []
    offset = values[0]
    for index, value in enumerate(values):
        while value - index > offset:
            missing.append(index + offset)
            offset += 1
    return missing


def find_pair_with_sum(
    values: Sequence[int], target: int
) -> Optional[tuple[int, int]]:
    """Return the first index pair ``(i, j)``, ``i < j``, summing to ``target``."""
    for i, left in enumerate(values):
        for j in range(i + 1, len(values)):
            if left + values[j] == target:
                return i, j
    return None


def reverse_range(values: list, start: int, end: int) -> None:
    """Reverse ``values[start..end]`` (inclusive) in place."""
    if start < end:
        values[start : end + 1] = values[start : end + 1][::-1]


def rotate(values: list, k: int) -> None:
    """Rotate ``values`` right by ``k`` places in place; negative ``k`` rotates left."""
    n = len(values)
    if n == 0:
        return
    k %= n
    reverse_range(values, 0, n - 1)
    reverse_range(values, 0, k - 1)
    reverse_range(values, k, n - 1)
"""Set operations on lists, for unsorted and for sorted inputs."""

from collections.abc import Iterable, Sequence
from itertools import chain
from typing import Any


def union_unsorted(a: Iterable[Any], b: Iterable[Any]) -> list:
    """Return the distinct elements of ``a`` then ``b``, in first-seen order."""
    result: list = []
    for value in chain(a, b):
        if value not in result:
            result.append(value)
    return result


def union_sorted(a: Sequence[Any], b: Sequence[Any]) -> list:
    """Merge two ascending sequences, taking an element common to both once."""
    result: list = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif b[j] < a[i]:
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def intersection_unsorted(a: Iterable[Any], b: Iterable[Any]) -> list:
    """Return the elements of ``a`` that also occur in ``b``, in ``a``'s order."""
    others = list(b)
    return [value for value in a if value in others]


def intersection_sorted(a: Sequence[Any], b: Sequence[Any]) -> list:
    """Return the elements common to two ascending sequences."""
    result: list = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif b[j] < a[i]:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


def difference(a: Sequence[Any], b: Sequence[Any]) -> list:
    """Return the elements of ascending ``a`` that are not in ascending ``b``."""
    result: list = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif b[j] < a[i]:
            j += 1
        else:
            i += 1
            j += 1
    result.extend(a[i:])
    return result
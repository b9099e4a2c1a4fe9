"""Sums over lists and element-wise work on two-dimensional grids."""

from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any


def sum_first(values: Iterable[Any], count: int) -> Any:
    """Return the sum of the first ``count`` elements of ``values``."""
    if count < 0:
        raise ValueError("count must not be negative")
    head = list(islice(values, count))
    if len(head) < count:
        raise IndexError(f"only {len(head)} values available, {count} requested")
    return sum(head)


def add_matrices(
    a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]]
) -> list[list[Any]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(a) != len(b):
        raise ValueError("matrices have different numbers of rows")
    result = []
    for row_a, row_b in zip(a, b):
        if len(row_a) != len(row_b):
            raise ValueError("matrices have rows of different lengths")
        result.append([x + y for x, y in zip(row_a, row_b)])
    return result


def format_grid(rows: Iterable[Iterable[Any]]) -> str:
    """Render a grid as lines of space-separated values."""
    return "\n".join(" ".join(str(value) for value in row) for row in rows)
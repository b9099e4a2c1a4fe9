"""Recursive algorithms: factorials, combinations, powers, traces and Hanoi."""

from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache


@dataclass(frozen=True)
class Move:
    """One move of the Tower of Hanoi: a disk travelling between two rods."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def factorial(n: int) -> int:
    """Return ``n!``; 0! is 1."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def combinations(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items out of ``n``."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    if r > n:
        raise ValueError("r cannot be greater than n")
    return factorial(n) // (factorial(r) * factorial(n - r))


def power(base: int, exponent: int) -> int:
    """Return ``base`` multiplied by itself ``exponent`` times."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` up to 1 return ``n``."""
    if n <= 1:
        return n

    @cache
    def fib(k: int) -> int:
        return k if k <= 1 else fib(k - 1) + fib(k - 2)

    # Fill the cache bottom-up so deep arguments do not exhaust the stack.
    for k in range(n):
        fib(k)
    return fib(n)


def mutual_trace(n: int) -> list[int]:
    """Return the values visited by two mutually recursive functions.

    The first prints ``n`` while it is positive and hands ``n - 1`` to the
    second; the second prints ``n`` while it exceeds 1 and hands ``n // 2``
    back to the first.
    """
    trace: list[int] = []
    first_turn = True
    while True:
        if first_turn:
            if n <= 0:
                break
            trace.append(n)
            n -= 1
        else:
            if n <= 1:
                break
            trace.append(n)
            n //= 2
        first_turn = not first_turn
    return trace


def nested(n: int) -> int:
    """Evaluate ``f(n) = n - 10`` if ``n > 100`` else ``f(f(n + 11))``."""
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n


def descending(n: int) -> list[int]:
    """Return the values printed before each recursive call: ``n`` down to 1."""
    return list(range(n, 0, -1))


def ascending(n: int) -> list[int]:
    """Return the values printed after each recursive call: 1 up to ``n``."""
    return list(range(1, n + 1))


def sum_natural(n: int) -> int:
    """Return the sum of the first ``n`` natural numbers."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n <= 0:
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)


def tree_trace(n: int) -> list[int]:
    """Return the values printed by a function that prints ``n`` then calls itself twice on ``n - 1``."""

    def visit(k: int) -> Iterator[int]:
        if k > 0:
            yield k
            yield from visit(k - 1)
            yield from visit(k - 1)

    return list(visit(n))
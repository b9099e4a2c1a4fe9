"""Square matrices that store only their possibly non-zero elements.

Indices are one-based ``(row, column)`` pairs. Setting an element that lies
outside a matrix's stored region has no effect; reading one gives 0.
"""

from enum import Enum
from typing import Optional


class StorageOrder(Enum):
    """How the elements of a triangular matrix are laid out."""

    ROW_MAJOR = "row"
    COLUMN_MAJOR = "column"


class _CompactMatrix:
    """Base for square matrices stored as a flat list of elements."""

    def __init__(self, n: int, storage: int) -> None:
        if n < 1:
            raise ValueError("matrix dimension must be at least 1")
        self._n = n
        self._data = [0] * storage

    @property
    def n(self) -> int:
        """The dimension of the matrix."""
        return self._n

    def _slot(self, i: int, j: int) -> Optional[int]:
        raise NotImplementedError

    def _check(self, key) -> tuple[int, int]:
        try:
            i, j = key
        except (TypeError, ValueError):
            raise TypeError("matrix index must be a (row, column) pair") from None
        if not (1 <= i <= self._n and 1 <= j <= self._n):
            raise IndexError(f"index ({i}, {j}) outside a {self._n}x{self._n} matrix")
        return i, j

    def __getitem__(self, key) -> int:
        slot = self._slot(*self._check(key))
        return 0 if slot is None else self._data[slot]

    def __setitem__(self, key, value: int) -> None:
        slot = self._slot(*self._check(key))
        if slot is not None:
            self._data[slot] = value

    def rows(self) -> list[list[int]]:
        """Return the full matrix as a list of rows."""
        return [
            [self[i, j] for j in range(1, self._n + 1)]
            for i in range(1, self._n + 1)
        ]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self.rows())


class DiagonalMatrix(_CompactMatrix):
    """A matrix whose only non-zero elements lie on the main diagonal."""

    def __init__(self, n: int) -> None:
        super().__init__(n, n)

    def _slot(self, i: int, j: int) -> Optional[int]:
        return i - 1 if i == j else None

    def __getitem__(self, key) -> int:
        return super().__getitem__(key)

    def __setitem__(self, key, value: int) -> None:
        super().__setitem__(key, value)

    def rows(self) -> list[list[int]]:
        return super().rows()

    def __str__(self) -> str:
        return super().__str__()


class LowerTriangularMatrix(_CompactMatrix):
    """A matrix whose non-zero elements lie on or below the diagonal."""

    def __init__(self, n: int, order: StorageOrder = StorageOrder.ROW_MAJOR) -> None:
        super().__init__(n, n * (n + 1) // 2)
        self._order = StorageOrder(order)

    @property
    def order(self) -> StorageOrder:
        """The layout of the stored elements."""
        return self._order

    def _slot(self, i: int, j: int) -> Optional[int]:
        if i < j:
            return None
        if self._order is StorageOrder.ROW_MAJOR:
            return i * (i - 1) // 2 + j - 1
        return self._n * (j - 1) - (j - 2) * (j - 1) // 2 + (i - j)

    def __getitem__(self, key) -> int:
        return super().__getitem__(key)

    def __setitem__(self, key, value: int) -> None:
        super().__setitem__(key, value)

    def rows(self) -> list[list[int]]:
        return super().rows()

    def __str__(self) -> str:
        return super().__str__()


class UpperTriangularMatrix(_CompactMatrix):
    """A matrix whose non-zero elements lie on or above the diagonal."""

    def __init__(self, n: int) -> None:
        super().__init__(n, n * (n + 1) // 2)

    def _slot(self, i: int, j: int) -> Optional[int]:
        return j * (j - 1) // 2 + i - 1 if i <= j else None

    def __getitem__(self, key) -> int:
        return super().__getitem__(key)

    def __setitem__(self, key, value: int) -> None:
        super().__setitem__(key, value)

    def rows(self) -> list[list[int]]:
        return super().rows()

    def __str__(self) -> str:
        return super().__str__()


class TridiagonalMatrix(_CompactMatrix):
    """A matrix whose non-zero elements lie on the diagonal and its neighbours."""

    def __init__(self, n: int) -> None:
        super().__init__(n, 3 * n - 2)

    def _slot(self, i: int, j: int) -> Optional[int]:
        offset = i - j
        if offset == 1:
            return i - 2
        if offset == 0:
            return self._n + i - 2
        if offset == -1:
            return 2 * self._n + i - 2
        return None

    def __getitem__(self, key) -> int:
        return super().__getitem__(key)

    def __setitem__(self, key, value: int) -> None:
        super().__setitem__(key, value)

    def rows(self) -> list[list[int]]:
        return super().rows()

    def __str__(self) -> str:
        return super().__str__()
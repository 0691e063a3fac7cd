"""Square integer matrices with the usual arithmetic and row/column edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Matrix:
    """A square matrix of integers."""

    __slots__ = ("_rows",)

    def __init__(self, source: int | Iterable[Iterable[int]]) -> None:
        """Build an N x N zero matrix from a size, or a matrix from rows."""
        if isinstance(source, int):
            if source < 0:
                raise ValueError("matrix size must not be negative")
            self._rows = [[0] * source for _ in range(source)]
            return
        rows = [[int(value) for value in row] for row in source]
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("matrix must be square")
        self._rows = rows

    def _check_index(self, index: int, what: str) -> None:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"{what} index {index} out of range")

    def _require_same_size(self, other: Matrix) -> None:
        if other.size() != self.size():
            raise ValueError("matrices must have the same size")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other)
        return Matrix(
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._rows, other._rows)
        )

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other)
        columns = list(zip(*other._rows))
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        )

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._unpack(key)
        return self._rows[i][j]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._unpack(key)
        self._rows[i][j] = int(value)

    def _unpack(self, key: tuple[int, int]) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix index must be a (row, column) pair")
        i, j = key
        self._check_index(i, "row")
        self._check_index(j, "column")
        return i, j

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[int]]:
        for row in self._rows:
            yield list(row)

    def __str__(self) -> str:
        return "\n".join("".join(f"{value}  " for value in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    def rows(self) -> list[list[int]]:
        """A copy of the matrix as a list of rows."""
        return [list(row) for row in self._rows]

    def sum_diagonal_major(self) -> int:
        """Sum of the main diagonal, top-left to bottom-right."""
        return sum(row[i] for i, row in enumerate(self._rows))

    def sum_diagonal_minor(self) -> int:
        """Sum of the secondary diagonal, top-right to bottom-left."""
        return sum(row[-1 - i] for i, row in enumerate(self._rows))

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange two rows in place."""
        self._check_index(r1, "row")
        self._check_index(r2, "row")
        self._rows[r1], self._rows[r2] = self._rows[r2], self._rows[r1]

    def swap_cols(self, c1: int, c2: int) -> None:
        """Exchange two columns in place."""
        self._check_index(c1, "column")
        self._check_index(c2, "column")
        for row in self._rows:
            row[c1], row[c2] = row[c2], row[c1]
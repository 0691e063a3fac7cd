"""Interactive matrix demo: load two matrices from a file and operate on them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from matrixlab.matrix import Matrix


def _leading_ints(text: str) -> Iterator[int]:
    """Yield whitespace-separated integers, stopping at the first token that is not one."""
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def load_matrices(path: str | Path) -> tuple[Matrix, Matrix]:
    """Read a size N followed by two N x N matrices; missing values are zero."""
    numbers = _leading_ints(Path(path).read_text())
    size = next(numbers, 0)
    if size <= 0:
        raise ValueError("Invalid matrix size.")

    def read_matrix() -> Matrix:
        return Matrix([next(numbers, 0) for _ in range(size)] for _ in range(size))

    first = read_matrix()
    second = read_matrix()
    return first, second


def format_matrix(matrix: Matrix, label: str) -> str:
    """Render a matrix under a label line."""
    return f"{label}:\n{matrix}\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    values = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise ValueError("unexpected end of input")
        values.append(int(token))
    return values


def main(argv: list[str] | None = None) -> int:
    """Run the interactive session; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="matrixlab")
    parser.add_argument("file", nargs="?", help="file holding N and two N x N matrices")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    filename = args.file
    if filename is None:
        print("Enter file name: ", end="", flush=True)
        filename = next(tokens, None)
        if filename is None:
            print("No file name given.", file=sys.stderr)
            return 1

    try:
        first, second = load_matrices(filename)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(format_matrix(first, "Matrix 1"), end="")
    print(format_matrix(second, "Matrix 2"), end="")
    print(format_matrix(first + second, "Adding Two Matrices: "), end="")
    print(format_matrix(first * second, "Multiplying Two Matrices"), end="")
    print(f"Sum of First  Diagonal: {first.sum_diagonal_major()}")
    print(f"Sum of Second Diagonal: {first.sum_diagonal_minor()}")

    try:
        print("\nEnter two row indices to swap: ", end="", flush=True)
        r1, r2 = _read_ints(tokens, 2)
        try:
            first.swap_rows(r1, r2)
            print(format_matrix(first, "Matrix After Swapping Rows"), end="")
        except IndexError:
            print("Invalid row indices!", file=sys.stderr)

        print("\nEnter two column indices to swap: ", end="", flush=True)
        c1, c2 = _read_ints(tokens, 2)
        try:
            first.swap_cols(c1, c2)
            print(format_matrix(first, "Matrix After Swapping Columns"), end="")
        except IndexError:
            print("Invalid column indices!", file=sys.stderr)

        print(
            "\nEnter row, column, and new value to update an element: ",
            end="",
            flush=True,
        )
        row, col, new_value = _read_ints(tokens, 3)
        try:
            first[row, col] = new_value
            print(format_matrix(first, "Matrix After Update"), end="")
        except IndexError:
            print("Invalid indices!", file=sys.stderr)
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# matrixlab

A small library and command-line tool for square integer matrices. It adds
and multiplies matrices, sums the main and secondary diagonals, and swaps
rows or columns in place.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Library use

```python
from matrixlab.matrix import Matrix

a = Matrix([[0, 0, 8], [6, 7, 8], [4, 1, 6]])
b = Matrix([[6, 3, 7], [8, 6, 6], [3, 3, 5]])

print(a + b)                   # element-wise sum
print(a * b)                   # matrix product
a.sum_diagonal_major()         # 13
a.sum_diagonal_minor()         # 19

a.swap_rows(0, 1)
a.swap_cols(0, 2)
a[1, 2] = 42                   # set one element
a[1, 2]                        # 42
a.size()                       # 3
len(a)                         # 3
a.rows()                       # a copy as a list of lists
```

- `Matrix(n)` with an integer makes an `n` by `n` matrix of zeros; a
  negative `n` raises `ValueError`.
- `Matrix(rows)` takes an iterable of rows. The rows must all have as many
  values as there are rows, otherwise `ValueError` is raised.
- `+` and `*` need two matrices of the same size; otherwise `ValueError`.
- Elements are read and written with a `(row, column)` pair. An index
  outside the matrix raises `IndexError`, as do `swap_rows` and `swap_cols`
  with an index outside the matrix. A key that is not a pair raises
  `TypeError`.
- Iterating over a matrix yields copies of its rows. Two matrices compare
  equal when all their values are equal. `str(matrix)` gives one line per
  row, each value followed by two spaces.

The module `matrixlab.cli` also offers `load_matrices(path)`, which reads
two matrices from a file in the format below and returns them as a pair,
and `format_matrix(matrix, label)`, which renders a matrix under a
`label:` line.

## Command line

```
matrixlab [FILE]
```

Without `FILE`, the tool asks for the name of an input file on standard
input. That file holds the size `N`, then the `N*N` values of the first
matrix, then the `N*N` values of the second matrix, all separated by
whitespace:

```
3
1 2 3
4 5 6
7 8 9
9 8 7
6 5 4
3 2 1
```

Reading stops at the first token that is not an integer; values that are
missing are taken as zero.

The tool prints both matrices, their sum and their product, and the
diagonal sums of the first matrix. It then reads, from standard input, two
row indices to swap, two column indices to swap, and a row, a column and a
new value to write into the first matrix. It prints the matrix after each
change. An index outside the matrix is reported on standard error and the
tool goes on to the next step.

The tool exits with status 1 if the file cannot be read, if the size in the
file is not positive, or if standard input ends early or holds something
other than an integer where one is expected; otherwise it exits with 0.
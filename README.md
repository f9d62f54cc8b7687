# matrixkit

Small matrices of real numbers for Python 3.10 and later. The package has no
dependencies outside the standard library.

It offers two interfaces:

- `matrixkit.functional` has plain functions over `RawMatrix` values. They
  return new matrices and raise an exception on bad input.
- `matrixkit.matrix` has a `Matrix` class with operators, in-place updates
  and resizing.

In both interfaces, two matrices are equal when they have the same shape and
each pair of elements differs by at most `1e-7` (`matrixkit.functional.EPS`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The functional interface

`RawMatrix` is a dataclass with three fields: `rows`, `columns` and `values`,
a list of row lists. `values` is `None` when the matrix is not allocated. Use
`RawMatrix.from_rows(...)` to build a matrix from nested sequences, or
`create_matrix(rows, columns)` to get a matrix filled with zeros.

```python
from matrixkit.functional import (
    RawMatrix, create_matrix, sum_matrix, sub_matrix, mult_number,
    mult_matrix, transpose, calc_complements, determinant, inverse_matrix,
    eq_matrix, CalculationError, IncorrectMatrixError,
)

a = RawMatrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])
zeros = create_matrix(3, 3)

determinant(a)             # -1.0
inv = inverse_matrix(a)    # [[1, -1, 1], [-38, 41, -34], [27, -29, 24]]
eq_matrix(mult_matrix(a, inv),
          RawMatrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]]))  # True

try:
    sum_matrix(a, create_matrix(2, 3))
except CalculationError:
    ...                    # the shapes differ
```

The functions work as follows:

- `determinant` expands along the first row using cofactors.
- `calc_complements` needs a square matrix larger than 1×1.
- `inverse_matrix` computes the transpose of the complements divided by the
  determinant. It computes 1×1 matrices directly.

All errors derive from `MatrixError`:

- `IncorrectMatrixError` (also a `ValueError`) means the matrix itself is
  malformed. This covers a missing or unallocated matrix, non-positive
  dimensions, and empty or ragged rows given to `from_rows`.
- `CalculationError` (also an `ArithmeticError`) means the matrices are well
  formed but the operation cannot be carried out. This covers mismatched
  shapes, a non-square matrix where a square one is needed, and a matrix
  whose determinant is smaller than `1e-7` in absolute value passed to
  `inverse_matrix`.

## The `Matrix` class

```python
from matrixkit.matrix import Matrix

m = Matrix(2, 2)
m[0, 0], m[0, 1], m[1, 0], m[1, 1] = 1.0, -1.0, 2.0, 4.0

m.determinant()            # 6.0
inv = m.inverse_matrix()   # [[2/3, 1/6], [-1/3, 1/6]]
cof = m.calc_complements() # [[4, -2], [1, 1]]

n = m * 2.0                # scalar product (2.0 * m works too)
p = m * inv                # matrix product
m += n                     # in place; also -= and *=
m.resize(3, 4)             # keeps the overlapping block and pads with zeros
m.rows = 2                 # rows and cols can also be set one at a time

m.rows, m.cols             # (2, 4)
```

`Matrix()` with no arguments creates a 3×3 zero matrix.

Each operator has a matching method:

- `sum_matrix`, `sub_matrix`, `mul_number` and `mul_matrix` change the
  matrix in place.
- `transpose`, `calc_complements` and `inverse_matrix` return new matrices.
- `copy` returns an independent copy.

`determinant` uses Gaussian elimination with partial pivoting. It returns
`0.0` as soon as a pivot is within `1e-7` of zero. `inverse_matrix` uses
Gauss–Jordan elimination.

`==` compares matrices within `1e-7`, so `Matrix` objects are not hashable.

The class raises these errors:

- An out-of-range or negative index in `m[row, col]` raises `IndexError`.
- An index that is not a `(row, col)` pair raises `TypeError`.
- Non-positive dimensions raise `IncorrectMatrixError`.
- Mismatched shapes raise `CalculationError`. So do a non-square matrix given
  to `determinant`, `calc_complements` or `inverse_matrix`, a 1×1 matrix
  given to `calc_complements`, and a singular matrix given to
  `inverse_matrix`.

## What it does not do

matrixkit is a library only. It has no command-line tool. It does not read or
write matrices from files, and it does not print or format them beyond the
`repr` of a `Matrix`. All arithmetic is in plain Python floats, with no
vectorised or sparse storage.
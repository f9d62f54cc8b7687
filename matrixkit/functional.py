"""Plain matrix records and the free functions that operate on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

EPS = 1e-7


class MatrixError(Exception):
    """Base class for every error raised by matrix operations."""

    code = 0


class IncorrectMatrixError(MatrixError, ValueError):
    """A matrix argument is missing, empty or has non-positive dimensions."""

    code = 1


class CalculationError(MatrixError, ArithmeticError):
    """The operation cannot be carried out for matrices of these shapes or values."""

    code = 2


@dataclass
class RawMatrix:
    """A rows x columns grid of floats; ``values`` is None for an unallocated matrix."""

    rows: int = 0
    columns: int = 0
    values: list[list[float]] | None = field(default=None, repr=False)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> RawMatrix:
        """Build a matrix from a non-empty, rectangular sequence of rows."""
        values = [[float(x) for x in row] for row in rows]
        if not values or not values[0]:
            raise IncorrectMatrixError("a matrix needs at least one row and one column")
        width = len(values[0])
        if any(len(row) != width for row in values):
            raise IncorrectMatrixError("all rows must have the same length")
        return cls(len(values), width, values)


def _require(*matrices: RawMatrix | None) -> None:
    for m in matrices:
        if m is None or m.values is None:
            raise IncorrectMatrixError("matrix is missing or not allocated")


def create_matrix(rows: int, columns: int) -> RawMatrix:
    """Return a zero-filled matrix of the given size."""
    if rows < 1 or columns < 1:
        raise IncorrectMatrixError("rows and columns must be positive")
    return RawMatrix(rows, columns, [[0.0] * columns for _ in range(rows)])


def eq_matrix(a: RawMatrix, b: RawMatrix) -> bool:
    """True when both matrices have the same shape and every element differs by at most EPS."""
    if a.rows != b.rows or a.columns != b.columns:
        return False
    return not any(
        abs(x - y) > EPS
        for row_a, row_b in zip(a.values or [], b.values or [])
        for x, y in zip(row_a, row_b)
    )


def _elementwise(a: RawMatrix | None, b: RawMatrix | None, subtract: bool) -> RawMatrix:
    _require(a, b)
    assert a is not None and b is not None
    if a.rows <= 0 or a.columns <= 0 or b.rows <= 0 or b.columns <= 0:
        raise IncorrectMatrixError("matrix dimensions must be positive")
    if a.rows != b.rows or a.columns != b.columns:
        raise CalculationError("matrices have different dimensions")
    result = create_matrix(a.rows, a.columns)
    result.values = [
        [x - y if subtract else x + y for x, y in zip(row_a, row_b)]
        for row_a, row_b in zip(a.values, b.values)
    ]
    return result


def sum_matrix(a: RawMatrix, b: RawMatrix) -> RawMatrix:
    """Return a + b."""
    return _elementwise(a, b, subtract=False)


def sub_matrix(a: RawMatrix, b: RawMatrix) -> RawMatrix:
    """Return a - b."""
    return _elementwise(a, b, subtract=True)


def mult_number(a: RawMatrix, number: float) -> RawMatrix:
    """Return a multiplied by a scalar."""
    _require(a)
    result = create_matrix(a.rows, a.columns)
    result.values = [[x * number for x in row] for row in a.values]
    return result


def mult_matrix(a: RawMatrix, b: RawMatrix) -> RawMatrix:
    """Return the matrix product a x b."""
    _require(a, b)
    if a.columns != b.rows:
        raise CalculationError("columns of the first matrix must equal rows of the second")
    result = create_matrix(a.rows, b.columns)
    b_columns = list(zip(*b.values))
    result.values = [
        [sum(x * y for x, y in zip(row, column)) for column in b_columns]
        for row in a.values
    ]
    return result


def transpose(a: RawMatrix) -> RawMatrix:
    """Return the transpose of a."""
    _require(a)
    result = create_matrix(a.columns, a.rows)
    result.values = [list(column) for column in zip(*a.values)]
    return result


def _minor(a: RawMatrix, skip_row: int, skip_col: int) -> RawMatrix:
    values = [
        [x for c, x in enumerate(row) if c != skip_col]
        for r, row in enumerate(a.values)
        if r != skip_row
    ]
    return RawMatrix(a.rows - 1, a.columns - 1, values)


def calc_complements(a: RawMatrix) -> RawMatrix:
    """Return the matrix of algebraic complements (cofactors) of a square matrix."""
    _require(a)
    if a.rows != a.columns or a.rows <= 1:
        raise CalculationError("complements need a square matrix larger than 1x1")
    result = create_matrix(a.rows, a.columns)
    result.values = [
        [(-1.0) ** (i + j) * determinant(_minor(a, i, j)) for j in range(a.columns)]
        for i in range(a.rows)
    ]
    return result


def determinant(a: RawMatrix) -> float:
    """Return the determinant of a square matrix by cofactor expansion along the first row."""
    _require(a)
    if a.columns <= 0 or a.rows <= 0 or a.columns != a.rows:
        raise CalculationError("determinant needs a square matrix")
    if a.columns == 1:
        return a.values[0][0]
    complements = calc_complements(a)
    result = 0.0
    for x, c in zip(a.values[0], complements.values[0]):
        result += x * c
    return result


def inverse_matrix(a: RawMatrix) -> RawMatrix:
    """Return the inverse of a square, non-singular matrix."""
    _require(a)
    if a.columns < 1 or a.rows < 1:
        raise IncorrectMatrixError("matrix dimensions must be positive")
    if a.columns != a.rows:
        raise CalculationError("only square matrices have an inverse")
    det = determinant(a)
    if abs(det) < EPS:
        raise CalculationError("matrix is singular")
    if a.rows == 1:
        result = create_matrix(1, 1)
        result.values[0][0] = 1.0 / a.values[0][0]
        return result
    return mult_number(transpose(calc_complements(a)), 1.0 / det)
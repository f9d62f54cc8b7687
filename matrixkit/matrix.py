"""A mutable dense matrix of floats with arithmetic operators."""

from __future__ import annotations

from numbers import Real

from matrixkit.functional import EPS, CalculationError, IncorrectMatrixError

DEFAULT_ROWS = 3
DEFAULT_COLS = 3


class Matrix:
    """A rows x cols matrix of floats, zero-filled on creation.

    Elements are addressed as ``m[row, col]``; negative indices are rejected.
    Equality compares shapes exactly and elements within ``EPS``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        if rows <= 0 or cols <= 0:
            raise IncorrectMatrixError("rows and columns must be greater than 0")
        self._rows = rows
        self._cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def _identity(cls, size: int) -> Matrix:
        result = cls(size, size)
        for i in range(size):
            result._data[i][i] = 1.0
        return result

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @rows.setter
    def rows(self, value: int) -> None:
        if value <= 0:
            raise IncorrectMatrixError("the number of rows must be at least 1")
        self.resize(value, self._cols)

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @cols.setter
    def cols(self, value: int) -> None:
        if value <= 0:
            raise IncorrectMatrixError("the number of columns must be at least 1")
        self.resize(self._rows, value)

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape, keeping overlapping elements and zero-filling the rest."""
        if rows <= 0 or cols <= 0:
            raise IncorrectMatrixError("the number of rows or columns must be at least 1")
        if rows == self._rows and cols == self._cols:
            return
        kept = [(row[:cols] + [0.0] * (cols - len(row[:cols]))) for row in self._data[:rows]]
        kept.extend([0.0] * cols for _ in range(rows - len(kept)))
        self._data = kept
        self._rows = rows
        self._cols = cols

    def copy(self) -> Matrix:
        """Return an independent copy."""
        result = Matrix(self._rows, self._cols)
        result._data = [row[:] for row in self._data]
        return result

    def _check_index(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("matrix index must be a (row, col) pair") from None
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError("index is out of range")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check_index(key)
        return self._data[row][col]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check_index(key)
        self._data[row][col] = float(value)

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self._data!r})"

    def _check_same_shape(self, other: Matrix) -> None:
        if self._rows != other._rows or self._cols != other._cols:
            raise CalculationError("different matrix dimensions")

    def _check_square(self) -> None:
        if self._rows != self._cols:
            raise CalculationError("the matrix is not square")

    def eq_matrix(self, other: Matrix) -> bool:
        """True when shapes match and every element differs by at most EPS."""
        if self._rows != other._rows or self._cols != other._cols:
            return False
        return all(
            abs(x - y) <= EPS
            for row_a, row_b in zip(self._data, other._data)
            for x, y in zip(row_a, row_b)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.eq_matrix(other)

    def sum_matrix(self, other: Matrix) -> None:
        """Add other to this matrix in place."""
        self._check_same_shape(other)
        self._data = [
            [x + y for x, y in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        ]

    def sub_matrix(self, other: Matrix) -> None:
        """Subtract other from this matrix in place."""
        self._check_same_shape(other)
        self._data = [
            [x - y for x, y in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        ]

    def mul_number(self, number: float) -> None:
        """Multiply every element by number in place."""
        self._data = [[x * number for x in row] for row in self._data]

    def mul_matrix(self, other: Matrix) -> None:
        """Replace this matrix with the product self x other."""
        if self._cols != other._rows:
            raise CalculationError(
                "the number of columns of the first matrix is not equal "
                "to the number of rows of the second matrix"
            )
        other_columns = list(zip(*other._data))
        self._data = [
            [sum(x * y for x, y in zip(row, column)) for column in other_columns]
            for row in self._data
        ]
        self._cols = other._cols

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.sum_matrix(other)
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.sub_matrix(other)
        return result

    def __mul__(self, other: Matrix | float) -> Matrix:
        result = self.copy()
        if isinstance(other, Matrix):
            result.mul_matrix(other)
        elif isinstance(other, Real):
            result.mul_number(float(other))
        else:
            return NotImplemented
        return result

    def __rmul__(self, other: float) -> Matrix:
        if not isinstance(other, Real):
            return NotImplemented
        result = self.copy()
        result.mul_number(float(other))
        return result

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sum_matrix(other)
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub_matrix(other)
        return self

    def __imul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self.mul_matrix(other)
        elif isinstance(other, Real):
            self.mul_number(float(other))
        else:
            return NotImplemented
        return self

    def transpose(self) -> Matrix:
        """Return the transpose as a new matrix."""
        result = Matrix(self._cols, self._rows)
        result._data = [list(column) for column in zip(*self._data)]
        return result

    def determinant(self) -> float:
        """Return the determinant, computed by elimination with partial pivoting."""
        self._check_square()
        n = self._rows
        work = [row[:] for row in self._data]
        det = 1.0
        for j in range(n):
            pivot_row = max(range(j, n), key=lambda i: abs(work[i][j]))
            if abs(work[pivot_row][j]) - EPS <= 0.0:
                return 0.0
            if pivot_row != j:
                work[j], work[pivot_row] = work[pivot_row], work[j]
                det = -det
            pivot = work[j]
            det *= pivot[j]
            for i in range(j + 1, n):
                k = work[i][j] / pivot[j]
                work[i][j:] = [a - k * b for a, b in zip(work[i][j:], pivot[j:])]
        return det

    def _complementary_minor(self, skip_row: int, skip_col: int) -> Matrix:
        if self._rows == 1:
            raise CalculationError("a 1-dimensional matrix has no minor")
        minor = Matrix(self._rows - 1, self._cols - 1)
        minor._data = [
            [x for c, x in enumerate(row) if c != skip_col]
            for r, row in enumerate(self._data)
            if r != skip_row
        ]
        return minor

    def calc_complements(self) -> Matrix:
        """Return the matrix of algebraic complements (cofactors)."""
        self._check_square()
        result = Matrix(self._rows, self._cols)
        result._data = [
            [
                (-1.0 if (i + j) % 2 else 1.0)
                * self._complementary_minor(i, j).determinant()
                for j in range(self._cols)
            ]
            for i in range(self._rows)
        ]
        return result

    def inverse_matrix(self) -> Matrix:
        """Return the inverse, computed by Gauss-Jordan elimination."""
        self._check_square()
        if abs(self.determinant()) - EPS <= 0.0:
            raise CalculationError("the matrix is not invertible: determinant is 0")
        n = self._rows
        work = [row[:] for row in self._data]
        inverse = Matrix._identity(n)._data
        for j in range(n):
            pivot_row = max(range(j, n), key=lambda i: abs(work[i][j]))
            work[j], work[pivot_row] = work[pivot_row], work[j]
            inverse[j], inverse[pivot_row] = inverse[pivot_row], inverse[j]
            for i in range(j + 1, n):
                k = work[i][j] / work[j][j]
                work[i] = [a - k * b for a, b in zip(work[i], work[j])]
                inverse[i] = [a - k * b for a, b in zip(inverse[i], inverse[j])]
            k = work[j][j]
            work[j] = [x / k for x in work[j]]
            inverse[j] = [x / k for x in inverse[j]]
        for j in range(n):
            for i in range(j):
                k = work[i][j]
                work[i] = [a - k * b for a, b in zip(work[i], work[j])]
                inverse[i] = [a - k * b for a, b in zip(inverse[i], inverse[j])]
        result = Matrix(n, n)
        result._data = inverse
        return result
"""
Matrix data model, construction and element access.

A Matrix is an immutable value: rows, cols and a flat row-major float64
buffer of length rows * cols. The buffer is copied on construction and
marked read-only, so no Matrix ever shares writable storage with its
caller or with another Matrix.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ShapeError
from pymatrix.core.validation import check_data, check_dimension, check_index


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense real matrix stored in row-major order.

    Element (i, j) lives at data[i * cols + j]. A Matrix with one row or
    one column is a vector; the canonical vector is a column (N x 1).

    Prefer make() and friends over calling the constructor directly; both
    validate identically.

    Attributes:
        rows: Number of rows (>= 0)
        cols: Number of columns (>= 0)
        data: Read-only float64 array of length rows * cols
    """
    rows: int
    cols: int
    data: NDArray[np.float64]

    def __post_init__(self) -> None:
        rows = check_dimension(self.rows, 'rows')
        cols = check_dimension(self.cols, 'cols')
        data = check_data(self.data, 'data')
        if data.size != rows * cols:
            raise ShapeError(
                f"The matrix must have {rows * cols} data elements "
                f"({rows} times {cols}), got {data.size}",
                expected=rows * cols,
                actual=data.size,
            )
        data.flags.writeable = False
        object.__setattr__(self, 'rows', rows)
        object.__setattr__(self, 'cols', cols)
        object.__setattr__(self, 'data', data)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_vector(self) -> bool:
        return self.rows == 1 or self.cols == 1

    @property
    def T(self) -> Matrix:
        from pymatrix.matrix._arithmetic import transpose
        return transpose(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and bool(np.array_equal(self.data, other.data))
        )

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: Any) -> float:
        if isinstance(key, tuple):
            return get(self, *key)
        return get(self, key)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix._arithmetic import add
        return add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix._arithmetic import sub
        return sub(self, other)

    def __mul__(self, scalar: Any) -> Matrix:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        from pymatrix.matrix._arithmetic import smul
        return smul(scalar, self)

    __rmul__ = __mul__

    def __neg__(self) -> Matrix:
        from pymatrix.matrix._arithmetic import smul
        return smul(-1, self)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix._arithmetic import multiply
        return multiply(self, other)

    def __str__(self) -> str:
        from pymatrix.matrix.convert import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.data.tolist()})"


def make(rows: int, cols: int, data: ArrayLike | None = None) -> Matrix:
    """
    Create a new rows x cols Matrix.

    Args:
        rows: Number of rows
        cols: Number of columns
        data: Optional row-major sequence of exactly rows * cols numbers.
              When omitted the matrix is filled with zeros.

    Returns:
        The new Matrix

    Raises:
        ShapeError: If len(data) != rows * cols
        ValidationError: If a dimension is negative or data is not numeric
    """
    if data is None:
        data = np.zeros(check_dimension(rows, 'rows') * check_dimension(cols, 'cols'))
    return Matrix(rows, cols, data)


def make_row_vector(size: int, data: ArrayLike | None = None) -> Matrix:
    """Create a 1 x size Matrix."""
    return make(1, size, data)


def make_column_vector(size: int, data: ArrayLike | None = None) -> Matrix:
    """Create a size x 1 Matrix."""
    return make(size, 1, data)


make_vector = make_column_vector


def make_empty() -> Matrix:
    """The canonical 0 x 0 matrix."""
    return Matrix(0, 0, np.empty(0))


def clone(A: Matrix) -> Matrix:
    """Deep value copy of A; the result shares no storage with A."""
    return Matrix(A.rows, A.cols, A.data.copy())


def get(A: Matrix, i: int, j: int | None = None) -> float:
    """
    Read one element.

    get(A, i) reads the flat (row-major) position i, with
    0 <= i < rows * cols. get(A, i, j) reads row i, column j.

    Raises:
        MatrixIndexError: If an index is out of range; the message names
                          the index and its valid range
    """
    if j is None:
        i = check_index(i, A.rows * A.cols, 'i')
        return float(A.data[i])
    i = check_index(i, A.rows, 'i')
    j = check_index(j, A.cols, 'j')
    return float(A.data[i * A.cols + j])

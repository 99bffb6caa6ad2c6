"""
Row and column extraction, and matrix growth by rows or columns.

Growth functions never mutate: append_row() and append_column() return a
new Matrix. A 0 x 0 accumulator adopts its width (or height) from the
first vector appended to it; after that every appended vector must match.
"""

import numpy as np

from pymatrix.core.exceptions import ShapeMismatchError
from pymatrix.core.validation import check_dimension, check_index
from pymatrix.matrix._matrix import Matrix, make_empty


def row(i: int, A: Matrix) -> Matrix:
    """
    The i-th row of A as a 1 x cols matrix.

    Raises:
        MatrixIndexError: If i is not in 0 .. rows - 1
    """
    i = check_index(i, A.rows, 'i')
    return Matrix(1, A.cols, A.data[i * A.cols:(i + 1) * A.cols])


def column(j: int, A: Matrix) -> Matrix:
    """
    The j-th column of A as a rows x 1 matrix.

    Raises:
        MatrixIndexError: If j is not in 0 .. cols - 1
    """
    j = check_index(j, A.cols, 'j')
    return Matrix(A.rows, 1, A.data[j::A.cols])


def append_row(A: Matrix, r: Matrix) -> Matrix:
    """
    A with r added as a new last row.

    The width is A.cols, or r's element count when A is still 0 x 0.
    r may be a row or a column vector; only its element count matters.

    Raises:
        ShapeMismatchError: If A already has a width (or rows) and r's
                            element count differs from A.cols
    """
    cols = A.cols if (A.cols or A.rows) else r.size
    if r.size != cols:
        raise ShapeMismatchError(
            f"Cannot append a row of {r.size} elements to a "
            f"{A.rows}x{A.cols} matrix: expected {cols} elements",
            operation='append_row',
            left_shape=A.shape,
            right_shape=r.shape,
        )
    return Matrix(A.rows + 1, cols, np.concatenate([A.data, r.data]))


def append_column(A: Matrix, c: Matrix) -> Matrix:
    """
    A with c added as a new last column.

    The height is A.rows, or c's element count when A is still 0 x 0.

    Raises:
        ShapeMismatchError: If A already has a height (or columns) and c's
                            element count differs from A.rows
    """
    rows = A.rows if (A.rows or A.cols) else c.size
    if c.size != rows:
        raise ShapeMismatchError(
            f"Cannot append a column of {c.size} elements to a "
            f"{A.rows}x{A.cols} matrix: expected {rows} elements",
            operation='append_column',
            left_shape=A.shape,
            right_shape=c.shape,
        )
    grown = np.column_stack([A.data.reshape(rows, A.cols), c.data])
    return Matrix(rows, A.cols + 1, grown)


class RowBuilder:
    """
    Accumulates rows into a Matrix, fixing the width on the first append.

    Usage:
        builder = RowBuilder()
        for vector in vectors:
            builder.append(vector)
        Q = builder.build()

    Pass cols to fix the width up front; build() then returns a 0 x cols
    matrix when nothing was appended.

    Rows are copied when appended; the builder never holds references to
    caller data. build() can be called any number of times.
    """

    def __init__(self, cols: int | None = None) -> None:
        self._rows: list[np.ndarray] = []
        self._cols = None if cols is None else check_dimension(cols, 'cols')

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def cols(self) -> int | None:
        """Fixed width, or None before the first append."""
        return self._cols

    def append(self, r: Matrix) -> 'RowBuilder':
        """
        Add r as the next row.

        Raises:
            ShapeMismatchError: If r's element count differs from the
                                width fixed by the first row
        """
        if self._cols is None:
            self._cols = r.size
        elif r.size != self._cols:
            raise ShapeMismatchError(
                f"Cannot append a row of {r.size} elements: "
                f"rows of this builder have {self._cols} elements",
                operation='append_row',
                left_shape=(len(self._rows), self._cols),
                right_shape=r.shape,
            )
        self._rows.append(np.array(r.data))
        return self

    def build(self) -> Matrix:
        """The accumulated rows as a Matrix (0 x 0 if no width was ever fixed)."""
        if self._cols is None:
            return make_empty()
        data = np.concatenate(self._rows) if self._rows else np.empty(0)
        return Matrix(len(self._rows), self._cols, data)

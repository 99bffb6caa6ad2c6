"""
Conversion between Matrix and nested sequences, elementwise mapping,
and text rendering for diagnostics.

format_matrix() output is for humans; compare matrices with == or
numpy.testing, never by their string form.
"""

from typing import Any, Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import RowLengthMismatchError, ValidationError
from pymatrix.matrix._matrix import Matrix, make_empty


def from_array(rows: Sequence[Sequence[float]] | NDArray[Any]) -> Matrix:
    """
    Build a Matrix from row-major nested sequences.

    Args:
        rows: Sequence of rows (lists, tuples or a 2-D ndarray). Every row
              must have the length of the first one.

    Returns:
        len(rows) x len(rows[0]) Matrix; 0 x 0 for an empty sequence

    Raises:
        RowLengthMismatchError: If a row's length differs from the first
        ValidationError: If rows is not a sequence of sequences
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise ValidationError(f"rows: expected a 2D array, got {rows.ndim}D")
        return Matrix(rows.shape[0], rows.shape[1], rows)

    if len(rows) == 0:
        return make_empty()

    try:
        lengths = [len(r) for r in rows]
    except TypeError as e:
        raise ValidationError(f"rows: every row must be a sequence: {e}") from e

    width = lengths[0]
    for index, length in enumerate(lengths):
        if length != width:
            raise RowLengthMismatchError(
                f"Row {index} has {length} elements, expected {width} "
                f"(the length of row 0)",
                row_index=index,
                expected=width,
                actual=length,
            )
    data = [value for r in rows for value in r]
    return Matrix(len(rows), width, data)


def to_array(A: Matrix) -> list[list[float]]:
    """Nested Python lists, one per row. A is left untouched."""
    return A.data.reshape(A.rows, A.cols).tolist()


def to_numpy(A: Matrix) -> NDArray[np.float64]:
    """Writable rows x cols ndarray copy of A."""
    return A.data.reshape(A.rows, A.cols).copy()


def map_elements(f: Callable[[float], float], A: Matrix) -> Matrix:
    """Apply a scalar function to every element; the shape is unchanged."""
    return Matrix(A.rows, A.cols, [f(float(value)) for value in A.data])


def _format_value(value: float) -> str:
    # Integral floats below 1e16 print without the trailing '.0'
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_matrix(A: Matrix) -> str:
    """
    Render A as bracketed, comma-separated rows, one row per line.

    Example:
        >>> print(format_matrix(make(2, 2, [1, 2, 3, 4.5])))
        [[ 1, 2 ]
         [ 3, 4.5 ]]
    """
    lines = [
        "[ " + ", ".join(_format_value(float(v)) for v in A.data[i * A.cols:(i + 1) * A.cols]) + " ]"
        for i in range(A.rows)
    ]
    body = "\n ".join(lines)
    return f"[{body}]" if A.rows > 1 else body

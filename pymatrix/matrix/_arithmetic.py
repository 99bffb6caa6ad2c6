"""
Elementwise and product operations.

Every function returns a new Matrix and leaves its arguments untouched.
Shape checks happen up front; a violation is a caller bug and raises
immediately.
"""

import numpy as np

from pymatrix.core.exceptions import LengthMismatchError, ShapeMismatchError
from pymatrix.core.validation import check_vector
from pymatrix.matrix._matrix import Matrix


def _check_same_shape(A: Matrix, B: Matrix, operation: str) -> None:
    if A.shape != B.shape:
        raise ShapeMismatchError(
            f"Cannot {operation} a {A.rows}x{A.cols} matrix with a "
            f"{B.rows}x{B.cols} matrix: shapes must be identical",
            operation=operation,
            left_shape=A.shape,
            right_shape=B.shape,
        )


def add(A: Matrix, B: Matrix) -> Matrix:
    """
    Elementwise sum A + B.

    Raises:
        ShapeMismatchError: If A and B differ in rows or cols
    """
    _check_same_shape(A, B, 'sum')
    return Matrix(A.rows, A.cols, A.data + B.data)


def sub(A: Matrix, B: Matrix) -> Matrix:
    """
    Elementwise difference A - B.

    Raises:
        ShapeMismatchError: If A and B differ in rows or cols
    """
    _check_same_shape(A, B, 'subtract')
    return Matrix(A.rows, A.cols, A.data - B.data)


def smul(scalar: float, A: Matrix) -> Matrix:
    """Multiply every element of A by scalar."""
    return Matrix(A.rows, A.cols, A.data * scalar)


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product A @ B.

    C(i, j) = sum over k of A(i, k) * B(k, j); the result is
    A.rows x B.cols.

    Raises:
        ShapeMismatchError: If A.cols != B.rows
    """
    if A.cols != B.rows:
        raise ShapeMismatchError(
            f"Cannot multiply a {A.rows}x{A.cols} matrix with a "
            f"{B.rows}x{B.cols} matrix: {A.cols} columns vs {B.rows} rows",
            operation='multiply',
            left_shape=A.shape,
            right_shape=B.shape,
        )
    C = A.data.reshape(A.rows, A.cols) @ B.data.reshape(B.rows, B.cols)
    return Matrix(A.rows, B.cols, C)


def transpose(A: Matrix) -> Matrix:
    """Return the cols x rows matrix T with T(j, i) = A(i, j)."""
    return Matrix(A.cols, A.rows, A.data.reshape(A.rows, A.cols).T)


def norm(A: Matrix) -> float:
    """Frobenius norm: square root of the sum of all squared elements."""
    return float(np.sqrt(np.sum(A.data * A.data)))


def dot(x: Matrix, y: Matrix) -> float:
    """
    Inner product of two vectors.

    Row and column vectors may be mixed; only the element count matters.

    Raises:
        NotAVectorError: If either argument has more than one row and
                         more than one column
        LengthMismatchError: If the vectors differ in element count
    """
    check_vector(x, 'x')
    check_vector(y, 'y')
    if x.size != y.size:
        raise LengthMismatchError(
            f"The vectors differ in length: x has {x.size} elements, y has {y.size}",
            left_length=x.size,
            right_length=y.size,
        )
    return float(np.dot(x.data, y.data))

"""
Triangular solves.
"""

import numpy as np

from pymatrix.core.exceptions import ShapeMismatchError, SingularMatrixError
from pymatrix.core.validation import check_vector
from pymatrix.matrix import Matrix


def back_substitution(R: Matrix, b: Matrix, *, check_singular: bool = False) -> Matrix:
    """
    Solve R x = b for square upper triangular R.

    Equations are resolved from the last to the first:
        x[i] = (b[i] - sum_{j > i} R[i, j] * x[j]) / R[i, i]

    Elements below the diagonal of R are ignored.

    A zero diagonal element is not guarded by default: the division
    yields inf or nan in x, and numpy's floating-point warnings are
    suppressed. Pass check_singular=True to raise instead.

    Args:
        R: n x n upper triangular matrix
        b: Vector with n elements (row or column)
        check_singular: Raise SingularMatrixError on a zero or non-finite
                        diagonal element instead of dividing by it

    Returns:
        x as an n x 1 column vector

    Raises:
        ShapeMismatchError: If R is not square or b does not have R.rows
                            elements
        NotAVectorError: If b is not a vector
        SingularMatrixError: Only with check_singular=True
    """
    if R.rows != R.cols:
        raise ShapeMismatchError(
            f"Back substitution needs a square matrix, got {R.rows}x{R.cols}",
            operation='back_substitution',
            left_shape=R.shape,
            right_shape=b.shape,
        )
    check_vector(b, 'b')
    n = R.rows
    if b.size != n:
        raise ShapeMismatchError(
            f"Right-hand side has {b.size} elements, expected {n}",
            operation='back_substitution',
            left_shape=R.shape,
            right_shape=b.shape,
        )

    U = R.data.reshape(n, n)
    rhs = b.data

    if check_singular:
        diag = np.diag(U)
        usable = np.isfinite(diag) & (diag != 0)
        if not np.all(usable):
            bad = np.flatnonzero(~usable).tolist()
            raise SingularMatrixError(
                f"R has zero or non-finite diagonal elements at {bad}",
                matrix_name='R',
                rank=int(np.sum(usable)),
                expected_rank=n,
            )

    x = np.zeros(n, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n - 1, -1, -1):
            x[i] = (rhs[i] - U[i, i + 1:] @ x[i + 1:]) / U[i, i]

    return Matrix(n, 1, x)

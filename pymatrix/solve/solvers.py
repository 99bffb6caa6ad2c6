"""
Linear system and least-squares solvers.

Both entry points follow the same pipeline:
    1. (Q, R) = qr(A)
    2. x = back_substitution(R, Q'b)

solve() returns x alone. lstsq() also computes residuals, times each
stage and reports diagnostics.
"""

from typing import Any
import warnings

import numpy as np

from pymatrix.core.exceptions import ShapeMismatchError, SingularMatrixError
from pymatrix.core.result import Result
from pymatrix.core.timing import Timer
from pymatrix.core.tolerances import DEPENDENCY_TOL
from pymatrix.core.validation import check_vector
from pymatrix.decomposition import QRResult, qr
from pymatrix.matrix import Matrix, multiply, sub, transpose
from pymatrix.solve.solution import LeastSquaresParams, LeastSquaresSolution
from pymatrix.solve.triangular import back_substitution


BACKEND_NAME = 'python_gram_schmidt'


def _as_column(A: Matrix, b: Matrix) -> Matrix:
    """Validate b against A and return it as a column vector."""
    check_vector(b, 'b')
    if b.size != A.rows:
        raise ShapeMismatchError(
            f"Right-hand side has {b.size} elements but A has {A.rows} rows",
            operation='solve',
            left_shape=A.shape,
            right_shape=b.shape,
        )
    return b if b.cols == 1 else transpose(b)


def _check_full_rank(A: Matrix, qr_result: QRResult) -> None:
    if not qr_result.full_rank:
        raise SingularMatrixError(
            f"Columns of A are linearly dependent: rank={qr_result.rank}, "
            f"expected={A.cols}. A needs at least as many rows as columns "
            f"and independent columns.",
            matrix_name='A',
            rank=qr_result.rank,
            expected_rank=A.cols,
        )


def solve(A: Matrix, b: Matrix, *, tol: float = DEPENDENCY_TOL) -> Matrix:
    """
    Solve A x = b, exactly for square A or in the least-squares sense for
    tall A.

    Args:
        A: n x p coefficient matrix with n >= p and independent columns
        b: Vector with n elements (row or column)
        tol: Dependency tolerance handed to qr()

    Returns:
        x as a p x 1 column vector minimizing ||A x - b||

    Raises:
        ShapeMismatchError: If b does not have A.rows elements
        NotAVectorError: If b is not a vector
        SingularMatrixError: If the columns of A are linearly dependent,
                             which includes every A with fewer rows than
                             columns

    Example:
        >>> A = make(6, 2, [2, 1, 5, 1, 7, 1, 11, 1, 14, 1, 18, 1])
        >>> b = make_column_vector(6, [5, 5, 8, 7, 9, 7])
        >>> solve(A, b)  # approximately [[0.1718...], [5.2009...]]
    """
    b = _as_column(A, b)
    qr_result = qr(A, tol=tol)
    _check_full_rank(A, qr_result)
    return back_substitution(qr_result.R, multiply(transpose(qr_result.Q), b))


def lstsq(A: Matrix, b: Matrix, *, tol: float = DEPENDENCY_TOL) -> LeastSquaresSolution:
    """
    Least-squares solve with residuals, timing and diagnostics.

    Same contract as solve(); the solution is x of the returned
    LeastSquaresSolution.

    Warns:
        RuntimeWarning: If the solution contains inf or nan, which only
                        happens when A or b hold non-finite values
    """
    b = _as_column(A, b)

    timer = Timer()
    timer.start()

    with timer.section('qr_decomposition'):
        qr_result = qr(A, tol=tol)
    _check_full_rank(A, qr_result)

    with timer.section('back_substitution'):
        x = back_substitution(qr_result.R, multiply(transpose(qr_result.Q), b))

    with timer.section('residuals'):
        fitted_values = multiply(A, x)
        residuals = sub(b, fitted_values)
        rss = float(np.sum(residuals.data * residuals.data))

    timer.stop()

    found: list[str] = []
    if not np.all(np.isfinite(x.data)):
        message = "Solution contains non-finite values; check A and b for inf or nan"
        warnings.warn(message, RuntimeWarning, stacklevel=2)
        found.append(message)

    params = LeastSquaresParams(
        x=x,
        residuals=residuals,
        fitted_values=fitted_values,
        rss=rss,
        rank=qr_result.rank,
        df_residual=A.rows - qr_result.rank,
    )

    info: dict[str, Any] = {
        'method': 'qr',
        'orthogonalization': 'classical_gram_schmidt',
        'rank': qr_result.rank,
        'tol': tol,
        'exact': params.df_residual == 0,
    }

    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(found),
    )
    return LeastSquaresSolution(_result=result, _shape=A.shape)

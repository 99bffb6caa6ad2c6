"""
Triangular, linear and least-squares solvers.

Public API:
    back_substitution(R, b) -> Matrix
    solve(A, b) -> Matrix
    lstsq(A, b) -> LeastSquaresSolution

Example:
    >>> from pymatrix.solve import lstsq
    >>> result = lstsq(A, b)
    >>> print(result.summary())
"""

from pymatrix.solve.triangular import back_substitution
from pymatrix.solve.solution import LeastSquaresParams, LeastSquaresSolution
from pymatrix.solve.solvers import lstsq, solve

__all__ = [
    "back_substitution",
    "solve",
    "lstsq",
    "LeastSquaresParams",
    "LeastSquaresSolution",
]

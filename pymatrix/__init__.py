"""
PyMatrix: dense real matrices and QR least squares in Python.

Immutable Matrix values, shape-checked arithmetic, classical Gram-Schmidt,
QR decomposition and a back-substitution based least-squares solver.

Submodules:
    matrix: Matrix data model, arithmetic and conversion
    decomposition: Gram-Schmidt and QR
    solve: Back substitution, solve() and lstsq()
    core: Exceptions, validation, tolerances, timing

``pymatrix.solve`` is the solver subpackage, so the solve() function is
reached as ``pymatrix.solve.solve``. lstsq(), qr() and gram_schmidt() are
also available at the top level.
"""

__version__ = "0.1.0"

from pymatrix import matrix
from pymatrix import decomposition
from pymatrix import solve
from pymatrix.matrix import Matrix, make, make_column_vector, make_row_vector
from pymatrix.decomposition import gram_schmidt, qr
from pymatrix.solve import lstsq

__all__ = [
    "__version__",
    "matrix",
    "decomposition",
    "solve",
    "Matrix",
    "make",
    "make_row_vector",
    "make_column_vector",
    "gram_schmidt",
    "qr",
    "lstsq",
]

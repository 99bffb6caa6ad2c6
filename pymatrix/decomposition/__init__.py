"""
Orthogonal decompositions.

Public API:
    gram_schmidt(A, tol=...) -> Matrix
    qr(A, tol=...) -> QRResult
"""

from pymatrix.decomposition.gram_schmidt import gram_schmidt
from pymatrix.decomposition.qr import QRResult, qr

__all__ = [
    "gram_schmidt",
    "qr",
    "QRResult",
]

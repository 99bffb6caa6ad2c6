"""
QR decomposition built on Gram-Schmidt.

The columns of A are orthonormalized by transposing, running the
row-oriented gram_schmidt(), and transposing back. R is then Q'A, which
is upper triangular because each column of A only has components along
the basis vectors built from it and the columns before it.
"""

from dataclasses import dataclass
from typing import Iterator

from pymatrix.core.tolerances import DEPENDENCY_TOL
from pymatrix.decomposition.gram_schmidt import gram_schmidt
from pymatrix.matrix import Matrix, multiply, transpose


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Unpacks as a pair: ``Q, R = qr(A)``.

    Attributes:
        Q: n x k matrix with orthonormal columns
        R: k x p upper triangular matrix with Q @ R == A up to rounding
        rank: k, the number of linearly independent leading columns of A
              found before the first dependent one
    """
    Q: Matrix
    R: Matrix
    rank: int

    def __iter__(self) -> Iterator[Matrix]:
        yield self.Q
        yield self.R

    @property
    def full_rank(self) -> bool:
        """True when every column of A contributed a basis vector."""
        return self.rank == self.R.cols


def qr(A: Matrix, *, tol: float = DEPENDENCY_TOL) -> QRResult:
    """
    QR decomposition A = QR.

    Args:
        A: Matrix to decompose (n x p)
        tol: Dependency tolerance handed to gram_schmidt()

    Returns:
        QRResult. When the columns of A are linearly dependent Q has
        fewer than p columns and R is rectangular; this is a valid
        outcome, not an error. Check QRResult.full_rank.
    """
    Q = transpose(gram_schmidt(transpose(A), tol=tol))
    R = multiply(transpose(Q), A)
    return QRResult(Q=Q, R=R, rank=Q.cols)

"""
Classical Gram-Schmidt orthogonalization.

The rows of the input are the vectors. Each row is made orthogonal to
the rows already accepted and normalized; the procedure stops at the
first row that turns out to be linearly dependent on its predecessors.

The projection coefficient for row i is dot(q_j, a_i), taken against the
original row a_i rather than the partially orthogonalized vector. This is
classical Gram-Schmidt; modified Gram-Schmidt is more stable but gives
different rounding, and callers rely on the classical results.
"""

from pymatrix.core.tolerances import DEPENDENCY_TOL
from pymatrix.core.validation import check_tolerance
from pymatrix.matrix import Matrix, RowBuilder, clone, dot, norm, row, smul, sub


def gram_schmidt(A: Matrix, *, tol: float = DEPENDENCY_TOL) -> Matrix:
    """
    Orthonormal basis of the span of A's rows.

    Algorithm:
        For each row a_i of A, in order:
            q = a_i
            for each accepted row q_j:
                q = q - dot(q_j, a_i) * q_j
                if norm(q) <= tol: stop, a_i is dependent
            accept q / norm(q)

    Args:
        A: Matrix whose rows are the vectors to orthogonalize
        tol: Residual norm at or below which a row counts as dependent

    Returns:
        Q (Q.cols == A.cols) with Q.rows <= A.rows and mutually
        orthonormal rows.
        Q.rows == A.rows means the rows of A are linearly independent.
        Fewer rows means row Q.rows of A is the first dependent one;
        rows after it are never examined.

    Raises:
        ValidationError: If tol is negative or not finite
    """
    tol = check_tolerance(tol)
    Q = RowBuilder(cols=A.cols)
    accepted: list[Matrix] = []

    for i in range(A.rows):
        ai = row(i, A)
        q = clone(ai)
        for qj in accepted:
            q = sub(q, smul(dot(qj, ai), qj))
            if norm(q) <= tol:
                return Q.build()
        q_norm = norm(q)
        # A zero row has nothing to normalize and is dependent on anything
        if q_norm <= tol:
            return Q.build()
        q = smul(1 / q_norm, q)
        accepted.append(q)
        Q.append(q)

    return Q.build()

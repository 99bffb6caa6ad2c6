"""
Tolerance constants for numerical decisions and validation.

DEPENDENCY_TOL is the residual norm at or below which Gram-Schmidt treats
a vector as linearly dependent on the ones already accepted. It is the
default for the ``tol`` keyword of gram_schmidt(), qr(), solve() and
lstsq(); pass a different value per call to tune it.

The ToleranceTier objects describe how closely computed results are
expected to match exact arithmetic. Used by the test suite.
"""

from dataclasses import dataclass


# Residual norm treated as "linearly dependent" by Gram-Schmidt
DEPENDENCY_TOL: float = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Results computable without cancellation (sums, products of small ints)
EXACT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='exact',
    description='double precision, no accumulated rounding expected',
)

# Q @ R against the original matrix
RECONSTRUCTION = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='reconstruction',
    description='QR reconstruction, elementwise absolute error',
)

# Pairwise dot products and norms of an orthonormal basis
ORTHONORMAL = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='orthonormal',
    description='orthonormality of Gram-Schmidt output',
)

"""
Generic result container for PyMatrix solvers.

The Result class is the envelope solvers return their payload in. It
carries timing and non-fatal diagnostics next to the numbers so callers
do not have to recompute or re-derive them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, tolerance)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (solution vector, residuals, ...)
        info: Structured metadata (method, rank, tolerance)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LeastSquaresParams(...),
        ...     info={'method': 'qr', 'rank': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='python_gram_schmidt'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

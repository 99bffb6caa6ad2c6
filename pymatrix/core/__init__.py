"""
Core infrastructure for PyMatrix.

Shared abstractions used by the matrix, decomposition and solve packages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Dependency tolerance and comparison tiers
    result: Generic Result[P] envelope
    timing: Section timer
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeError,
    ShapeMismatchError,
    NotAVectorError,
    LengthMismatchError,
    RowLengthMismatchError,
    MatrixIndexError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "ShapeMismatchError",
    "NotAVectorError",
    "LengthMismatchError",
    "RowLengthMismatchError",
    "MatrixIndexError",
    "NumericalError",
    "SingularMatrixError",
]

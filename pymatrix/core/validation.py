"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    MatrixIndexError,
    NotAVectorError,
    ValidationError,
)

if TYPE_CHECKING:
    from pymatrix.matrix._matrix import Matrix


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_data(data: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate element data and convert it to a flat float64 array.

    Accepts any array-like of real numbers. Multi-dimensional input is
    flattened in row-major order. The returned array is always a fresh
    copy, never a view of the caller's buffer.

    Args:
        data: Input to validate
        name: Parameter name for error messages

    Returns:
        1-D numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to real numbers
    """
    try:
        result = np.array(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    # Python ints beyond int64 and Real types such as Fraction land
    # in object dtype; they are accepted when every element is a real number
    if result.dtype == object:
        if not all(_is_real(value) for value in result.flat):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
        try:
            result = result.astype(np.float64)
        except (OverflowError, ValueError, TypeError) as e:
            raise ValidationError(f"{name}: cannot convert to float64: {e}") from e

    # Empty input has no type information; anything else must be real numeric
    if result.size > 0 and (
        not np.issubdtype(result.dtype, np.number)
        or np.issubdtype(result.dtype, np.complexfloating)
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64).reshape(-1)


def check_tolerance(tol: Any, name: str = 'tol') -> float:
    """
    Validate a numerical tolerance.

    Raises:
        ValidationError: If tol is not a finite, non-negative real number
    """
    if isinstance(tol, bool) or not isinstance(tol, (int, float, np.integer, np.floating)):
        raise ValidationError(f"{name}: expected a real number, got {type(tol).__name__}")
    if not math.isfinite(tol) or tol < 0:
        raise ValidationError(f"{name}: must be finite and non-negative, got {tol}")
    return float(tol)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify 0 <= index < bound.

    Args:
        index: Attempted index
        bound: Exclusive upper bound
        name: Index name for error messages

    Raises:
        MatrixIndexError: If the index is not an integer or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise MatrixIndexError(
            f'Index "{name}" must be an integer, got {type(index).__name__}',
            name=name, index=index, bound=bound,
        )
    if index < 0 or index >= bound:
        if bound == 0:
            valid = "no valid values (dimension is empty)"
        else:
            valid = f"valid range is 0 to {bound - 1}"
        raise MatrixIndexError(
            f'Index "{name}" out of range: got {index}, {valid}',
            name=name, index=int(index), bound=bound,
        )
    return int(index)


def check_vector(A: 'Matrix', name: str) -> None:
    """
    Verify a matrix is a vector (one row or one column).

    Raises:
        NotAVectorError: If A has more than one row and more than one column
    """
    if A.rows != 1 and A.cols != 1:
        raise NotAVectorError(
            f"{name}: only vectors can be used here, got a {A.rows}x{A.cols} matrix",
            name=name,
            shape=A.shape,
        )


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))

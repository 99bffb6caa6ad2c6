"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index violations are caller bugs and
derive from ValidationError; failures that only show up while computing
derive from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

Shape = tuple[int, int]


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related contract violation.
    """
    pass


class ShapeError(DimensionError):
    """
    Supplied data does not fill the requested shape.

    Raised by the Matrix constructor when len(data) != rows * cols.

    Attributes:
        expected: Number of elements the shape requires
        actual: Number of elements supplied
    """

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: Shape | None = None,
        right_shape: Shape | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotAVectorError(DimensionError):
    """
    A vector (rows == 1 or cols == 1) was required.

    Attributes:
        name: Parameter name of the offending argument
        shape: (rows, cols) actually received
    """

    def __init__(self, message: str, name: str | None = None, shape: Shape | None = None):
        super().__init__(message)
        self.name = name
        self.shape = shape


class LengthMismatchError(DimensionError):
    """
    Two vectors have a different number of elements.

    Attributes:
        left_length: Element count of the first vector
        right_length: Element count of the second vector
    """

    def __init__(self, message: str, left_length: int, right_length: int):
        super().__init__(message)
        self.left_length = left_length
        self.right_length = right_length


class RowLengthMismatchError(DimensionError):
    """
    Nested row input is ragged.

    Attributes:
        row_index: Index of the first row whose length differs
        expected: Length of the first row
        actual: Length of the offending row
    """

    def __init__(self, message: str, row_index: int, expected: int, actual: int):
        super().__init__(message)
        self.row_index = row_index
        self.expected = expected
        self.actual = actual


class MatrixIndexError(ValidationError, IndexError):
    """
    An index fell outside its valid range.

    Also an IndexError, so generic sequence-handling code keeps working.

    Attributes:
        name: Which index was out of range ('i', 'j', ...)
        index: The attempted value
        bound: Exclusive upper bound; valid values are 0 .. bound - 1
    """

    def __init__(self, message: str, name: str, index: int, bound: int):
        super().__init__(message)
        self.name = name
        self.index = index
        self.bound = bound


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or its columns are linearly dependent.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank found by orthogonalization, if computed
        expected_rank: Rank required for a unique solution
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank

"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every concrete error raised by a matrix operation
is a ValidationError: the operation was handed arguments that violate its
preconditions, and nothing was modified before the error was raised.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidShapeError(ValidationError):
    """
    Matrix dimensions are non-positive or the grid is malformed.

    Raised at construction and factory time: empty grids, empty rows,
    ragged rows, or a requested dimension that is zero or negative.

    Attributes:
        shape: The offending (rows, columns) pair, if known
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class OutOfRangeError(ValidationError, IndexError):
    """
    An index argument lies outside the matrix bounds.

    Attributes:
        index: The offending index (int, or (row, column) pair)
        bound: The matrix shape the index was checked against
        axis: 'row', 'column', or None when both were checked together
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        bound: tuple[int, int] | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class InvalidRangeError(ValidationError):
    """
    A (low, high) range argument does not satisfy low < high.

    Attributes:
        low: Requested lower bound
        high: Requested upper bound
    """

    def __init__(self, message: str, low: float | None = None, high: float | None = None):
        super().__init__(message)
        self.low = low
        self.high = high


class DimensionError(ValidationError):
    """
    Matrix dimensions are incompatible with the requested operation.

    Base class for shape-compatibility failures between operands.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Binary operation between incompatibly-shaped matrices.

    Raised by add/subtract (shapes must be equal) and by matrix
    multiplication (inner dimensions must agree).

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Square-only operation invoked on a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape

"""
Core infrastructure for PyMatrix.

This module provides the shared abstractions used by the matrix variants
and factories.

Key components:
    protocols: MatrixLike protocol
    exceptions: Exception hierarchy
    validation: Precondition checks
    tolerances: Element comparison tolerance
"""

from pymatrix.core.protocols import MatrixLike
from pymatrix.core.tolerances import EPSILON, DEFAULT_TOLERANCE, ToleranceTier
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidShapeError,
    OutOfRangeError,
    InvalidRangeError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    # Tolerances
    "EPSILON",
    "DEFAULT_TOLERANCE",
    "ToleranceTier",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidShapeError",
    "OutOfRangeError",
    "InvalidRangeError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
]

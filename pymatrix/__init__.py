"""
PyMatrix: dense real-valued matrices for Python.

A correctness-first reference implementation of dense matrix arithmetic,
reductions and structural predicates, in immutable and mutable flavours.

Submodules:
    core: exceptions, validation, tolerances, protocols
    matrix: ImmutableMatrix, MutableMatrix, factories, formatting
"""

__version__ = "0.1.0"

from pymatrix import core
from pymatrix import matrix
from pymatrix.core.tolerances import EPSILON
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
from pymatrix.matrix import (
    ImmutableMatrix,
    MutableMatrix,
    zeros,
    ones,
    identity,
    random,
    diagonal,
    row_vector,
    column_vector,
)

__all__ = [
    "__version__",
    "core",
    "matrix",
    "EPSILON",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidShapeError",
    "OutOfRangeError",
    "InvalidRangeError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    # Matrices
    "ImmutableMatrix",
    "MutableMatrix",
    "zeros",
    "ones",
    "identity",
    "random",
    "diagonal",
    "row_vector",
    "column_vector",
]

"""
Dense matrix module.

Public API:
    ImmutableMatrix   - read-only matrix, copied on construction
    MutableMatrix     - matrix with in-place mutators (set, fill, swap_rows, ...)
    zeros, ones, identity, random, diagonal, row_vector, column_vector
                      - factories returning ImmutableMatrix
    format_matrix     - human-readable rendering used by str()
"""

from pymatrix.matrix.base import MatrixBase
from pymatrix.matrix.immutable import ImmutableMatrix
from pymatrix.matrix.mutable import MutableMatrix
from pymatrix.matrix.factories import (
    zeros,
    ones,
    identity,
    random,
    diagonal,
    row_vector,
    column_vector,
)
from pymatrix.matrix.formatting import format_matrix

__all__ = [
    "MatrixBase",
    "ImmutableMatrix",
    "MutableMatrix",
    "zeros",
    "ones",
    "identity",
    "random",
    "diagonal",
    "row_vector",
    "column_vector",
    "format_matrix",
]

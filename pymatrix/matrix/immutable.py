"""
ImmutableMatrix: a matrix whose values never change after construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pymatrix.matrix.base import MatrixBase

if TYPE_CHECKING:
    from pymatrix.matrix.mutable import MutableMatrix


class ImmutableMatrix(MatrixBase):
    """
    Immutable dense matrix.

    The input grid is copied on construction and the private copy is
    flagged read-only. No mutating methods are exposed; every operation
    that conceptually changes the matrix returns a new ImmutableMatrix.

    Construction:
        ImmutableMatrix([[1, 2], [3, 4]])
        ImmutableMatrix.of(np.eye(3))
    """

    _writeable = False

    __slots__ = ()

    def to_mutable(self) -> MutableMatrix:
        """Independent MutableMatrix holding a copy of these values."""
        from pymatrix.matrix.mutable import MutableMatrix
        return MutableMatrix._from_owned(self._data.copy())

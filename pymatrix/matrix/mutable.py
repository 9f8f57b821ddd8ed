"""
MutableMatrix: a matrix whose values can be changed in place.

Shape never changes after construction. Mutators validate all of their
arguments before writing anything, and those that return a value return
the matrix itself so calls can be chained::

    m = MutableMatrix.of(grid).fill(0.0).add_in_place(other).scale_row(0, 2.0)
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from pymatrix.core.validation import (
    check_real,
    require_column_index,
    require_index,
    require_row_index,
    require_same_dimensions,
)
from pymatrix.matrix import _kernels
from pymatrix.matrix.base import MatrixBase, require_matrix
from pymatrix.matrix.immutable import ImmutableMatrix


class MutableMatrix(MatrixBase):
    """
    Mutable dense matrix.

    The input grid is copied on construction, so the caller's array and
    the matrix never alias. Arithmetic inherited from MatrixBase is still
    pure and returns new MutableMatrix instances; only the methods defined
    here modify self.

    Not safe for concurrent mutation; callers sharing an instance across
    threads must synchronise externally.
    """

    _writeable = True

    __slots__ = ()

    def to_immutable(self) -> ImmutableMatrix:
        """Independent ImmutableMatrix holding a copy of the current values."""
        return ImmutableMatrix._from_owned(self._data.copy())

    def set(self, row: int, column: int, value: float) -> None:
        """
        Overwrite the element at (row, column).

        Raises:
            OutOfRangeError: If either index is out of bounds
            ValidationError: If value is not a real number
        """
        require_index(row, column, self)
        self._data[row, column] = check_real(value, "value")

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = key
        self.set(row, column, value)

    def add_in_place(self, other: MatrixBase) -> MutableMatrix:
        """
        self += other, element-wise.

        Raises:
            DimensionMismatchError: If shapes differ
            ValidationError: If other is not a matrix
        """
        require_matrix(other)
        require_same_dimensions(self, other)
        self._data += other._data
        return self

    def subtract_in_place(self, other: MatrixBase) -> MutableMatrix:
        """
        self -= other, element-wise.

        Raises:
            DimensionMismatchError: If shapes differ
            ValidationError: If other is not a matrix
        """
        require_matrix(other)
        require_same_dimensions(self, other)
        self._data -= other._data
        return self

    def multiply_in_place(self, scalar: float) -> MutableMatrix:
        """Scale every element by scalar."""
        self._data *= check_real(scalar, "scalar")
        return self

    def fill(self, value: float) -> MutableMatrix:
        """Overwrite every element with value."""
        self._data.fill(check_real(value, "value"))
        return self

    def shuffle(self, rng: np.random.Generator | None = None) -> MutableMatrix:
        """
        Randomly permute the elements in place.

        Every cell, in row-major order, is swapped with a cell whose row
        and column are drawn independently and uniformly. The multiset of
        values is preserved, but the resulting permutation is not uniformly
        distributed.

        Args:
            rng: Generator to draw positions from. A fresh unseeded
                generator is used when omitted.
        """
        if rng is None:
            rng = np.random.default_rng()
        _kernels.shuffle_cells(self._data, rng)
        return self

    def swap_rows(self, first: int, second: int) -> MutableMatrix:
        """
        Exchange two rows. No-op when first == second.

        Raises:
            OutOfRangeError: If either index is out of bounds
        """
        require_row_index(first, self)
        require_row_index(second, self)
        _kernels.swap_rows(self._data, int(first), int(second))
        return self

    def swap_columns(self, first: int, second: int) -> MutableMatrix:
        """
        Exchange two columns. No-op when first == second.

        Raises:
            OutOfRangeError: If either index is out of bounds
        """
        require_column_index(first, self)
        require_column_index(second, self)
        _kernels.swap_columns(self._data, int(first), int(second))
        return self

    def scale_row(self, row: int, factor: float) -> MutableMatrix:
        """Multiply every element of one row by factor."""
        require_row_index(row, self)
        self._data[row, :] *= check_real(factor, "factor")
        return self

    def scale_column(self, column: int, factor: float) -> MutableMatrix:
        """Multiply every element of one column by factor."""
        require_column_index(column, self)
        self._data[:, column] *= check_real(factor, "factor")
        return self

    def __iadd__(self, other: Any):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.add_in_place(other)

    def __isub__(self, other: Any):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.subtract_in_place(other)

    def __imul__(self, other: Any):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply_in_place(other)

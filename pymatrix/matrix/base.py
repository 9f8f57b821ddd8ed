"""
Read-only matrix contract shared by ImmutableMatrix and MutableMatrix.

MatrixBase owns a private float64 grid and implements every operation
that does not modify it: element access, arithmetic producing new
matrices, tolerant comparison, reductions, norms and structural
predicates. The numeric work is delegated to the kernels in
pymatrix.matrix._kernels; this class is responsible for running the
precondition checks first and for never letting its grid escape.

Ownership rules:
    - Construction copies the caller's data (see check_grid)
    - Accessors that return arrays (to_array, row, column) return copies
    - Arithmetic returns a new instance of the left operand's class
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_grid,
    require_column_index,
    require_index,
    require_multipliable,
    require_row_index,
    require_same_dimensions,
    require_square,
)
from pymatrix.matrix import _kernels
from pymatrix.matrix.formatting import format_matrix


def require_matrix(other: Any, name: str = "other") -> None:
    """
    Verify other is a matrix (either variant).

    Raises:
        ValidationError: If other is not a MatrixBase instance
    """
    if not isinstance(other, MatrixBase):
        raise ValidationError(
            f"{name}: expected a matrix, got {type(other).__name__}"
        )


class MatrixBase:
    """
    Dense real matrix of shape (row_count, column_count), both >= 1.

    Not instantiated directly; use ImmutableMatrix or MutableMatrix.
    """

    # Whether the backing grid may be written after construction
    _writeable: bool = False

    __slots__ = ('_data',)

    # Tolerant equality is not transitive, so matrices cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: ArrayLike):
        grid = check_grid(data, "data")
        grid.flags.writeable = self._writeable
        self._data = grid

    @classmethod
    def of(cls, data: ArrayLike):
        """Build a matrix from a nested sequence or 2D array (copied)."""
        return cls(data)

    @classmethod
    def _from_owned(cls, grid: NDArray[np.float64]):
        """Wrap a freshly computed grid without copying or re-validating it."""
        instance = cls.__new__(cls)
        grid.flags.writeable = cls._writeable
        instance._data = grid
        return instance

    def _new(self, grid: NDArray[np.float64]):
        return type(self)._from_owned(grid)

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)."""
        return (self._data.shape[0], self._data.shape[1])

    def get(self, row: int, column: int) -> float:
        """
        Element at (row, column), zero-based.

        Raises:
            OutOfRangeError: If either index is out of bounds
        """
        require_index(row, column, self)
        return float(self._data[row, column])

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        return self.get(row, column)

    def row(self, row: int) -> NDArray[np.float64]:
        """Copy of one row as a 1D array."""
        require_row_index(row, self)
        return self._data[row, :].copy()

    def column(self, column: int) -> NDArray[np.float64]:
        """Copy of one column as a 1D array."""
        require_column_index(column, self)
        return self._data[:, column].copy()

    def to_array(self) -> NDArray[np.float64]:
        """Writeable copy of the grid; changes to it do not affect the matrix."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Grid as nested Python lists."""
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None) -> NDArray:
        # numpy conversion always yields a copy, never the backing grid
        return self._data.astype(np.float64 if dtype is None else dtype, copy=True)

    def copy(self):
        """Independent matrix of the same class holding the same values."""
        return self._new(self._data.copy())

    # ------------------------------------------------------------------
    # Arithmetic (always returns a new matrix)
    # ------------------------------------------------------------------

    def add(self, other: MatrixBase):
        """
        Element-wise sum.

        Raises:
            DimensionMismatchError: If shapes differ
            ValidationError: If other is not a matrix
        """
        require_matrix(other)
        require_same_dimensions(self, other)
        return self._new(self._data + other._data)

    def subtract(self, other: MatrixBase):
        """
        Element-wise difference self - other.

        Raises:
            DimensionMismatchError: If shapes differ
            ValidationError: If other is not a matrix
        """
        require_matrix(other)
        require_same_dimensions(self, other)
        return self._new(self._data - other._data)

    def multiply(self, other: MatrixBase | float):
        """
        Matrix product (other is a matrix) or scalar product (other is real).

        For a matrix operand the result has shape
        (self.row_count, other.column_count) with
        result[i, j] = sum_k self[i, k] * other[k, j].

        Raises:
            DimensionMismatchError: If self.column_count != other.row_count
            ValidationError: If other is neither a matrix nor a real number
        """
        if isinstance(other, MatrixBase):
            require_multipliable(self, other)
            return self._new(self._data @ other._data)
        if isinstance(other, numbers.Real):
            return self._new(self._data * float(other))
        raise ValidationError(
            f"other: expected a matrix or a real scalar, got {type(other).__name__}"
        )

    def __add__(self, other: Any):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Any):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: Any):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self):
        return self._new(-self._data)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: MatrixBase) -> bool:
        """
        Tolerant equality.

        False if other is not a matrix or the shapes differ; otherwise True
        iff every pair of corresponding elements differs by at most EPSILON
        (1e-9).
        """
        if not isinstance(other, MatrixBase):
            return False
        return _kernels.all_close(self._data, other._data)

    def has_same_dimensions(self, other: MatrixBase) -> bool:
        """
        Shape comparison only.

        Raises:
            ValidationError: If other is not a matrix
        """
        require_matrix(other)
        return self.shape == other.shape

    def __eq__(self, other: Any):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.equals(other)

    # ------------------------------------------------------------------
    # Structural derivations
    # ------------------------------------------------------------------

    def transpose(self):
        """New (column_count x row_count) matrix with result[j, i] = self[i, j]."""
        return self._new(self._data.T.copy())

    def trace(self) -> float:
        """
        Sum of the main diagonal.

        Raises:
            NotSquareError: If the matrix is not square
        """
        require_square(self)
        return _kernels.trace(self._data)

    def sum(self) -> float:
        return _kernels.total(self._data)

    def average(self) -> float:
        return _kernels.average(self._data)

    def maximum(self) -> float:
        return _kernels.maximum(self._data)

    def minimum(self) -> float:
        return _kernels.minimum(self._data)

    # Row reductions. A row holds column_count elements, which is the
    # divisor used by row_average.

    def row_sum(self, row: int) -> float:
        require_row_index(row, self)
        return _kernels.total(self._data[row, :])

    def row_average(self, row: int) -> float:
        require_row_index(row, self)
        return _kernels.average(self._data[row, :])

    def row_maximum(self, row: int) -> float:
        require_row_index(row, self)
        return _kernels.maximum(self._data[row, :])

    def row_minimum(self, row: int) -> float:
        require_row_index(row, self)
        return _kernels.minimum(self._data[row, :])

    def column_sum(self, column: int) -> float:
        require_column_index(column, self)
        return _kernels.total(self._data[:, column])

    def column_average(self, column: int) -> float:
        require_column_index(column, self)
        return _kernels.average(self._data[:, column])

    def column_maximum(self, column: int) -> float:
        require_column_index(column, self)
        return _kernels.maximum(self._data[:, column])

    def column_minimum(self, column: int) -> float:
        require_column_index(column, self)
        return _kernels.minimum(self._data[:, column])

    def l1_norm(self) -> float:
        """Maximum absolute column sum."""
        return _kernels.l1_norm(self._data)

    def infinity_norm(self) -> float:
        """Maximum absolute row sum."""
        return _kernels.infinity_norm(self._data)

    # ------------------------------------------------------------------
    # Predicates (tolerant at EPSILON)
    # ------------------------------------------------------------------

    def is_square(self) -> bool:
        return _kernels.is_square(self._data)

    def is_zero(self) -> bool:
        return _kernels.all_zero(self._data)

    def is_identity(self) -> bool:
        return _kernels.is_identity(self._data)

    def is_diagonal(self) -> bool:
        """Square, with every off-diagonal element ~ 0. Non-square is False."""
        return _kernels.is_diagonal(self._data)

    def is_scalar(self) -> bool:
        """Diagonal, with all diagonal elements ~ self[0, 0]."""
        return _kernels.is_scalar(self._data)

    def is_symmetric(self) -> bool:
        return _kernels.is_symmetric(self._data)

    def is_vector(self) -> bool:
        return self.is_row_vector() or self.is_column_vector()

    def is_row_vector(self) -> bool:
        return self.row_count == 1

    def is_column_vector(self) -> bool:
        return self.column_count == 1

    def is_triangular(self) -> bool:
        return self.is_upper_triangular() or self.is_lower_triangular()

    def is_upper_triangular(self) -> bool:
        """Square, with every element strictly below the diagonal ~ 0."""
        return _kernels.is_upper_triangular(self._data)

    def is_lower_triangular(self) -> bool:
        """Square, with every element strictly above the diagonal ~ 0."""
        return _kernels.is_lower_triangular(self._data)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

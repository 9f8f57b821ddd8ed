"""
Precondition checks for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every matrix operation with a
precondition calls the relevant check before touching any data, so a
failing check never leaves a matrix partially modified.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
"""

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    InvalidRangeError,
    InvalidShapeError,
    NotSquareError,
    OutOfRangeError,
    ValidationError,
)
from pymatrix.core.protocols import MatrixLike


def check_grid(data: ArrayLike, name: str = "data") -> NDArray[np.float64]:
    """
    Validate a rectangular grid and copy it into fresh float64 storage.

    The returned array never shares memory with ``data``, so later changes
    to the caller's array cannot reach the matrix that owns the copy.

    Args:
        data: Nested sequence or 2D array of real numbers
        name: Parameter name for error messages

    Returns:
        New C-contiguous float64 array of shape (rows, columns)

    Raises:
        InvalidShapeError: If the grid is empty, has an empty first row,
            has rows of differing lengths, or is not 2D
        ValidationError: If the values are not real numbers
    """
    try:
        array = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise InvalidShapeError(
            f"{name}: cannot convert to a rectangular grid: {e}"
        ) from e

    # Object dtype holds values numpy has no native type for (ints past
    # int64, Fraction, Decimal); accept them only if every cell is real.
    if array.dtype == object:
        if not all(isinstance(v, numbers.Real) for v in array.flat):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating non-numeric data"
            )
        try:
            array = array.astype(np.float64)
        except (OverflowError, ValueError, TypeError) as e:
            raise ValidationError(
                f"{name}: values cannot be represented as float64: {e}"
            ) from e

    if array.ndim != 2:
        if array.size == 0:
            raise InvalidShapeError(
                f"{name}: matrix dimensions must be positive (at least 1x1), "
                f"got shape {array.shape}",
                shape=array.shape,
            )
        raise InvalidShapeError(
            f"{name}: expected 2D grid, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
        )

    rows, columns = array.shape
    if rows == 0 or columns == 0:
        raise InvalidShapeError(
            f"{name}: matrix dimensions must be positive (at least 1x1), "
            f"got {rows}x{columns}",
            shape=(rows, columns),
        )

    if not np.issubdtype(array.dtype, np.number) or np.iscomplexobj(array):
        raise ValidationError(
            f"{name}: non-real dtype {array.dtype}, expected real numbers"
        )

    grid = np.array(array, dtype=np.float64, order='C', copy=True)

    if not np.all(np.isfinite(grid)):
        n_nan = int(np.sum(np.isnan(grid)))
        n_inf = int(np.sum(np.isinf(grid)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf); "
            f"tolerant comparisons involving them are always False",
            RuntimeWarning,
            stacklevel=3,
        )

    return grid


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (bool excluded) and return it as int.

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_real(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as float.

    Raises:
        ValidationError: If value is not a real number
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def require_index(row: int, column: int, matrix: MatrixLike) -> None:
    """
    Verify (row, column) addresses an element of matrix.

    Raises:
        OutOfRangeError: If either index is negative or past the end
    """
    row = check_integer(row, "row")
    column = check_integer(column, "column")
    shape = (matrix.row_count, matrix.column_count)

    if row < 0 or column < 0:
        raise OutOfRangeError(
            f"Negative index: ({row}, {column})",
            index=(row, column),
            bound=shape,
        )
    if row >= shape[0] or column >= shape[1]:
        raise OutOfRangeError(
            f"Index ({row}, {column}) out of bounds for matrix {shape[0]}x{shape[1]}",
            index=(row, column),
            bound=shape,
        )


def require_row_index(row: int, matrix: MatrixLike) -> None:
    """
    Verify row is a valid row index of matrix.

    Raises:
        OutOfRangeError: If row < 0 or row >= row_count
    """
    row = check_integer(row, "row")
    if row < 0 or row >= matrix.row_count:
        raise OutOfRangeError(
            f"Row index {row} out of bounds for matrix "
            f"{matrix.row_count}x{matrix.column_count}",
            index=row,
            bound=(matrix.row_count, matrix.column_count),
            axis='row',
        )


def require_column_index(column: int, matrix: MatrixLike) -> None:
    """
    Verify column is a valid column index of matrix.

    Raises:
        OutOfRangeError: If column < 0 or column >= column_count
    """
    column = check_integer(column, "column")
    if column < 0 or column >= matrix.column_count:
        raise OutOfRangeError(
            f"Column index {column} out of bounds for matrix "
            f"{matrix.row_count}x{matrix.column_count}",
            index=column,
            bound=(matrix.row_count, matrix.column_count),
            axis='column',
        )


def require_positive_dimensions(rows: int, columns: int) -> None:
    """
    Verify both requested dimensions are strictly positive.

    Raises:
        ValidationError: If either dimension is not an integer
        InvalidShapeError: If either dimension is <= 0
    """
    rows = check_integer(rows, "rows")
    columns = check_integer(columns, "columns")
    if rows <= 0 or columns <= 0:
        raise InvalidShapeError(
            f"Matrix dimensions must be strictly positive. Provided: {rows}x{columns}",
            shape=(rows, columns),
        )


def require_same_dimensions(a: MatrixLike, b: MatrixLike) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionMismatchError: If row or column counts differ
    """
    left = (a.row_count, a.column_count)
    right = (b.row_count, b.column_count)
    if left != right:
        raise DimensionMismatchError(
            f"Matrices must have the same dimensions for this operation: "
            f"{left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            left_shape=left,
            right_shape=right,
        )


def require_multipliable(a: MatrixLike, b: MatrixLike) -> None:
    """
    Verify a's column count equals b's row count.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    left = (a.row_count, a.column_count)
    right = (b.row_count, b.column_count)
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"Cannot multiply {left[0]}x{left[1]} by {right[0]}x{right[1]}",
            left_shape=left,
            right_shape=right,
        )


def require_square(matrix: MatrixLike) -> None:
    """
    Verify matrix is square.

    Raises:
        NotSquareError: If row_count != column_count
    """
    shape = (matrix.row_count, matrix.column_count)
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"Operation requires a square matrix, got {shape[0]}x{shape[1]}",
            shape=shape,
        )


def require_range(low: float, high: float) -> None:
    """
    Verify low < high, with finite bounds and a finite width.

    Raises:
        InvalidRangeError: If low >= high (or either bound is NaN), or if
            low, high or high - low is infinite
    """
    if not low < high:
        raise InvalidRangeError(
            f"Range lower bound must be strictly less than upper bound, "
            f"got low={low}, high={high}",
            low=low,
            high=high,
        )
    if not np.all(np.isfinite([low, high, high - low])):
        raise InvalidRangeError(
            f"Range bounds and width must be finite, "
            f"got low={low}, high={high} (width {high - low})",
            low=low,
            high=high,
        )

"""
Constructors for frequently used matrices.

Every factory validates its arguments first and returns an ImmutableMatrix;
call .to_mutable() on the result when in-place editing is needed.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import InvalidShapeError
from pymatrix.core.validation import (
    check_real,
    require_positive_dimensions,
    require_range,
)
from pymatrix.matrix.immutable import ImmutableMatrix


def _require_values(values: tuple[float, ...], name: str) -> list[float]:
    if len(values) == 0:
        raise InvalidShapeError(
            f"{name}: at least one value is required", shape=(0,)
        )
    return [check_real(v, name) for v in values]


def zeros(rows: int, columns: int) -> ImmutableMatrix:
    """rows x columns matrix of zeros."""
    require_positive_dimensions(rows, columns)
    return ImmutableMatrix._from_owned(np.zeros((rows, columns), dtype=np.float64))


def ones(rows: int, columns: int) -> ImmutableMatrix:
    """rows x columns matrix of ones."""
    require_positive_dimensions(rows, columns)
    return ImmutableMatrix._from_owned(np.ones((rows, columns), dtype=np.float64))


def identity(size: int) -> ImmutableMatrix:
    """size x size identity matrix."""
    require_positive_dimensions(size, size)
    return ImmutableMatrix._from_owned(np.eye(size, dtype=np.float64))


def random(
    rows: int,
    columns: int,
    low: float = 0.0,
    high: float = 1.0,
    *,
    rng: np.random.Generator | None = None,
) -> ImmutableMatrix:
    """
    rows x columns matrix of values drawn uniformly from [low, high).

    Args:
        rows: Number of rows (> 0)
        columns: Number of columns (> 0)
        low: Inclusive lower bound
        high: Exclusive upper bound; must exceed low
        rng: Generator to sample from. A fresh unseeded generator is
            used when omitted.

    Raises:
        InvalidShapeError: If either dimension is not positive
        InvalidRangeError: If low >= high, or a bound or high - low is not
            finite
    """
    require_positive_dimensions(rows, columns)
    require_range(check_real(low, "low"), check_real(high, "high"))
    if rng is None:
        rng = np.random.default_rng()
    return ImmutableMatrix._from_owned(rng.uniform(low, high, size=(rows, columns)))


def diagonal(*values: float) -> ImmutableMatrix:
    """n x n matrix with values on the main diagonal and zeros elsewhere."""
    diag = _require_values(values, "values")
    return ImmutableMatrix._from_owned(np.diag(np.asarray(diag, dtype=np.float64)))


def row_vector(*values: float) -> ImmutableMatrix:
    """1 x n matrix holding values."""
    row = _require_values(values, "values")
    return ImmutableMatrix._from_owned(np.array([row], dtype=np.float64))


def column_vector(*values: float) -> ImmutableMatrix:
    """n x 1 matrix holding values."""
    column = _require_values(values, "values")
    return ImmutableMatrix._from_owned(np.array([[v] for v in column], dtype=np.float64))

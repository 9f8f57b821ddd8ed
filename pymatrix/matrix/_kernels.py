"""
Dense matrix kernels shared by both matrix variants.

Every function takes plain float64 ndarrays that the caller has already
validated. Functions that compute a result never modify their inputs;
the in-place kernels at the end of the module are the only writers and
are used exclusively by MutableMatrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.tolerances import DEFAULT_TOLERANCE

_ATOL = DEFAULT_TOLERANCE.atol

Array = NDArray[np.float64]


# --------------------------------------------------------------------------
# Comparison
# --------------------------------------------------------------------------

def all_close(a: Array, b: Array, atol: float = _ATOL) -> bool:
    """True if a and b have equal shape and every element pair is within atol."""
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) <= atol))


def all_zero(a: NDArray[np.floating[Any]], atol: float = _ATOL) -> bool:
    return bool(np.all(np.abs(a) <= atol))


# --------------------------------------------------------------------------
# Reductions
# --------------------------------------------------------------------------

def trace(a: Array) -> float:
    return float(np.trace(a))


def total(a: Array) -> float:
    return float(np.sum(a))


def average(a: Array) -> float:
    return float(np.sum(a)) / a.size


def maximum(a: Array) -> float:
    return float(np.max(a))


def minimum(a: Array) -> float:
    return float(np.min(a))


def l1_norm(a: Array) -> float:
    """Maximum absolute column sum."""
    return float(np.max(np.sum(np.abs(a), axis=0)))


def infinity_norm(a: Array) -> float:
    """Maximum absolute row sum."""
    return float(np.max(np.sum(np.abs(a), axis=1)))


# --------------------------------------------------------------------------
# Structural predicates
# --------------------------------------------------------------------------

def is_square(a: Array) -> bool:
    return a.shape[0] == a.shape[1]


def _off_diagonal(a: Array) -> Array:
    return a[~np.eye(a.shape[0], dtype=bool)]


def is_diagonal(a: Array) -> bool:
    return is_square(a) and all_zero(_off_diagonal(a))


def is_identity(a: Array) -> bool:
    return is_diagonal(a) and all_zero(np.diag(a) - 1.0)


def is_scalar(a: Array) -> bool:
    """Diagonal, with every diagonal entry within tolerance of a[0, 0]."""
    return is_diagonal(a) and all_zero(np.diag(a) - a[0, 0])


def is_symmetric(a: Array) -> bool:
    return is_square(a) and all_zero(a - a.T)


def is_upper_triangular(a: Array) -> bool:
    # strictly-below-diagonal part must vanish
    return is_square(a) and all_zero(np.tril(a, k=-1))


def is_lower_triangular(a: Array) -> bool:
    return is_square(a) and all_zero(np.triu(a, k=1))


# --------------------------------------------------------------------------
# In-place kernels (MutableMatrix only)
# --------------------------------------------------------------------------

def shuffle_cells(a: Array, rng: np.random.Generator) -> None:
    """
    Permute the cells of a in place.

    Visits every cell in row-major order and swaps it with a cell whose
    row and column are drawn independently and uniformly from the whole
    grid. This preserves the multiset of values but is NOT a uniform
    random permutation: like the naive "swap with any position" shuffle
    on a flat list, some orderings are produced more often than others.
    """
    rows, columns = a.shape
    for i in range(rows):
        for j in range(columns):
            r = int(rng.integers(rows))
            c = int(rng.integers(columns))
            a[i, j], a[r, c] = a[r, c], a[i, j]


def swap_rows(a: Array, first: int, second: int) -> None:
    if first != second:
        a[[first, second], :] = a[[second, first], :]


def swap_columns(a: Array, first: int, second: int) -> None:
    if first != second:
        a[:, [first, second]] = a[:, [second, first]]

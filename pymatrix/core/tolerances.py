"""
Tolerance used for floating-point comparison of matrix elements.

Two elements x and y are considered equal when abs(x - y) <= EPSILON.
Tolerant equality and every structural predicate (is_zero, is_identity,
is_symmetric, ...) share this single absolute threshold.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for element-wise comparison."""
    atol: float
    name: str
    description: str


# Absolute tolerance for all element comparisons
EPSILON = 1e-9

DEFAULT_TOLERANCE = ToleranceTier(
    atol=EPSILON,
    name='absolute_1e-9',
    description='Absolute element-wise tolerance for equality and predicates',
)

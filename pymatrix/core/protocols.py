"""
Core protocol for PyMatrix.

MatrixLike is the read-only structural contract every matrix satisfies.
The validation layer is written against it rather than against the
concrete classes, so any object exposing these members can be checked.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal read-only matrix contract.

    Both ImmutableMatrix and MutableMatrix satisfy this protocol.
    """

    @property
    def row_count(self) -> int:
        """Number of rows (always >= 1)."""
        ...

    @property
    def column_count(self) -> int:
        """Number of columns (always >= 1)."""
        ...

    def get(self, row: int, column: int) -> float:
        """Element at (row, column)."""
        ...

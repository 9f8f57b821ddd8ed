"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import ImmutableMatrix, MutableMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_data():
    """2x2 grid used throughout the reduction and arithmetic tests."""
    return [[1.0, 2.0], [3.0, 4.0]]


@pytest.fixture
def square(square_data):
    return ImmutableMatrix(square_data)


@pytest.fixture
def mutable_square(square_data):
    return MutableMatrix(square_data)


@pytest.fixture
def wide():
    """Non-square 2x3 matrix."""
    return ImmutableMatrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

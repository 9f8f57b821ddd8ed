"""
Tests for matrix factories.
"""

import numpy as np
import pytest

from pymatrix import (
    ImmutableMatrix,
    InvalidRangeError,
    InvalidShapeError,
    ValidationError,
    column_vector,
    diagonal,
    identity,
    ones,
    random,
    row_vector,
    zeros,
)


class TestZerosOnes:

    def test_zeros(self):
        m = zeros(3, 2)
        assert type(m) is ImmutableMatrix
        assert m.shape == (3, 2)
        assert m.is_zero()

    def test_ones(self):
        m = ones(2, 3)
        assert m.shape == (2, 3)
        assert m.sum() == 6.0
        assert m.minimum() == 1.0

    @pytest.mark.parametrize("factory", [zeros, ones])
    @pytest.mark.parametrize("rows,columns", [(0, 0), (-2, -1), (3, 0)])
    def test_non_positive_dimensions(self, factory, rows, columns):
        with pytest.raises(InvalidShapeError):
            factory(rows, columns)

    def test_non_integer_dimensions(self):
        with pytest.raises(ValidationError):
            zeros(2.0, 2)


class TestIdentity:

    def test_identity(self):
        m = identity(3)
        assert m.shape == (3, 3)
        assert m.is_identity()
        assert m.get(2, 0) == 0.0
        assert m.trace() == 3.0

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size(self, size):
        with pytest.raises(InvalidShapeError):
            identity(size)


class TestRandom:

    def test_shape_and_bounds(self, rng):
        m = random(4, 5, -2.0, 3.0, rng=rng)
        assert m.shape == (4, 5)
        assert m.minimum() >= -2.0
        assert m.maximum() < 3.0

    def test_default_unit_interval(self):
        m = random(3, 3)
        assert m.minimum() >= 0.0
        assert m.maximum() < 1.0

    def test_reproducible_with_seed(self):
        a = random(3, 3, rng=np.random.default_rng(1))
        b = random(3, 3, rng=np.random.default_rng(1))
        assert a.equals(b)

    def test_non_positive_dimensions(self):
        with pytest.raises(InvalidShapeError):
            random(0, 3)

    @pytest.mark.parametrize("low,high", [(1.0, 1.0), (2.0, -2.0)])
    def test_invalid_range(self, low, high):
        with pytest.raises(InvalidRangeError):
            random(2, 2, low, high)

    @pytest.mark.parametrize("low,high", [
        (-np.inf, 0.0),
        (0.0, np.inf),
        (-1e308, 1e308),
    ])
    def test_unbounded_range_rejected(self, low, high):
        with pytest.raises(InvalidRangeError, match="finite"):
            random(2, 2, low, high)


class TestDiagonal:

    def test_diagonal(self):
        m = diagonal(1.0, 2.0, 3.0)
        assert m.shape == (3, 3)
        assert m.is_diagonal()
        np.testing.assert_array_equal(np.diag(m.to_array()), [1.0, 2.0, 3.0])

    def test_single_value(self):
        m = diagonal(4.0)
        assert m.shape == (1, 1)
        assert m.is_scalar()

    def test_equal_values_is_scalar(self):
        assert diagonal(2.0, 2.0).is_scalar()

    def test_empty_rejected(self):
        with pytest.raises(InvalidShapeError):
            diagonal()


class TestVectors:

    def test_row_vector(self):
        v = row_vector(1, 2, 3)
        assert v.shape == (1, 3)
        assert v.is_row_vector()
        assert v.to_list() == [[1.0, 2.0, 3.0]]

    def test_column_vector(self):
        v = column_vector(1, 2, 3)
        assert v.shape == (3, 1)
        assert v.is_column_vector()
        assert v.to_list() == [[1.0], [2.0], [3.0]]

    def test_row_is_column_transposed(self):
        assert row_vector(4, 5).transpose().equals(column_vector(4, 5))

    @pytest.mark.parametrize("factory", [row_vector, column_vector])
    def test_empty_rejected(self, factory):
        with pytest.raises(InvalidShapeError):
            factory()

    def test_non_real_rejected(self):
        with pytest.raises(ValidationError):
            row_vector(1.0, "2")

"""
Tests for the human-readable matrix rendering.
"""

from pymatrix import ImmutableMatrix, MutableMatrix
from pymatrix.matrix.formatting import format_matrix, format_value


class TestFormatValue:

    def test_positive_has_sign_slot(self):
        assert format_value(1.0) == " 1.000e+00"

    def test_negative(self):
        assert format_value(-2.5) == "-2.500e+00"

    def test_zero(self):
        assert format_value(0.0) == " 0.000e+00"

    def test_small_and_large(self):
        assert format_value(1.23456e-7) == " 1.235e-07"
        assert format_value(-6.02e23) == "-6.020e+23"


class TestFormatMatrix:

    def test_two_by_two(self, square):
        assert str(square) == (
            "Matrix(2x2)\n"
            "[  1.000e+00  2.000e+00 ]\n"
            "[  3.000e+00  4.000e+00 ]"
        )

    def test_no_trailing_newline(self, wide):
        assert not format_matrix(wide).endswith("\n")

    def test_header_rows_by_columns(self, wide):
        lines = str(wide).split("\n")
        assert lines[0] == "Matrix(2x3)"
        assert len(lines) == 3

    def test_negative_values(self):
        m = MutableMatrix([[-1.0, 0.5]])
        assert str(m) == "Matrix(1x2)\n[ -1.000e+00  5.000e-01 ]"

    def test_repr(self):
        assert repr(ImmutableMatrix([[1, 2]])) == "ImmutableMatrix([[1.0, 2.0]])"
        assert repr(MutableMatrix([[3]])) == "MutableMatrix([[3.0]])"

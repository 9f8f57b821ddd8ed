"""
Human-readable rendering of matrices.

Layout::

    Matrix(2x2)
    [  1.000e+00  2.000e+00 ]
    [  3.000e+00  4.000e+00 ]

Each value uses a sign slot (space for non-negative), three fractional
digits and exponent notation. No trailing newline.
"""

from pymatrix.core.protocols import MatrixLike

VALUE_FORMAT = "% .3e"


def format_value(value: float) -> str:
    return VALUE_FORMAT % value


def format_matrix(matrix: MatrixLike) -> str:
    """Render matrix as a header line followed by one bracketed line per row."""
    rows, columns = matrix.row_count, matrix.column_count
    lines = [f"Matrix({rows}x{columns})"]
    for i in range(rows):
        values = " ".join(format_value(matrix.get(i, j)) for j in range(columns))
        lines.append(f"[ {values} ]")
    return "\n".join(lines)

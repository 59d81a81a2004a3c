"""
Matrix product kernels.

multiply_rows transposes the right operand once so that each output cell
is the dot product of a row of A with a row of B^T.
"""

from __future__ import annotations

from typing import Any, Sequence

from recmatrix.core.validation import Matrix
from recmatrix.matrix._transpose import transpose_rows


def dot_product(u: Sequence[Any], v: Sequence[Any]) -> Any:
    """Sum of positionwise products; lengths already checked equal."""
    total = 0
    for k in range(len(u) - 1, -1, -1):
        total = u[k] * v[k] + total
    return total


def multiply_rows(left: Matrix, right: Matrix) -> Matrix:
    """A @ B for A.cols == B.rows. Result has shape (A.rows, B.cols)."""
    right_t = transpose_rows(right)
    out = []
    for a_row in left:
        out.append([dot_product(a_row, b_col) for b_col in right_t])
    return out

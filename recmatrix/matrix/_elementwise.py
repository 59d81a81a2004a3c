"""
Elementwise kernels: summation, addition, scalar scaling, diagonal.

All kernels return new lists. Sums accumulate right to left, matching the
order used by the determinant expansion.
"""

from __future__ import annotations

from typing import Any

from recmatrix.core.validation import Matrix, is_number


def sum_elements(rows: Matrix) -> Any:
    """
    Sum of every numeric element.

    Non-numeric elements are skipped, not rejected. Row lengths may differ.
    """
    total = 0
    for row in reversed(rows):
        row_total = 0
        for value in reversed(row):
            if is_number(value):
                row_total = value + row_total
        total = row_total + total
    return total


def add_rows(left: Matrix, right: Matrix) -> Matrix:
    """C[i][j] = A[i][j] + B[i][j]; shapes already checked equal."""
    out = []
    for a_row, b_row in zip(left, right):
        out.append([a + b for a, b in zip(a_row, b_row)])
    return out


def scale_rows(rows: Matrix, factor: Any) -> Matrix:
    return [[value * factor for value in row] for row in rows]


def divide_rows(rows: Matrix, divisor: Any) -> Matrix:
    """True division of every element; int / int yields float."""
    return [[value / divisor for value in row] for row in rows]


def diagonal_of(rows: Matrix) -> list[Any]:
    """Main diagonal, stopping at the shorter of the two axes."""
    out = []
    for i, row in enumerate(rows):
        if i >= len(row):
            break
        out.append(row[i])
    return out

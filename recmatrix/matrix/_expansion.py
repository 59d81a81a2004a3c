"""
Cofactor expansion kernels: minor, cofactor, determinant, adjugate.

determinant and cofactor are mutually recursive:

    det(M)          = sum_j M[0][j] * cofactor(M, 0, j)
    cofactor(M,i,j) = (-1)^(i+j) * det(minor(M, i, j))

Each level removes one row and one column, so recursion depth equals the
order of the matrix. Callers bound the order before entering
(see core.validation.check_expansion_order). The 1x1 and 2x2 cases are
closed form; the 0x0 matrix has determinant 1.

Inputs are validated square matrices with in-range indices.
"""

from __future__ import annotations

from typing import Any

from recmatrix.core.validation import Matrix
from recmatrix.matrix._transpose import transpose_rows


def parity_sign(k: int) -> int:
    """+1 for even k, -1 for odd k."""
    return 1 if k % 2 == 0 else -1


def minor_rows(rows: Matrix, row_idx: int, col_idx: int) -> Matrix:
    """Drop row row_idx, then column col_idx from every remaining row."""
    out = []
    for i, row in enumerate(rows):
        if i == row_idx:
            continue
        out.append(row[:col_idx] + row[col_idx + 1:])
    return out


def cofactor_value(rows: Matrix, row_idx: int, col_idx: int) -> Any:
    return parity_sign(row_idx + col_idx) * determinant_value(
        minor_rows(rows, row_idx, col_idx)
    )


def determinant_value(rows: Matrix) -> Any:
    """Determinant by expansion along row 0."""
    n = len(rows)
    if n == 0:
        return 1
    if n == 1:
        return rows[0][0]
    if n == 2:
        (a, b), (c, d) = rows
        return a * d - b * c

    # Terms accumulate right to left: M[0][0]*C00 + (M[0][1]*C01 + (... + 0))
    top = rows[0]
    total = 0
    for j in range(n - 1, -1, -1):
        total = top[j] * cofactor_value(rows, 0, j) + total
    return total


def adjugate_rows(rows: Matrix) -> Matrix:
    """Transpose of the cofactor matrix."""
    n = len(rows)
    cofactors = []
    for i in range(n):
        cofactors.append([cofactor_value(rows, i, j) for j in range(n)])
    return transpose_rows(cofactors)

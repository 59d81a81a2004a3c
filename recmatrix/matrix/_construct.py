"""
Matrix construction kernels.

Inputs are validated sizes; see solvers.construct and solvers.identity.
"""

from __future__ import annotations

from typing import Any

from recmatrix.core.validation import Matrix


def construct_rows(n_rows: int, n_cols: int, fill: Any = 0) -> Matrix:
    """n_rows rows, each holding n_cols copies of fill."""
    rows = []
    for _ in range(n_rows):
        rows.append([fill] * n_cols)
    return rows


def identity_rows(n: int) -> Matrix:
    """n x n identity: 1 on the main diagonal, 0 elsewhere."""
    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            row.append(1 if i == j else 0)
        rows.append(row)
    return rows

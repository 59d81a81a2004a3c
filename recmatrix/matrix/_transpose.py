"""
Transpose kernel.
"""

from __future__ import annotations

from recmatrix.core.validation import Matrix


def transpose_rows(rows: Matrix) -> Matrix:
    """
    Swap rows and columns.

    Output row j collects element j of every input row. Output stops as
    soon as any input row is exhausted, so a ragged matrix transposes to
    min(row length) rows and a matrix of empty rows transposes to [].
    """
    if not rows:
        return []
    width = min(len(row) for row in rows)
    out = []
    for j in range(width):
        out.append([row[j] for row in rows])
    return out

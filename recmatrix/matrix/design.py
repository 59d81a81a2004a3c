"""
MatrixDesign: validated, immutable matrix wrapper.

Wraps a well-formed matrix and provides shape metadata. Every public
operation in matrix.solvers accepts either a MatrixDesign or raw nested
sequences; passing a design skips re-validation of row lengths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from recmatrix.core.validation import (
    Matrix,
    Shape,
    check_matrix,
    check_well_formed,
)


@dataclass(frozen=True)
class MatrixDesign:
    """
    Design wrapping a well-formed matrix.

    Rows are stored as a tuple of tuples, so the design cannot be mutated
    through any reference the caller still holds.

    Construction:
        MatrixDesign.from_array([[1, 2], [3, 4]])
        MatrixDesign.from_array(np.eye(3))
    """
    _rows: tuple[tuple[Any, ...], ...]
    _n_rows: int
    _n_cols: int

    @classmethod
    def from_array(cls, data, name: str = "data") -> MatrixDesign:
        """
        Build MatrixDesign from a matrix-like.

        Parameters
        ----------
        data : array-like
            Nested sequences of rows, a 2D numpy array, a pandas DataFrame,
            or another MatrixDesign.
        name : str
            Parameter name used in error messages.
        """
        if isinstance(data, MatrixDesign):
            return data
        rows = check_matrix(data, name)
        check_well_formed(rows, name)
        n_rows = len(rows)
        n_cols = len(rows[0]) if rows else 0
        return cls(
            _rows=tuple(tuple(row) for row in rows),
            _n_rows=n_rows,
            _n_cols=n_cols,
        )

    @property
    def rows(self) -> tuple[tuple[Any, ...], ...]:
        """Matrix rows as a tuple of tuples."""
        return self._rows

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def n_cols(self) -> int:
        return self._n_cols

    @property
    def shape(self) -> Shape:
        """(rows, cols); (0, 0) for the empty matrix."""
        if self._n_rows == 0:
            return (0, 0)
        return (self._n_rows, self._n_cols)

    @property
    def is_square(self) -> bool:
        n_rows, n_cols = self.shape
        return n_rows == n_cols

    def to_list(self) -> Matrix:
        """Fresh nested-list copy of the matrix."""
        return [list(row) for row in self._rows]

    def __repr__(self) -> str:
        n_rows, n_cols = self.shape
        return f"MatrixDesign(rows={n_rows}, cols={n_cols})"

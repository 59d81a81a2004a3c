"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper returned
by invert().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from recmatrix.core.result import Result
from recmatrix.core.validation import Matrix

if TYPE_CHECKING:
    from recmatrix.matrix.design import MatrixDesign


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for matrix inversion.

    inverse is adjugate / determinant, element by element.
    """
    inverse: Matrix
    determinant: Any
    adjugate: Matrix


@dataclass
class InverseSolution:
    """
    User-facing inversion results.

    Wraps Result[InverseParams] and provides convenient accessors.
    Matrix accessors return fresh copies.
    """
    _result: Result[InverseParams]
    _design: 'MatrixDesign'

    @property
    def inverse(self) -> Matrix:
        """A^-1 as nested lists."""
        return [list(row) for row in self._result.params.inverse]

    @property
    def determinant(self) -> Any:
        return self._result.params.determinant

    @property
    def adjugate(self) -> Matrix:
        """adj(A), the transposed cofactor matrix."""
        return [list(row) for row in self._result.params.adjugate]

    @property
    def order(self) -> int:
        return self._design.n_rows

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short text report of the inversion."""
        lines = [
            "Matrix Inverse",
            "=" * 40,
            f"Order:        {self.order}",
            f"Method:       {self._result.info.get('method', 'adjugate')}",
            f"Determinant:  {self.determinant}",
        ]
        if self.timing is not None:
            lines.append(f"Time:         {self.timing['total_seconds']:.6f}s")
        lines.append("")
        lines.append("Inverse:")
        for row in self._result.params.inverse:
            lines.append("  [" + ", ".join(str(v) for v in row) + "]")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InverseSolution(order={self.order}, "
            f"determinant={self.determinant!r})"
        )

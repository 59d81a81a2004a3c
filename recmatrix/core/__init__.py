"""
Core infrastructure for recmatrix.

This module provides shared abstractions and utilities used by the
matrix submodule.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators and shape helpers
    compute: Timing and tolerance tiers
"""

from recmatrix.core.result import Result
from recmatrix.core.exceptions import (
    RecMatrixError,
    ValidationError,
    InvalidDimensionError,
    ExpansionLimitError,
    IndexOutOfRangeError,
    DimensionError,
    ShapeMismatchError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "RecMatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "ExpansionLimitError",
    "IndexOutOfRangeError",
    "DimensionError",
    "ShapeMismatchError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]

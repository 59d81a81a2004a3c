"""
recmatrix: matrix algebra by recursive cofactor expansion.

Matrices are plain nested lists (rows of elements) and are never mutated;
every operation returns a new value. Determinants are computed exactly by
cofactor expansion, so integer and Fraction inputs give exact results.

Submodules:
    matrix: Construction, elementwise operations, products, determinant,
            adjugate and inverse
    core: Exceptions, validation, result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from recmatrix import matrix
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
from recmatrix.core.compute.tolerances import (
    EXACT,
    FP64,
    FP64_LOOSE,
    MAX_EXPANSION_ORDER,
    ToleranceTier,
)
from recmatrix.matrix import (
    construct,
    identity,
    as_matrix,
    to_numpy,
    shape,
    sum,
    add,
    scale,
    divide,
    diagonal,
    transpose,
    dot,
    multiply,
    minor,
    cofactor,
    determinant,
    adjugate,
    inverse,
    invert,
    allclose,
    MatrixDesign,
    InverseSolution,
)

__all__ = [
    "__version__",
    "matrix",
    # Operations
    "construct",
    "identity",
    "as_matrix",
    "to_numpy",
    "shape",
    "sum",
    "add",
    "scale",
    "divide",
    "diagonal",
    "transpose",
    "dot",
    "multiply",
    "minor",
    "cofactor",
    "determinant",
    "adjugate",
    "inverse",
    "invert",
    "allclose",
    # Types
    "MatrixDesign",
    "InverseSolution",
    "ToleranceTier",
    # Tolerances
    "EXACT",
    "FP64",
    "FP64_LOOSE",
    "MAX_EXPANSION_ORDER",
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

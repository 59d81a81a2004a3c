"""
Matrix algebra module.

Value-semantic operations on nested-list matrices, built on recursive
cofactor expansion.

Public API:
    construct(rows, cols, fill)  - Filled matrix
    identity(n)                  - Identity matrix
    shape(M)                     - (rows, cols)
    sum(M), add(A, B)            - Elementwise operations
    transpose(M), multiply(A, B) - Transpose and product
    minor, cofactor, determinant - Cofactor expansion
    adjugate(M), inverse(M)      - Adjugate and inverse
    invert(M)                    - Inverse with diagnostics (InverseSolution)
"""

from recmatrix.matrix.design import MatrixDesign
from recmatrix.matrix.solution import InverseParams, InverseSolution
from recmatrix.matrix.solvers import (
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
)

__all__ = [
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
    "MatrixDesign",
    "InverseParams",
    "InverseSolution",
]

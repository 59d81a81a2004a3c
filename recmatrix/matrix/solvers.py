"""
Public entry points for matrix algebra.

Every function validates its inputs once, up front, then hands plain
nested lists to the private kernels. Inputs are never mutated; every
matrix returned is a new list of new rows.
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from recmatrix.core.compute.timing import timed
from recmatrix.core.compute.tolerances import (
    EXACT,
    FP64,
    MAX_EXPANSION_ORDER,
    ToleranceTier,
    select_tolerance,
)
from recmatrix.core.exceptions import (
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)
from recmatrix.core.result import Result
from recmatrix.core.validation import (
    Matrix,
    Shape,
    check_dimension,
    check_expansion_order,
    check_index,
    check_matrix,
    check_multipliable,
    check_same_shape,
    check_square,
    check_well_formed,
    is_number,
    shape as _shape,
)
from recmatrix.matrix._construct import construct_rows, identity_rows
from recmatrix.matrix._elementwise import (
    add_rows,
    diagonal_of,
    divide_rows,
    scale_rows,
    sum_elements,
)
from recmatrix.matrix._expansion import (
    adjugate_rows,
    cofactor_value,
    determinant_value,
    minor_rows,
)
from recmatrix.matrix._product import dot_product, multiply_rows
from recmatrix.matrix._transpose import transpose_rows
from recmatrix.matrix.design import MatrixDesign
from recmatrix.matrix.solution import InverseParams, InverseSolution


def _ensure_rows(data: Any, name: str) -> Matrix:
    """Copy input to nested lists, requiring equal row lengths."""
    if isinstance(data, MatrixDesign):
        return data.to_list()
    rows = check_matrix(data, name)
    check_well_formed(rows, name)
    return rows


def _square_rows(
    data: Any,
    name: str,
    max_order: int,
    removed: int = 0,
) -> tuple[Matrix, int]:
    """
    Well-formed, square, and within the expansion bound.

    `removed` is how many rows/columns are dropped before expanding
    (1 for a cofactor, which expands a minor).
    """
    max_order = check_dimension(max_order, "max_order", allow_zero=False)
    rows = _ensure_rows(data, name)
    n = check_square(rows, name)
    check_expansion_order(max(n - removed, 0), max_order, name)
    return rows, n


def _near_singular_message(rows: Matrix, det: Any, n: int) -> str | None:
    """
    Warning text when a floating determinant is tiny for its element scale.

    Compared in float64 so Decimal input works; an overflowing
    max|a_ij|^n becomes inf, and a determinant that itself overflowed is
    never reported.
    """
    elements = [value for row in rows for value in row]
    if select_tolerance(elements, n) is EXACT:
        return None
    det_mag = float(abs(det))
    scale_max = float(max(abs(value) for value in elements))
    with np.errstate(over='ignore'):
        threshold = FP64.rtol * np.float64(scale_max) ** n
    if not (np.isfinite(det_mag) and det_mag <= threshold):
        return None
    return (
        f"Matrix is nearly singular: |det| = {det_mag:.3e} relative "
        f"to element scale {scale_max:.3e}; inverse may be inaccurate"
    )


def _check_scalar(value: Any, name: str) -> None:
    if not is_number(value):
        raise ValidationError(f"{name}: expected a number, got {value!r}")


# --- Construction ---

def construct(rows: int, cols: int, fill: Any = 0) -> Matrix:
    """
    Build a rows x cols matrix filled with `fill`.

    Parameters
    ----------
    rows, cols : int
        Non-negative sizes. rows=0 gives []; cols=0 gives `rows` empty rows.
    fill : Any
        Value placed in every cell.

    Raises
    ------
    InvalidDimensionError
        If either size is negative or not an integer.
    """
    n_rows = check_dimension(rows, "rows")
    n_cols = check_dimension(cols, "cols")
    return construct_rows(n_rows, n_cols, fill)


def identity(n: int) -> Matrix:
    """
    n x n identity matrix.

    Raises
    ------
    InvalidDimensionError
        If n is not a positive integer.
    """
    size = check_dimension(n, "n", allow_zero=False)
    return identity_rows(size)


def as_matrix(data: Any) -> Matrix:
    """Validated nested-list copy of any matrix-like (list, ndarray, DataFrame)."""
    return _ensure_rows(data, "data")


def to_numpy(matrix: Any, dtype: Any = None) -> NDArray:
    """
    Convert to a 2D numpy array.

    Fraction elements give an object array unless dtype=float is requested.
    The empty matrix converts to shape (0, 0).
    """
    rows = _ensure_rows(matrix, "matrix")
    n_rows, n_cols = _shape(rows)
    if n_rows == 0:
        return np.empty((0, 0), dtype=dtype if dtype is not None else np.float64)
    return np.array(rows, dtype=dtype).reshape(n_rows, n_cols)


# --- Shape and elementwise operations ---

def shape(matrix: Any) -> Shape:
    """(rows, cols) from the row count and the length of the first row."""
    return _shape(check_matrix(matrix, "matrix"))


def sum(matrix: Any) -> Any:
    """
    Sum of all numeric elements; 0 for the empty matrix.

    Non-numeric elements (strings, None, booleans) are skipped without
    error. Rows may have unequal lengths.
    """
    return sum_elements(check_matrix(matrix, "matrix"))


def add(a: Any, b: Any) -> Matrix:
    """
    Elementwise sum A + B.

    Raises
    ------
    ShapeMismatchError
        If row counts or any paired row lengths differ.
    """
    left = check_matrix(a, "a")
    right = check_matrix(b, "b")
    check_same_shape(left, right, ("a", "b"))
    return add_rows(left, right)


def scale(matrix: Any, factor: Any) -> Matrix:
    """Every element multiplied by a scalar."""
    _check_scalar(factor, "factor")
    return scale_rows(_ensure_rows(matrix, "matrix"), factor)


def divide(matrix: Any, divisor: Any) -> Matrix:
    """Every element divided by a non-zero scalar (true division)."""
    _check_scalar(divisor, "divisor")
    if divisor == 0:
        raise ValidationError("divisor: must be non-zero")
    return divide_rows(_ensure_rows(matrix, "matrix"), divisor)


def diagonal(matrix: Any) -> list[Any]:
    """Main diagonal [M[0][0], M[1][1], ...] up to min(rows, cols)."""
    return diagonal_of(_ensure_rows(matrix, "matrix"))


def transpose(matrix: Any) -> Matrix:
    """
    Swap rows and columns. transpose([]) == [].

    Ragged input is accepted: output stops when the shortest row runs out.
    """
    return transpose_rows(check_matrix(matrix, "matrix"))


# --- Products ---

def dot(u: Sequence[Any], v: Sequence[Any]) -> Any:
    """
    Dot product of two vectors.

    Raises
    ------
    ShapeMismatchError
        If the vectors differ in length.
    """
    u, v = list(u), list(v)
    if len(u) != len(v):
        raise ShapeMismatchError(
            f"Cannot take dot product of vectors of length {len(u)} and {len(v)}"
        )
    return dot_product(u, v)


def multiply(a: Any, b: Any) -> Matrix:
    """
    Matrix product A @ B, shape (A.rows, B.cols).

    Raises
    ------
    ShapeMismatchError
        If A.cols != B.rows, or either operand is ragged.
    """
    left = _ensure_rows(a, "a")
    right = _ensure_rows(b, "b")
    check_multipliable(left, right, ("a", "b"))
    return multiply_rows(left, right)


# --- Cofactor expansion ---

def minor(matrix: Any, i: int, j: int) -> Matrix:
    """
    Submatrix with row i and column j removed, shape (rows-1, cols-1).

    Raises
    ------
    IndexOutOfRangeError
        If i or j is not a valid zero-based index into the matrix.
    """
    rows = _ensure_rows(matrix, "matrix")
    n_rows, n_cols = _shape(rows)
    row_idx = check_index(i, n_rows, "row", "matrix")
    col_idx = check_index(j, n_cols, "column", "matrix")
    return minor_rows(rows, row_idx, col_idx)


def cofactor(
    matrix: Any,
    i: int,
    j: int,
    *,
    max_order: int = MAX_EXPANSION_ORDER,
) -> Any:
    """
    Signed minor determinant (-1)^(i+j) * det(minor(M, i, j)).

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    IndexOutOfRangeError
        If i or j is out of range.
    ExpansionLimitError
        If the minor's order (the matrix order minus one) exceeds max_order.
    """
    rows, n = _square_rows(matrix, "matrix", max_order, removed=1)
    row_idx = check_index(i, n, "row", "matrix")
    col_idx = check_index(j, n, "column", "matrix")
    return cofactor_value(rows, row_idx, col_idx)


def determinant(matrix: Any, *, max_order: int = MAX_EXPANSION_ORDER) -> Any:
    """
    Determinant by cofactor expansion along the first row.

    Cost is O(n!); there is no decomposition fallback, so integer and
    Fraction inputs give exact results. The 0x0 matrix has determinant 1.

    Parameters
    ----------
    matrix : matrix-like
        Square matrix.
    max_order : int
        Largest order accepted. Recursion depth equals the order.

    Raises
    ------
    NotSquareError
        If rows != cols.
    ExpansionLimitError
        If the order exceeds max_order.
    """
    rows, _ = _square_rows(matrix, "matrix", max_order)
    return determinant_value(rows)


def adjugate(matrix: Any, *, max_order: int = MAX_EXPANSION_ORDER) -> Matrix:
    """Transpose of the cofactor matrix. adjugate([[a]]) == [[1]]."""
    rows, _ = _square_rows(matrix, "matrix", max_order)
    return adjugate_rows(rows)


def inverse(matrix: Any, *, max_order: int = MAX_EXPANSION_ORDER) -> Matrix:
    """
    Inverse as adjugate / determinant.

    Elements are divided with true division, so integer input gives float
    output and Fraction input stays exact.

    Raises
    ------
    NotSquareError
        If rows != cols.
    SingularMatrixError
        If the determinant is exactly zero.
    ExpansionLimitError
        If the order exceeds max_order.
    """
    rows, n = _square_rows(matrix, "matrix", max_order)
    det = determinant_value(rows)
    if det == 0:
        raise SingularMatrixError(
            f"matrix: singular ({n}x{n}, determinant is 0), not invertible",
            matrix_name="matrix", determinant=det, order=n,
        )
    return divide_rows(adjugate_rows(rows), det)


def invert(
    matrix: Any,
    *,
    max_order: int = MAX_EXPANSION_ORDER,
) -> InverseSolution:
    """
    Inverse with determinant, adjugate, timing and diagnostics.

    Same computation as inverse(). A floating point determinant that is
    non-zero but tiny relative to the element scale (at or below
    FP64.rtol * max|a_ij|^n) is reported as a RuntimeWarning and recorded
    in the solution's warnings.

    Returns
    -------
    InverseSolution
    """
    rows, n = _square_rows(matrix, "matrix", max_order)
    design = MatrixDesign.from_array(rows)

    with timed() as timer:
        with timer.section('determinant'):
            det = determinant_value(rows)

        if det == 0:
            raise SingularMatrixError(
                f"matrix: singular ({n}x{n}, determinant is 0), not invertible",
                matrix_name="matrix", determinant=det, order=n,
            )

        with timer.section('adjugate'):
            adj = adjugate_rows(rows)

        with timer.section('divide'):
            inv = divide_rows(adj, det)

    warns = []
    msg = _near_singular_message(rows, det, n)
    if msg is not None:
        warns.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    result = Result(
        params=InverseParams(inverse=inv, determinant=det, adjugate=adj),
        info={'method': 'adjugate', 'order': n, 'max_order': max_order},
        timing=timer.result(),
        backend_name='cofactor_expansion',
        warnings=tuple(warns),
    )
    return InverseSolution(_result=result, _design=design)


def allclose(a: Any, b: Any, tier: ToleranceTier | None = None) -> bool:
    """
    Approximate structural equality.

    Matrices of different shape are never close. With the EXACT tier (the
    default when every element is an int or Fraction) elements must be
    equal; otherwise numpy.allclose is applied with the tier's tolerances.
    """
    left = _ensure_rows(a, "a")
    right = _ensure_rows(b, "b")
    if _shape(left) != _shape(right):
        return False
    if tier is None:
        elements = [v for row in left + right for v in row]
        tier = select_tolerance(elements, len(left))
    if tier is EXACT:
        return left == right
    if not left:
        return True
    dtype = np.complex128 if _has_complex(left, right) else np.float64
    return bool(np.allclose(
        np.asarray(left, dtype=dtype),
        np.asarray(right, dtype=dtype),
        rtol=tier.rtol,
        atol=tier.atol,
    ))


def _has_complex(*matrices: Matrix) -> bool:
    return any(isinstance(v, complex) for m in matrices for row in m for v in row)

"""
Input validation utilities for recmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Inputs are copied into fresh nested lists, never mutated
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import Any

from recmatrix.core.exceptions import (
    ExpansionLimitError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)

Matrix = list[list[Any]]
Shape = tuple[int, int]


def check_matrix(data: Any, name: str) -> Matrix:
    """
    Validate and copy input into a nested-list matrix.

    Accepts a sequence of row sequences, a numpy array (anything with
    ``tolist()``), a pandas DataFrame, or a MatrixDesign. Row lengths are
    NOT checked here; see check_well_formed.

    Args:
        data: Input to validate
        name: Parameter name for error messages

    Returns:
        A new list of new row lists

    Raises:
        ValidationError: If input is not two-level nested
    """
    if hasattr(data, 'to_list'):
        data = data.to_list()
    elif hasattr(data, 'values') and hasattr(data, 'columns'):
        data = data.values.tolist()
    elif hasattr(data, 'tolist'):
        data = data.tolist()

    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(data).__name__}"
        )

    rows = []
    for i, row in enumerate(data):
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise ValidationError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence "
                f"(input must be 2D)"
            )
        rows.append(list(row))
    return rows


def shape(rows: Matrix) -> Shape:
    """
    Shape of a matrix as (rows, cols), taken from the first row.

    The empty matrix has shape (0, 0).
    """
    if not rows:
        return (0, 0)
    return (len(rows), len(rows[0]))


def is_number(value: Any) -> bool:
    """True for numeric matrix elements. Booleans are not elements."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def check_well_formed(rows: Matrix, name: str) -> None:
    """
    Verify every row has the same length.

    Args:
        rows: Matrix to check
        name: Parameter name for error messages

    Raises:
        ShapeMismatchError: If any row length differs from the first
    """
    if not rows:
        return
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ShapeMismatchError(
                f"{name}: ragged matrix, row {i} has length {len(row)}, "
                f"row 0 has length {width}"
            )


def check_dimension(value: Any, name: str, *, allow_zero: bool = True) -> int:
    """
    Verify a requested size is a non-negative (or positive) integer.

    Args:
        value: Size to check
        name: Parameter name for error messages
        allow_zero: Whether 0 is an acceptable size

    Returns:
        The size as a plain int

    Raises:
        InvalidDimensionError: If value is not an integer or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: expected an integer size, got {value!r}", value=value
        )
    size = int(value)
    if size < 0 or (size == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise InvalidDimensionError(
            f"{name}: size must be {bound}, got {size}", value=value
        )
    return size


def check_square(rows: Matrix, name: str) -> int:
    """
    Verify matrix is square.

    Returns:
        The order n of the n x n matrix

    Raises:
        NotSquareError: If rows != cols
    """
    n_rows, n_cols = shape(rows)
    if n_rows != n_cols:
        raise NotSquareError(
            f"{name}: matrix must be square, got shape ({n_rows}, {n_cols})",
            shape=(n_rows, n_cols),
        )
    return n_rows


def check_index(index: Any, size: int, axis: str, name: str) -> int:
    """
    Verify a zero-based index addresses one of `size` rows or columns.

    Negative indices are rejected rather than wrapped.

    Raises:
        IndexOutOfRangeError: If index is not an integer in [0, size)
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise IndexOutOfRangeError(
            f"{name}: {axis} index must be an integer, got {index!r}",
            axis=axis, size=size,
        )
    if not 0 <= index < size:
        raise IndexOutOfRangeError(
            f"{name}: {axis} index {index} out of range for {size} {axis}s",
            axis=axis, index=int(index), size=size,
        )
    return int(index)


def check_same_shape(
    left: Matrix,
    right: Matrix,
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices have identical shapes, row by row.

    Raises:
        ShapeMismatchError: If row counts or any paired row lengths differ
    """
    left_shape, right_shape = shape(left), shape(right)
    if len(left) != len(right):
        raise ShapeMismatchError(
            f"Shape mismatch: {names[0]} has {len(left)} rows, "
            f"{names[1]} has {len(right)} rows",
            left_shape=left_shape, right_shape=right_shape,
        )
    for i, (a_row, b_row) in enumerate(zip(left, right)):
        if len(a_row) != len(b_row):
            raise ShapeMismatchError(
                f"Shape mismatch in row {i}: {names[0]} has {len(a_row)} "
                f"columns, {names[1]} has {len(b_row)}",
                left_shape=left_shape, right_shape=right_shape,
            )


def check_multipliable(
    left: Matrix,
    right: Matrix,
    names: tuple[str, str],
) -> None:
    """
    Verify left.cols == right.rows.

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    left_shape, right_shape = shape(left), shape(right)
    if left_shape[1] != right_shape[0]:
        raise ShapeMismatchError(
            f"Cannot multiply {names[0]} {left_shape} by {names[1]} "
            f"{right_shape}: {left_shape[1]} columns vs {right_shape[0]} rows",
            left_shape=left_shape, right_shape=right_shape,
        )


def check_expansion_order(order: int, max_order: int, name: str) -> None:
    """
    Verify a cofactor expansion of the given order is within bounds.

    Raises:
        ExpansionLimitError: If order > max_order
    """
    if order > max_order:
        raise ExpansionLimitError(
            f"{name}: cofactor expansion of order {order} exceeds "
            f"max_order={max_order} (cost grows as n!)",
            order=order, max_order=max_order,
        )

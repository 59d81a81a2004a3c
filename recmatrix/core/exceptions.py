"""
Exception hierarchy for recmatrix.

All exceptions inherit from RecMatrixError to allow catching any
library-specific error. Validation problems (bad sizes, incompatible
shapes, bad indices) inherit from ValidationError; failures that only
show up during computation inherit from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised at the violated precondition, before any partial work
"""


class RecMatrixError(Exception):
    """Base exception for all recmatrix errors."""
    pass


class ValidationError(RecMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A requested matrix size is negative, zero where a positive size is
    required, or not an integer.

    Attributes:
        value: The offending size
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class ExpansionLimitError(ValidationError):
    """
    Cofactor expansion was requested on a matrix larger than allowed.

    The expansion costs O(n!) and recurses n levels deep, so the order is
    capped before any work starts.

    Attributes:
        order: Order of the expansion that was rejected (the minor's
            order for a cofactor)
        max_order: The bound that was exceeded
    """

    def __init__(self, message: str, order: int, max_order: int):
        super().__init__(message)
        self.order = order
        self.max_order = max_order


class IndexOutOfRangeError(ValidationError):
    """
    A row or column index lies outside the matrix.

    Attributes:
        axis: 'row' or 'column'
        index: The offending index
        size: Number of rows or columns available on that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.size = size


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base for errors about the shape of one or more operand matrices.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation,
    or a matrix has rows of unequal length.

    Attributes:
        left_shape: Shape of the first operand, if applicable
        right_shape: Shape of the second operand, if applicable
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Shape of the rejected matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(RecMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising during computation rather than from
    input shape or size.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion is requested but the determinant is zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed
        order: Order of the square matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: object = None,
        order: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.order = order

"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every precondition of a public Matrix operation
is checked up front and reported with one of these types.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Floating-point exceptional values (inf, nan) are never errors
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (sizes, dtypes, element values)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shapes are incompatible for the requested operation.

    Raised by elementwise addition when the two shapes differ and by
    matrix multiplication when the inner dimensions differ.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: (rows, cols) of the left operand, if known
        right_shape: (rows, cols) of the right operand, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class RowLengthMismatchError(DimensionError):
    """
    A row's length differs from the first row's length.

    The first row determines the column count of a matrix built from a
    sequence of rows; every later row must agree with it.

    Attributes:
        row: Index of the offending row
        expected: Length of the first row
        actual: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int,
        expected: int,
        actual: int
    ):
        super().__init__(message, operation='from_rows')
        self.row = row
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row or column index is outside the matrix.

    Also an IndexError so that generic Python index handling still works.

    Attributes:
        index: The rejected index
        bound: Exclusive upper bound for the axis
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: int,
        bound: int,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class EmptyInputError(ValidationError):
    """
    A matrix was requested from an empty row sequence.

    Raised when the outer sequence has no rows or the first row has no
    elements, since the column count cannot be derived.
    """
    pass

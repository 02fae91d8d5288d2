"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than letting a bad shape
or index turn into a silently truncated result further down.

Design principles:
    - No silent type coercion (except np.asarray on element data)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    EmptyInputError,
    IndexOutOfBoundsError,
    RowLengthMismatchError,
    ValidationError,
)


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Args:
        value: Candidate size
        name: Parameter name for error messages

    Returns:
        value as a Python int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value is a real number.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify index lies in [0, bound).

    Negative indices are rejected rather than counted from the end.

    Args:
        index: Row or column index
        bound: Exclusive upper bound (row or column count)
        axis: 'row' or 'col', used in the message

    Returns:
        index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is outside [0, bound)
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"{axis}: expected an integer index, got {type(index).__name__}"
        )
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{axis}: index {index} out of bounds for size {bound}",
            index=int(index),
            bound=bound,
            axis=axis,
        )
    return int(index)


def check_rows(rows: ArrayLike, name: str) -> list[NDArray[Any]]:
    """
    Verify a row sequence is non-empty and rectangular.

    The first row determines the column count; every other row must have
    the same length. Each row is converted with np.asarray and must be
    one-dimensional and numeric.

    Args:
        rows: Sequence of rows
        name: Parameter name for error messages

    Returns:
        List of 1D numpy arrays, one per row

    Raises:
        EmptyInputError: If there are no rows or the first row is empty
        RowLengthMismatchError: If a row length differs from the first
        ValidationError: If a row is not a 1D numeric sequence
    """
    try:
        n = len(rows)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of rows: {e}") from e

    if n == 0:
        raise EmptyInputError(f"{name}: cannot build a matrix from zero rows")

    converted = []
    expected = None
    for i, row in enumerate(rows):
        arr = _as_numeric_row(row, f"{name}[{i}]")
        if expected is None:
            expected = arr.shape[0]
            if expected == 0:
                raise EmptyInputError(f"{name}: first row is empty")
        elif arr.shape[0] != expected:
            raise RowLengthMismatchError(
                f"{name}: row {i} has length {arr.shape[0]}, "
                f"expected {expected} (length of row 0)",
                row=i,
                expected=expected,
                actual=arr.shape[0],
            )
        converted.append(arr)
    return converted


def _as_numeric_row(row: Any, name: str) -> NDArray[Any]:
    try:
        arr = np.asarray(row)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.ndim != 1:
        raise ValidationError(
            f"{name}: expected a 1D row, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.dtype == object or not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
        )
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")
    return arr


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices have identical shapes.

    Args:
        left: (rows, cols) of the left operand
        right: (rows, cols) of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch, left is {left[0]}x{left[1]}, "
            f"right is {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_conformable(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify inner dimensions agree for a matrix product.

    Args:
        left: (rows, cols) of the left operand
        right: (rows, cols) of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If left cols != right rows
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"{operation}: inner dimensions differ, left is {left[0]}x{left[1]}, "
            f"right is {right[0]}x{right[1]} ({left[1]} != {right[0]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )

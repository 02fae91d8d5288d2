"""
Element type configuration and literal conversion.

A Matrix is generic over a real floating-point element type. Here that
type is a numpy floating dtype; this module is the single place that
decides which dtypes are accepted and how literals are turned into them.
"""

import warnings
from typing import Any

import numpy as np

from pymatrix.core.exceptions import ValidationError


# Element type used when the caller does not pass dtype=
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Every real floating kind numpy provides on this platform
SUPPORTED_DTYPES: frozenset[np.dtype] = frozenset(
    np.dtype(t) for t in (np.float16, np.float32, np.float64, np.longdouble)
)

# Literals passed to Matrix.new() go through this type first
LITERAL_DTYPE: np.dtype = np.dtype(np.float32)


def is_float_dtype(dtype: Any) -> bool:
    """Check whether dtype is a real floating-point dtype."""
    try:
        return np.issubdtype(np.dtype(dtype), np.floating)
    except TypeError:
        return False


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """
    Resolve a user-supplied dtype to a supported numpy dtype.

    Args:
        dtype: None for DEFAULT_DTYPE, or anything np.dtype() accepts

    Returns:
        A numpy floating dtype

    Raises:
        ValidationError: If dtype is not a real floating-point type
    """
    if dtype is None:
        return DEFAULT_DTYPE
    if not is_float_dtype(dtype):
        raise ValidationError(
            f"dtype: expected a real floating-point type, got {dtype!r}"
        )
    return np.dtype(dtype)


def to_float(value: Any) -> float:
    """
    Convert a real number to a Python float.

    Integers and rationals too large for a double overflow to +/-inf,
    following IEEE semantics, instead of raising OverflowError.
    """
    try:
        return float(value)
    except OverflowError:
        return float('inf') if value > 0 else float('-inf')


def to_element(value: Any, dtype: np.dtype) -> np.floating:
    """
    Convert a real scalar operand to the element type.

    numpy floating scalars are cast directly; any other real number goes
    through to_float() first.
    """
    if not isinstance(value, np.floating):
        value = to_float(value)
    with np.errstate(over='ignore'):
        return dtype.type(value)


def from_literal(value: float, dtype: np.dtype) -> np.floating:
    """
    Convert a numeric literal to the element type.

    The value is first narrowed to a 32-bit float and then widened to
    dtype, so Matrix.new(0.1, ...) stores float32(0.1) even in a float64
    matrix. A UserWarning is issued when the narrowing changes the value.

    Args:
        value: Real number to convert
        dtype: Target element type

    Returns:
        numpy scalar of the target dtype
    """
    as_float = to_float(value)
    with np.errstate(over='ignore'):
        narrowed = LITERAL_DTYPE.type(as_float)
    if np.isfinite(as_float) and float(narrowed) != as_float:
        warnings.warn(
            f"value {value!r} is not exactly representable as float32; "
            f"stored as {narrowed!s}",
            stacklevel=3,
        )
    with np.errstate(over='ignore'):
        return dtype.type(narrowed)

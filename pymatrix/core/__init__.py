"""
Core infrastructure for pymatrix.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Element dtype configuration and literal conversion
    tolerances: Comparison tolerances per dtype
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    RowLengthMismatchError,
    IndexOutOfBoundsError,
    EmptyInputError,
)
from pymatrix.core.precision import DEFAULT_DTYPE, SUPPORTED_DTYPES, resolve_dtype

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "RowLengthMismatchError",
    "IndexOutOfBoundsError",
    "EmptyInputError",
    # Precision
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    "resolve_dtype",
]

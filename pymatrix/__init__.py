"""
pymatrix: a small dense matrix container for Python.

Row-major flat storage over any numpy floating dtype, with construction
helpers, row/column accessors, transpose, elementwise exp and reciprocal,
and addition, scalar and matrix products.

Submodules:
    core: exceptions, validation, dtype configuration
    dense: the Matrix type and its text renderings
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    RowLengthMismatchError,
    IndexOutOfBoundsError,
    EmptyInputError,
)
from pymatrix.dense import Matrix, format_short, format_verbose

__all__ = [
    "__version__",
    "Matrix",
    "format_short",
    "format_verbose",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "RowLengthMismatchError",
    "IndexOutOfBoundsError",
    "EmptyInputError",
]

"""
Dense matrix module.

Public API:
    Matrix          - dense row-major matrix over a floating dtype
    format_short    - 'Matrix<R rows x C cols>'
    format_verbose  - shape header plus every element, row by row
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense._format import format_short, format_verbose

__all__ = [
    "Matrix",
    "format_short",
    "format_verbose",
]

"""
Text renderings of a Matrix.

Two separate entry points:
    format_short(matrix)    - shape only, used by str()
    format_verbose(matrix)  - shape header plus every element, used by repr()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


def format_short(matrix: Matrix) -> str:
    """Render as 'Matrix<R rows x C cols>'."""
    return f"Matrix<{matrix.n} rows x {matrix.m} cols>"


def format_verbose(matrix: Matrix) -> str:
    """
    Render the shape header followed by every element.

    Each row starts on a new line and every element, including the last
    one in a row, is followed by a tab:

        Matrix<2 rows x 2 cols>:
        1.0<TAB>2.0<TAB>
        3.0<TAB>4.0<TAB>
    """
    parts = [f"{format_short(matrix)}:"]
    for idx, item in enumerate(matrix.data):
        if idx % matrix.m == 0:
            parts.append("\n")
        parts.append(f"{item!s}\t")
    return "".join(parts)

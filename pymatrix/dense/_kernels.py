"""
Index arithmetic over flat row-major buffers.

These functions operate on a 1D buffer plus its (n, m) shape and assume
their arguments have already been validated by the caller. They are the
only places that translate between logical (row, col) positions and flat
indices.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def row_slice(data: NDArray[Any], m: int, row: int) -> NDArray[Any]:
    """View of the m contiguous elements starting at flat index row * m."""
    return data[row * m:(row + 1) * m]


def column(data: NDArray[Any], m: int, col: int) -> NDArray[Any]:
    """
    Materialize one column by scanning the whole buffer.

    Selects every element whose flat index modulo m equals col, in
    ascending row order. This is a full O(n*m) pass, not a strided view.
    """
    mask = np.arange(data.shape[0]) % m == col
    return data[mask]


def dot(left: NDArray[Any], right: NDArray[Any]) -> np.floating:
    """
    Dot product summed strictly left to right.

    Unlike np.dot / np.sum (pairwise or BLAS-blocked), the running total
    is accumulated one product at a time in index order.
    """
    products = left * right
    total = products[0]
    for value in products[1:]:
        total = total + value
    return total


def transpose(data: NDArray[Any], n: int, m: int) -> NDArray[Any]:
    """
    Transposed buffer built from column extractions.

    Column c of the input becomes row c of the output. Each extraction is
    a full scan, so the whole transpose is O(n*m^2).
    """
    return np.concatenate([column(data, m, c) for c in range(m)])


def matmul(
    left: NDArray[Any],
    left_shape: tuple[int, int],
    right: NDArray[Any],
    right_shape: tuple[int, int],
    dtype: np.dtype,
) -> NDArray[Any]:
    """
    Row-by-column product of two flat buffers.

    Entry (r, c) of the (left_rows x right_cols) result is the dot product
    of left row r with right column c. Inner dimensions must already be
    known to agree.
    """
    n, inner = left_shape
    _, m = right_shape
    out = np.zeros(n * m, dtype=dtype)
    columns = [column(right, m, c).astype(dtype, copy=False) for c in range(m)]
    for r in range(n):
        row = row_slice(left, inner, r).astype(dtype, copy=False)
        for c in range(m):
            out[r * m + c] = dot(row, columns[c])
    return out

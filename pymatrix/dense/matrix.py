"""
Matrix: dense row-major 2D container over a floating-point dtype.

Storage is a flat, read-only numpy buffer of length n * m; logical
position (row, col) lives at flat index row * m + col. Every operation
validates its preconditions, then returns a freshly allocated Matrix.

Construction:
    Matrix.new(value, n, m)
    Matrix.zeros(n, m)
    Matrix.identity(n)
    Matrix.from_rows([[1, 2, 3], [3, 2, 1]])
    Matrix.from_array(np_2d_array_or_row_views)
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.precision import (
    DEFAULT_DTYPE,
    from_literal,
    resolve_dtype,
    to_element,
)
from pymatrix.core.validation import (
    check_conformable,
    check_index,
    check_positive_int,
    check_rows,
    check_same_shape,
    check_scalar,
)
from pymatrix.dense import _kernels
from pymatrix.dense._format import format_short, format_verbose


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """
    Dense n x m matrix with row-major flat storage.

    Immutable after construction: the flat buffer is marked read-only and
    all transforms return new matrices. The element type is any numpy
    floating dtype (float64 by default).

    str() gives the short rendering 'Matrix<R rows x C cols>'; repr()
    gives the verbose rendering with every element.
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _m: int

    # Make numpy scalars defer to Matrix's reflected operators
    __array_ufunc__ = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, value: float, n: int, m: int, *, dtype=None) -> Matrix:
        """
        Build an n x m matrix with every element set to value.

        value is converted through a 32-bit float before being stored as
        dtype; a UserWarning is issued if that conversion is lossy.

        Parameters
        ----------
        value : float
            Fill value.
        n, m : int
            Row and column counts, both >= 1.
        dtype : numpy floating dtype, optional
            Element type. Defaults to float64.
        """
        check_scalar(value, 'value')
        n = check_positive_int(n, 'n')
        m = check_positive_int(m, 'm')
        dt = resolve_dtype(dtype)
        fill = from_literal(value, dt)
        return cls._build(np.full(n * m, fill, dtype=dt), n, m)

    @classmethod
    def zeros(cls, n: int, m: int, *, dtype=None) -> Matrix:
        """Build an n x m matrix of zeros."""
        n = check_positive_int(n, 'n')
        m = check_positive_int(m, 'm')
        return cls._build(np.zeros(n * m, dtype=resolve_dtype(dtype)), n, m)

    @classmethod
    def identity(cls, n: int, *, dtype=None) -> Matrix:
        """Build the n x n identity: ones at flat indices (n+1)*i, zeros elsewhere."""
        n = check_positive_int(n, 'n')
        dt = resolve_dtype(dtype)
        data = np.zeros(n * n, dtype=dt)
        data[(n + 1) * np.arange(n)] = dt.type(1)
        return cls._build(data, n, n)

    @classmethod
    def from_rows(cls, rows, *, dtype=None) -> Matrix:
        """
        Build a matrix from a sequence of rows.

        The number of rows gives n and the length of the first row gives
        m. Every other row must have the same length as the first.

        Parameters
        ----------
        rows : sequence of sequences of numbers
            e.g. [[1, 2, 3], [3, 2, 1]].
        dtype : numpy floating dtype, optional
            Element type. If None, floating input keeps its dtype and any
            other numeric input becomes float64.

        Raises
        ------
        EmptyInputError
            If rows is empty or its first row is empty.
        RowLengthMismatchError
            If any row differs in length from the first.
        """
        return cls._from_row_arrays(check_rows(rows, 'rows'), dtype)

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype=None) -> Matrix:
        """
        Build a matrix from a 2D array or a collection of row views.

        Accepts a 2D numpy array or memoryview, a sequence of 1D row views
        (numpy arrays, memoryviews, tuples), or any object with a .values
        attribute such as a pandas DataFrame. Same row rules as
        from_rows().
        """
        if hasattr(array, 'values') and not callable(array.values):
            array = np.asarray(array.values)
        elif isinstance(array, memoryview):
            array = np.asarray(array)

        if isinstance(array, np.ndarray):
            if array.ndim != 2:
                raise DimensionError(
                    f"array: expected 2D array, got {array.ndim}D "
                    f"with shape {array.shape}",
                    operation='from_array',
                )
            rows = list(array)
        else:
            rows = array

        return cls._from_row_arrays(check_rows(rows, 'array'), dtype)

    @classmethod
    def _from_row_arrays(cls, rows: list[NDArray[Any]], dtype) -> Matrix:
        if dtype is None:
            found = np.result_type(*{row.dtype for row in rows})
            dt = found if np.issubdtype(found, np.floating) else DEFAULT_DTYPE
        else:
            dt = resolve_dtype(dtype)
        data = np.concatenate(rows).astype(dt, copy=False)
        return cls._build(data, len(rows), rows[0].shape[0])

    @classmethod
    def _build(cls, data: NDArray[np.floating[Any]], n: int, m: int) -> Matrix:
        """Internal builder; seals the buffer."""
        if data.shape != (n * m,):
            raise DimensionError(
                f"data: expected flat buffer of length {n * m}, got shape {data.shape}"
            )
        data.flags.writeable = False
        return cls(_data=data, _n=n, _m=m)

    def copy(self) -> Matrix:
        """Independent copy with the same shape, dtype and values."""
        return Matrix._build(self._data.copy(), self._n, self._m)

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def n(self) -> int:
        """Number of rows."""
        return self._n

    @property
    def m(self) -> int:
        """Number of columns."""
        return self._m

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n, self._m)

    @property
    def size(self) -> int:
        return self._n * self._m

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Flat row-major buffer (read-only view), length n * m."""
        return self._data

    def to_rows(self) -> list[list[float]]:
        """Nested list of rows."""
        return self._data.reshape(self._n, self._m).tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Writeable (n, m) copy of the elements."""
        return self._data.reshape(self._n, self._m).copy()

    def __array__(self, dtype=None, copy=None):
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype, copy=False)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_row(self, row: int) -> NDArray[np.floating[Any]]:
        """
        Read-only view of row `row`.

        Raises
        ------
        IndexOutOfBoundsError
            If row is not in [0, n).
        """
        row = check_index(row, self._n, 'row')
        return _kernels.row_slice(self._data, self._m, row)

    def get_col(self, col: int) -> NDArray[np.floating[Any]]:
        """
        New array holding column `col` in ascending row order.

        Built by a full scan of the buffer, O(n*m).

        Raises
        ------
        IndexOutOfBoundsError
            If col is not in [0, m).
        """
        col = check_index(col, self._m, 'col')
        return _kernels.column(self._data, self._m, col)

    def __getitem__(self, key: tuple[int, int]) -> np.floating:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"index: expected a (row, col) pair, got {key!r}"
            )
        row = check_index(key[0], self._n, 'row')
        col = check_index(key[1], self._m, 'col')
        return self._data[row * self._m + col]

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """New m x n matrix whose rows are this matrix's columns."""
        data = _kernels.transpose(self._data, self._n, self._m)
        return Matrix._build(data, self._m, self._n)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def exp(self) -> Matrix:
        """Elementwise e**x. Overflow gives inf."""
        with np.errstate(over='ignore'):
            data = np.exp(self._data)
        return Matrix._build(data, self._n, self._m)

    def one_over(self) -> Matrix:
        """Elementwise 1/x. Zero gives inf, nan stays nan."""
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            data = self.dtype.type(1) / self._data
        return Matrix._build(data, self._n, self._m)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises
        ------
        DimensionError
            If the shapes differ.
        """
        _check_matrix(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        with np.errstate(over='ignore', invalid='ignore'):
            data = self._data + other._data
        return Matrix._build(data, self._n, self._m)

    def scalar_mul(self, scalar: float) -> Matrix:
        """Multiply every element by scalar (converted to this dtype)."""
        check_scalar(scalar, 'scalar')
        with np.errstate(over='ignore', invalid='ignore'):
            data = self._data * to_element(scalar, self.dtype)
        return Matrix._build(data, self._n, self._m)

    def scalar_div(self, scalar: float) -> Matrix:
        """Divide every element by scalar. Division by zero gives inf or nan."""
        check_scalar(scalar, 'scalar')
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            data = self._data / to_element(scalar, self.dtype)
        return Matrix._build(data, self._n, self._m)

    def matrix_mul(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        The result is self.n x other.m. Each entry is the dot product of a
        row of self and a column of other, accumulated left to right.

        Raises
        ------
        DimensionError
            If self.m != other.n.
        """
        _check_matrix(other, 'matrix_mul')
        check_conformable(self.shape, other.shape, 'matrix_mul')
        dt = np.result_type(self.dtype, other.dtype)
        with np.errstate(over='ignore', invalid='ignore'):
            data = _kernels.matmul(
                self._data, self.shape, other._data, other.shape, dt
            )
        return Matrix._build(data, self._n, other._m)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.matrix_mul(other)
        if _is_real(other):
            return self.scalar_mul(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_real(other):
            return self.scalar_mul(other)
        return NotImplemented

    def __truediv__(self, other):
        if _is_real(other):
            return self.scalar_div(other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matrix_mul(other)

    # ------------------------------------------------------------------
    # Comparison and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None

    def __str__(self) -> str:
        return format_short(self)

    def __repr__(self) -> str:
        return format_verbose(self)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_matrix(value: Any, operation: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(value).__name__}"
        )

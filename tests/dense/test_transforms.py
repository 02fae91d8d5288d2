"""
Tests for transpose, exp and one_over.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.tolerances import select_tolerance


class TestTranspose:

    def test_tall_to_wide(self, tall_matrix):
        t = tall_matrix.transpose()
        assert t.shape == (2, 3)
        np.testing.assert_array_equal(t.data, [1.0, 3.0, 5.0, 2.0, 4.0, 6.0])

    def test_rows_are_original_columns(self, four_by_three):
        t = four_by_three.transpose()
        for c in range(four_by_three.m):
            np.testing.assert_array_equal(t.get_row(c), four_by_three.get_col(c))

    @pytest.mark.parametrize("n, m", [(1, 1), (1, 5), (5, 1), (3, 4), (6, 6)])
    def test_involutive(self, rng, n, m):
        mat = Matrix.from_array(rng.standard_normal((n, m)))
        assert mat.transpose().transpose() == mat

    def test_matches_numpy(self, rng):
        arr = rng.standard_normal((3, 7))
        np.testing.assert_array_equal(Matrix.from_array(arr).T.to_numpy(), arr.T)

    def test_does_not_modify_original(self, tall_matrix):
        before = tall_matrix.data.copy()
        tall_matrix.transpose()
        np.testing.assert_array_equal(tall_matrix.data, before)

    def test_keeps_dtype(self):
        mat = Matrix.from_rows([[1.0, 2.0]], dtype=np.float32)
        assert mat.transpose().dtype == np.float32

    def test_identity_is_symmetric(self):
        eye = Matrix.identity(4)
        assert eye.transpose() == eye


class TestExp:

    def test_elementwise(self, tall_matrix):
        result = tall_matrix.exp()
        assert result.shape == (3, 2)
        np.testing.assert_array_equal(result.data, np.exp([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))

    def test_float32(self):
        mat = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
        result = mat.exp()
        assert result.dtype == np.float32
        tol = select_tolerance(np.float32)
        np.testing.assert_allclose(
            result.data, np.exp([1.0, 2.0, 3.0, 4.0]), rtol=tol.rtol, atol=tol.atol
        )

    def test_zero_matrix_gives_ones(self):
        assert Matrix.zeros(2, 3).exp() == Matrix.new(1.0, 2, 3)

    def test_overflow_is_inf_without_warning(self):
        mat = Matrix.from_rows([[1000.0, 0.0]])
        with np.errstate(all='raise'):
            result = mat.exp()
        assert np.isinf(result[0, 0])
        assert result[0, 1] == 1.0


class TestOneOver:

    def test_elementwise(self, tall_matrix):
        result = tall_matrix.one_over()
        assert result.shape == (3, 2)
        expected = [1.0 / x for x in (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)]
        np.testing.assert_array_equal(result.data, expected)

    def test_zero_gives_inf(self):
        result = Matrix.from_rows([[0.0, -0.0, 2.0]]).one_over()
        assert result[0, 0] == np.inf
        assert result[0, 1] == -np.inf
        assert result[0, 2] == 0.5

    def test_nan_stays_nan(self):
        result = Matrix.from_rows([[np.nan]]).one_over()
        assert np.isnan(result[0, 0])

    def test_keeps_dtype(self):
        mat = Matrix.new(4.0, 2, 2, dtype=np.float16)
        result = mat.one_over()
        assert result.dtype == np.float16
        assert np.all(result.data == np.float16(0.25))

    def test_involutive_on_powers_of_two(self):
        mat = Matrix.from_rows([[1.0, 2.0], [0.25, 8.0]])
        assert mat.one_over().one_over() == mat

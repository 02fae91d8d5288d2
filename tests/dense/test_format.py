"""
Tests for the short and verbose text renderings.
"""

import numpy as np

from pymatrix import Matrix, format_short, format_verbose


class TestShort:

    def test_str(self, four_by_three):
        assert str(four_by_three) == "Matrix<4 rows x 3 cols>"

    def test_function_matches_str(self, tall_matrix):
        assert format_short(tall_matrix) == str(tall_matrix)

    def test_single_element(self):
        assert str(Matrix.zeros(1, 1)) == "Matrix<1 rows x 1 cols>"


class TestVerbose:

    def test_repr(self):
        mat = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        assert repr(mat) == "Matrix<2 rows x 2 cols>:\n1.0\t2.0\t\n3.0\t4.0\t"

    def test_function_matches_repr(self, tall_matrix):
        assert format_verbose(tall_matrix) == repr(tall_matrix)

    def test_one_line_per_row(self, four_by_three):
        lines = format_verbose(four_by_three).split("\n")
        assert lines[0] == "Matrix<4 rows x 3 cols>:"
        assert len(lines) == 5
        assert lines[3] == "2.0\t9.0\t3.0\t"

    def test_every_element_tab_terminated(self, tall_matrix):
        body = format_verbose(tall_matrix).split("\n")[1:]
        assert all(line.count("\t") == 2 and line.endswith("\t") for line in body)

    def test_shortest_float32_digits(self):
        mat = Matrix.from_rows([[0.5, 0.25]], dtype=np.float32)
        assert format_verbose(mat) == "Matrix<1 rows x 2 cols>:\n0.5\t0.25\t"

    def test_special_values(self):
        mat = Matrix.from_rows([[np.inf, np.nan]])
        assert format_verbose(mat).endswith("\ninf\tnan\t")

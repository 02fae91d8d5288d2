"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tall_matrix():
    """3x2 matrix used by the product, transform and scalar tests."""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


@pytest.fixture
def wide_matrix():
    """2x3 matrix conformable with tall_matrix on both sides."""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def four_by_three():
    """4x3 matrix for row and column accessor tests."""
    return Matrix.from_rows([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 3.0],
        [2.0, 9.0, 3.0],
        [0.0, 1.0, 3.0],
    ])

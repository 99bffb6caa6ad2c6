"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.matrix import make, make_column_vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def regression_system():
    """Six observations of y = slope * x + intercept (tall, full rank)."""
    A = make(6, 2, [2, 1, 5, 1, 7, 1, 11, 1, 14, 1, 18, 1])
    b = make_column_vector(6, [5, 5, 8, 7, 9, 7])
    expected = np.array([0.17183098591549267, 5.200938967136154])
    return A, b, expected


@pytest.fixture
def independent_rows():
    """Three linearly independent vectors in R^4, one per row."""
    return make(3, 4, [-1, 1, -1, 1, -1, 3, -1, 3, 1, 3, 5, 7])


@pytest.fixture
def dependent_rows():
    """Third row is 2 * row 0 + row 1."""
    return make(3, 3, [1, 0, 1, 0, 1, 1, 2, 1, 3])


@pytest.fixture
def random_tall(rng):
    """Random 8 x 3 matrix; independent columns with probability 1."""
    return make(8, 3, rng.standard_normal(24))

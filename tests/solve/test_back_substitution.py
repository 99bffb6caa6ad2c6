"""
Tests for back substitution on upper triangular systems.
"""

import warnings

import numpy as np
import pytest
from scipy.linalg import solve_triangular

from pymatrix.core.exceptions import NotAVectorError, ShapeMismatchError, SingularMatrixError
from pymatrix.matrix import make, make_column_vector, make_row_vector, multiply, to_numpy
from pymatrix.solve import back_substitution


@pytest.fixture
def R():
    return make(3, 3, [4, 2, 5, 0, 1, 1, 0, 0, 10])


class TestBackSubstitution:

    def test_known_solution(self, R):
        x = back_substitution(R, make_column_vector(3, [53, 12, 70]))
        assert x == make_column_vector(3, [2, 5, 7])

    def test_round_trip(self, rng):
        n = 5
        U = np.triu(rng.standard_normal((n, n))) + 3 * np.eye(n)
        R = make(n, n, U)
        x = make_column_vector(n, rng.standard_normal(n))
        x_back = back_substitution(R, multiply(R, x))
        np.testing.assert_allclose(x_back.data, x.data, rtol=1e-10, atol=1e-12)

    def test_matches_scipy_solve_triangular(self, rng):
        U = np.triu(rng.standard_normal((6, 6))) + 2 * np.eye(6)
        rhs = rng.standard_normal(6)
        x = back_substitution(make(6, 6, U), make_column_vector(6, rhs))
        np.testing.assert_allclose(x.data, solve_triangular(U, rhs, lower=False), rtol=1e-10)

    def test_row_vector_rhs(self, R):
        x = back_substitution(R, make_row_vector(3, [53, 12, 70]))
        assert x.shape == (3, 1)

    def test_ignores_lower_triangle(self):
        R = make(2, 2, [2, 0, 99, 4])
        x = back_substitution(R, make_column_vector(2, [2, 8]))
        assert x == make_column_vector(2, [1, 2])

    def test_empty_system(self):
        assert back_substitution(make(0, 0), make(0, 1)).shape == (0, 1)


class TestZeroDiagonal:

    def test_unchecked_division_gives_non_finite(self):
        R = make(2, 2, [1, 1, 0, 0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            x = back_substitution(R, make_column_vector(2, [1, 1]))
        assert not np.all(np.isfinite(to_numpy(x)))

    def test_zero_over_zero_is_nan(self):
        R = make(1, 1, [0])
        x = back_substitution(R, make_column_vector(1, [0]))
        assert np.isnan(x.data[0])

    def test_check_singular_raises(self):
        R = make(3, 3, [1, 2, 3, 0, 0, 1, 0, 0, 2])
        with pytest.raises(SingularMatrixError, match=r"\[1\]") as excinfo:
            back_substitution(R, make_column_vector(3, [1, 1, 1]), check_singular=True)
        assert excinfo.value.matrix_name == "R"
        assert excinfo.value.rank == 2
        assert excinfo.value.expected_rank == 3

    def test_check_singular_passes_regular_matrix(self, R):
        x = back_substitution(R, make_column_vector(3, [53, 12, 70]), check_singular=True)
        assert x == make_column_vector(3, [2, 5, 7])


class TestShapeChecks:

    def test_non_square(self):
        with pytest.raises(ShapeMismatchError, match="square"):
            back_substitution(make(2, 3), make_column_vector(2))

    def test_rhs_length(self, R):
        with pytest.raises(ShapeMismatchError, match="expected 3"):
            back_substitution(R, make_column_vector(2))

    def test_rhs_not_vector(self, R):
        with pytest.raises(NotAVectorError):
            back_substitution(R, make(3, 2))

"""
Tests for Matrix construction, value semantics and element access.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.exceptions import MatrixIndexError, ShapeError, ValidationError
from pymatrix.matrix import (
    Matrix,
    clone,
    get,
    make,
    make_column_vector,
    make_empty,
    make_row_vector,
    make_vector,
)


class TestMake:

    def test_fields(self):
        A = make(2, 3, [1, 2, 3, 4, 5, 6])
        assert A.rows == 2
        assert A.cols == 3
        np.testing.assert_array_equal(A.data, [1, 2, 3, 4, 5, 6])
        assert A.data.dtype == np.float64

    @pytest.mark.parametrize("rows,cols", [(0, 0), (1, 1), (3, 2), (0, 5), (4, 0)])
    def test_without_data_is_zero_filled(self, rows, cols):
        A = make(rows, cols)
        assert A.shape == (rows, cols)
        assert A.data.size == rows * cols
        assert np.all(A.data == 0.0)

    @pytest.mark.parametrize("n", [0, 5, 7])
    def test_wrong_length_raises_shape_error(self, n):
        with pytest.raises(ShapeError) as excinfo:
            make(2, 3, list(range(n)))
        assert excinfo.value.expected == 6
        assert excinfo.value.actual == n
        assert "6 data elements" in str(excinfo.value)

    def test_negative_dimension(self):
        with pytest.raises(ValidationError, match="rows"):
            make(-1, 2)

    def test_constructor_validates_like_make(self):
        with pytest.raises(ShapeError):
            Matrix(2, 2, [1, 2, 3])

    def test_rejects_non_numeric_data(self):
        with pytest.raises(ValidationError):
            make(1, 2, ["a", "b"])

    def test_int_beyond_int64(self):
        A = make(1, 1, [10**30])
        assert get(A, 0) == 1e30

    def test_fractions(self):
        A = make(1, 2, [Fraction(1, 2), Fraction(3, 4)])
        np.testing.assert_array_equal(A.data, [0.5, 0.75])

    def test_big_int_mixed_with_floats(self):
        A = make(1, 3, [10**20, 2.5, -1])
        np.testing.assert_array_equal(A.data, [1e20, 2.5, -1.0])

    def test_int_too_large_for_float(self):
        with pytest.raises(ValidationError, match="float64"):
            make(1, 1, [10**400])


class TestVectorsAndEmpty:

    def test_row_vector(self):
        v = make_row_vector(3, [1, 2, 3])
        assert v.shape == (1, 3)
        assert v.is_vector

    def test_column_vector(self):
        v = make_column_vector(3, [1, 2, 3])
        assert v.shape == (3, 1)
        assert v.is_vector

    def test_make_vector_is_column(self):
        assert make_vector(2, [1, 2]).shape == (2, 1)

    def test_column_vector_wrong_length(self):
        with pytest.raises(ShapeError):
            make_column_vector(3, [1, 2])

    def test_empty(self):
        E = make_empty()
        assert E.shape == (0, 0)
        assert E.data.size == 0
        assert not E.is_vector

    def test_matrix_is_not_vector(self):
        assert not make(2, 2).is_vector


class TestValueSemantics:

    def test_input_list_not_aliased(self):
        data = [1.0, 2.0, 3.0, 4.0]
        A = make(2, 2, data)
        data[0] = 100.0
        assert get(A, 0) == 1.0

    def test_input_array_not_aliased(self):
        data = np.array([1.0, 2.0, 3.0, 4.0])
        A = make(2, 2, data)
        data[0] = 100.0
        assert get(A, 0) == 1.0

    def test_data_is_read_only(self):
        A = make(2, 2, [1, 2, 3, 4])
        with pytest.raises(ValueError):
            A.data[0] = 5.0

    def test_fields_are_frozen(self):
        A = make(2, 2)
        with pytest.raises(AttributeError):
            A.rows = 3

    def test_clone_equal_but_not_shared(self):
        A = make(2, 2, [1, 2, 3, 4])
        B = clone(A)
        assert B == A
        assert B is not A
        assert not np.shares_memory(A.data, B.data)

    def test_structural_equality(self):
        assert make(2, 2, [1, 2, 3, 4]) == make(2, 2, [1, 2, 3, 4])

    def test_same_data_different_shape_not_equal(self):
        assert make(2, 2, [1, 2, 3, 4]) != make(1, 4, [1, 2, 3, 4])

    def test_different_data_not_equal(self):
        assert make(1, 2, [1, 2]) != make(1, 2, [1, 3])

    def test_not_equal_to_other_types(self):
        assert make(1, 1, [1]) != [1.0]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(make(1, 1))


class TestGet:

    @pytest.fixture
    def A(self):
        return make(2, 3, [1, 2, 3, 4, 5, 6])

    def test_flat(self, A):
        assert [get(A, i) for i in range(6)] == [1, 2, 3, 4, 5, 6]

    def test_two_dimensional(self, A):
        assert get(A, 0, 2) == 3.0
        assert get(A, 1, 0) == 4.0

    def test_returns_python_float(self, A):
        assert type(get(A, 0, 0)) is float

    def test_getitem(self, A):
        assert A[4] == 5.0
        assert A[1, 1] == 5.0

    def test_flat_out_of_range(self, A):
        with pytest.raises(MatrixIndexError, match="valid range is 0 to 5"):
            get(A, 6)

    def test_row_index_out_of_range(self, A):
        with pytest.raises(MatrixIndexError, match='"i".*valid range is 0 to 1'):
            get(A, 2, 0)

    def test_column_index_out_of_range(self, A):
        with pytest.raises(MatrixIndexError, match='"j".*valid range is 0 to 2'):
            get(A, 0, 3)

    def test_negative_index(self, A):
        with pytest.raises(IndexError):
            get(A, -1)

    def test_empty_matrix(self):
        with pytest.raises(MatrixIndexError, match="no valid values"):
            get(make_empty(), 0)


class TestRepr:

    def test_repr_shows_shape_and_data(self):
        assert repr(make(1, 2, [1, 2])) == "Matrix(rows=1, cols=2, data=[1.0, 2.0])"

    def test_str_uses_format_matrix(self):
        assert str(make(1, 2, [1, 2])) == "[ 1, 2 ]"

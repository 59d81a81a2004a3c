"""
Tests for dot() and multiply().
"""

import numpy as np
import pytest

from recmatrix.core.exceptions import ShapeMismatchError
from recmatrix.matrix import dot, identity, multiply, shape


class TestDot:

    def test_basic(self):
        assert dot([1, 2, 3], [4, 5, 6]) == 32

    def test_empty(self):
        assert dot([], []) == 0

    def test_length_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="3 and 2"):
            dot([1, 2, 3], [1, 2])


class TestMultiply:

    def test_two_by_two(self):
        assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]

    def test_rectangular_shape(self):
        a = [[1, 2, 3], [4, 5, 6]]
        b = [[1, 0], [0, 1], [1, 1]]
        out = multiply(a, b)
        assert shape(out) == (2, 2)
        assert out == [[4, 5], [10, 11]]

    def test_row_times_column(self):
        assert multiply([[1, 2, 3]], [[1], [2], [3]]) == [[14]]

    def test_column_times_row(self):
        assert multiply([[1], [2]], [[3, 4]]) == [[3, 4], [6, 8]]

    def test_inner_dimension_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            multiply([[1, 2, 3]], [[1, 2], [3, 4]])
        assert exc_info.value.left_shape == (1, 3)
        assert exc_info.value.right_shape == (2, 2)

    def test_ragged_operand(self):
        with pytest.raises(ShapeMismatchError):
            multiply([[1, 2], [3]], [[1], [2]])

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_identity_left(self, int_matrix, n):
        m = int_matrix(n)
        assert multiply(identity(n), m) == m

    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_identity_right(self, int_matrix, n):
        m = int_matrix(n)
        assert multiply(m, identity(n)) == m

    def test_matches_numpy(self, rng):
        a = rng.integers(-9, 10, size=(4, 3))
        b = rng.integers(-9, 10, size=(3, 5))
        out = multiply(a, b)
        np.testing.assert_array_equal(np.array(out), a @ b)

    def test_accepts_numpy_operands(self):
        out = multiply(np.array([[1, 2], [3, 4]]), [[5, 6], [7, 8]])
        assert out == [[19, 22], [43, 50]]

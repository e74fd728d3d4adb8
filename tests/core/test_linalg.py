"""
Tests for the dense linear solver (transpose, multiply, solve).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pystatcore.core.compute.linalg import multiply, solve, transpose
from pystatcore.core.exceptions import (
    DimensionError,
    EmptyInputError,
    SingularMatrixError,
)


class TestTranspose:

    def test_rectangular(self):
        result = transpose([[1, 2, 3], [4, 5, 6]])
        assert_array_equal(result, [[1, 4], [2, 5], [3, 6]])

    def test_empty(self):
        assert transpose([]).shape == (0, 0)

    def test_returns_copy(self):
        m = np.array([[1.0, 2.0], [3.0, 4.0]])
        t = transpose(m)
        t[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError):
            transpose([[1.0, 2.0], [3.0]])


class TestMultiply:

    def test_matrix_matrix(self):
        result = multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])
        assert_array_equal(result, [[19, 22], [43, 50]])

    def test_matrix_vector(self):
        result = multiply([[1, 2], [3, 4]], [1, 1])
        assert result.shape == (2,)
        assert_array_equal(result, [3, 7])

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="Inner dimensions"):
            multiply([[1, 2, 3]], [[1, 2]])

    def test_empty_operand(self):
        with pytest.raises(DimensionError):
            multiply([], [[1.0]])


class TestSolve:

    def test_diagonal(self):
        assert_allclose(solve([[2, 0], [0, 3]], [4, 9]), [2.0, 3.0])

    def test_requires_pivoting(self):
        """A zero leading entry is handled by the row swap."""
        assert_allclose(solve([[0, 1], [1, 0]], [2, 3]), [3.0, 2.0])

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((6, 6)) + 6 * np.eye(6)
        b = rng.standard_normal(6)
        assert_allclose(solve(A, b), np.linalg.solve(A, b), rtol=1e-10)

    def test_solution_satisfies_system(self, rng):
        A = rng.standard_normal((4, 4)) + 4 * np.eye(4)
        b = rng.standard_normal(4)
        x = solve(A, b)
        assert_allclose(A @ x, b, atol=1e-12)

    def test_singular_raises(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            solve([[1, 2], [2, 4]], [1, 1])
        assert exc_info.value.pivot_index == 1
        assert exc_info.value.pivot_value <= 1e-10

    def test_zero_matrix_singular_at_first_pivot(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            solve([[0.0, 0.0], [0.0, 0.0]], [1.0, 1.0])
        assert exc_info.value.pivot_index == 0

    def test_inputs_not_mutated(self):
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        b = np.array([2.0, 3.0])
        solve(A, b)
        assert_array_equal(A, [[0.0, 1.0], [1.0, 0.0]])
        assert_array_equal(b, [2.0, 3.0])

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            solve([[1, 2, 3], [4, 5, 6]], [1, 2])

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionError):
            solve([[1, 0], [0, 1]], [1, 2, 3])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            solve(np.zeros((0, 0)), [])

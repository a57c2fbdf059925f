"""Tests for the dense inversion routine and its errors."""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from CacheMatrix import DEFAULT_TOL, ShapeError, SingularMatrixError, dense_solve, rcond


def test_inverse_of_diagonal_matrix():
    inv = dense_solve([[2.0, 0.0], [0.0, 2.0]])
    np.testing.assert_array_equal(inv, [[0.5, 0.0], [0.0, 0.5]])


def test_inverse_matches_numpy_for_random_matrix():
    rng = np.random.default_rng(7)
    a = rng.standard_normal((50, 50))

    inv = dense_solve(a)

    np.testing.assert_allclose(inv, np.linalg.inv(a), rtol=1e-9, atol=1e-12)
    np.testing.assert_allclose(a @ inv, np.eye(50), atol=1e-10)


def test_right_hand_side_solves_linear_system():
    a = np.array([[2.0, 0.0], [0.0, 4.0]])
    x = dense_solve(a, np.array([2.0, 4.0]))
    np.testing.assert_allclose(x, [1.0, 1.0])


def test_scipy_options_are_forwarded():
    a = np.array([[4.0, 1.0], [1.0, 3.0]])
    b = np.array([[1.0], [2.0]])
    x = dense_solve(a, b, assume_a="pos", check_finite=False)
    np.testing.assert_allclose(a @ x, b)


@pytest.mark.parametrize(
    "mat",
    [
        [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
        [1.0, 2.0, 3.0],
        np.empty((0, 0)),
        np.ones((2, 2, 2)),
    ],
)
def test_bad_shapes_raise_shape_error(mat):
    with pytest.raises(ShapeError):
        dense_solve(mat)


def test_shape_error_is_value_error():
    with pytest.raises(ValueError):
        dense_solve([[1.0, 2.0]])


def test_mismatched_right_hand_side():
    with pytest.raises(ShapeError):
        dense_solve(np.eye(3), np.ones(2))


def test_exactly_singular_matrix():
    with pytest.raises(SingularMatrixError) as info:
        dense_solve([[1.0, 2.0], [2.0, 4.0]])
    assert isinstance(info.value, np.linalg.LinAlgError)


def test_zero_matrix_is_singular():
    with pytest.raises(SingularMatrixError):
        dense_solve(np.zeros((3, 3)))


def test_tolerance_controls_near_singular_matrices():
    a = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
    assert rcond(a) > DEFAULT_TOL

    dense_solve(a)
    dense_solve(a, tol=0)
    with pytest.raises(SingularMatrixError):
        dense_solve(a, tol=1e-10)


def test_rcond_of_identity():
    assert rcond(np.eye(4)) == pytest.approx(1.0)


def test_default_tolerance_rejects_numerically_singular_matrix():
    a = np.arange(1.0, 10.0).reshape(3, 3)
    assert rcond(a) < DEFAULT_TOL

    with pytest.raises(SingularMatrixError):
        dense_solve(a)
    with pytest.raises(SingularMatrixError):
        dense_solve(a, np.ones(3))


def test_tolerance_on_right_hand_side_path():
    a = np.array([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
    b = np.array([2.0, 2.0])

    np.testing.assert_allclose(dense_solve(a, b), [2.0, 0.0], atol=1e-3)
    with pytest.raises(SingularMatrixError):
        dense_solve(a, b, tol=1e-10)


def test_rcond_of_zero_matrix():
    assert rcond(np.zeros((3, 3))) == 0.0

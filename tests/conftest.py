"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def r_example_matrix():
    """The 2x2 example from R's makeCacheMatrix docs: matrix(c(1,1,0,2), nrow=2)."""
    return np.array([[1.0, 0.0], [1.0, 2.0]])


@pytest.fixture
def r_example_inverse():
    """solve(matrix(c(1,1,0,2), nrow=2)) in R."""
    return np.array([[1.0, 0.0], [-0.5, 0.5]])


@pytest.fixture
def well_conditioned(rng):
    """Random 6x6 matrix, diagonally dominated so cond(a) is small."""
    n = 6
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.fixture
def singular_matrix():
    """Rank-1 2x2 matrix: second row is twice the first."""
    return np.array([[1.0, 2.0], [2.0, 4.0]])


@pytest.fixture
def nearly_singular_matrix():
    """Invertible in exact arithmetic but rcond far below 1e-10."""
    return np.array([[1.0, 1.0], [1.0, 1.0 + 1e-13]])

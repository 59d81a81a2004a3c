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
def tridiagonal():
    """Symmetric 3x3 with determinant 4 and a dyadic (exactly representable) inverse."""
    return [[2, -1, 0], [-1, 2, -1], [0, -1, 2]]


@pytest.fixture
def unimodular():
    """Non-symmetric 3x3 with determinant 1; adjugate equals inverse."""
    return [[1, 2, 3], [0, 1, 4], [5, 6, 0]]


@pytest.fixture
def singular():
    """Rank-deficient 2x2 (second row is twice the first)."""
    return [[1, 2], [2, 4]]




@pytest.fixture
def int_matrix(rng):
    """Factory for n x n matrices of Python ints drawn from [low, high)."""
    def make(n, low=-5, high=6):
        return rng.integers(low, high, size=(n, n)).tolist()
    return make

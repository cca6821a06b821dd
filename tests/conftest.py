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
def matrix_a():
    """3x3 integer matrix with det = -17."""
    return np.array([[1.0, 2.0, 3.0],
                     [3.0, 5.0, 6.0],
                     [4.0, 1.0, 8.0]])


@pytest.fixture
def matrix_b():
    """3x3 singular matrix (rows 0 and 2 equal)."""
    return np.array([[3.0, 5.0, 1.0],
                     [4.0, 7.0, 2.0],
                     [3.0, 5.0, 1.0]])


@pytest.fixture
def rref_scenario():
    """3x4 augmented system with a unique solution."""
    return np.array([[5.0, -6.0, -7.0, 7.0],
                     [3.0, -2.0, 5.0, -17.0],
                     [2.0, 4.0, -3.0, 29.0]])

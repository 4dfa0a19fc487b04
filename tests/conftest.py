"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 real matrix made diagonally dominant (always invertible)."""
    data = rng.standard_normal((5, 5))
    data += np.diag(np.sum(np.abs(data), axis=1) + 1.0)
    return data


@pytest.fixture
def well_conditioned_complex(rng):
    """Random 4x4 complex matrix made diagonally dominant."""
    data = rng.standard_normal((4, 4)) + 1j * rng.standard_normal((4, 4))
    data += np.diag(np.sum(np.abs(data), axis=1) + 1.0)
    return data


@pytest.fixture
def singular_3x3():
    """3x3 matrix with two identical rows."""
    return Matrix([[1, 2, 3], [1, 2, 3], [4, 5, 6]])

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
def line_data(rng):
    """Noisy straight line y = 2 + 3x."""
    x = np.linspace(0.0, 10.0, 50)
    y = 2.0 + 3.0 * x + rng.standard_normal(50) * 0.5
    return x, y


@pytest.fixture
def sample():
    """Small sample with mean 5 and population variance 4."""
    return np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])

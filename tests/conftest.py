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
def simple_regression_data(rng):
    """Three predictor columns, intercept model, low noise."""
    n = 100
    columns = rng.standard_normal((3, n))
    beta_true = np.array([0.5, 1.0, -2.0, 0.5])  # intercept first
    y = beta_true[0] + beta_true[1:] @ columns + rng.standard_normal(n) * 0.1
    return columns, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (should fail)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2  # Perfect collinearity
    y = rng.standard_normal(n)
    return [x1, x2, x3], y


@pytest.fixture
def perfect_line():
    """y = 2x exactly."""
    return [[1.0, 2.0, 3.0, 4.0]], [2.0, 4.0, 6.0, 8.0]

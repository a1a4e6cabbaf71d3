import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def separable_line_data():
    """100 noiseless points on either side of x2 = x1 + 1, labelled 1 above the line."""
    rng = np.random.default_rng(0)
    x1 = rng.uniform(-3.0, 3.0, size=100)
    above = rng.integers(0, 2, size=100)
    offset = rng.uniform(0.5, 2.0, size=100)
    x2 = x1 + 1 + np.where(above == 1, offset, -offset)
    return np.column_stack([x1, x2]), above.astype(float)


@pytest.fixture
def four_points():
    X = np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 5.0], [2.0, 6.0]])
    y = np.array([0.0, 0.0, 1.0, 1.0])
    return X, y

"""
Shared fixtures for integration tests.
"""

import numpy as np
import pytest


@pytest.fixture
def xor_inputs():
    """XOR inputs (list format)."""
    return [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]


@pytest.fixture
def xor_outputs():
    """XOR expected outputs (list format)."""
    return [0.0, 1.0, 1.0, 0.0]


@pytest.fixture
def city_distances():
    """Distances between 6 cities placed on a circle; the best tour visits them in order."""
    angles = np.linspace(0.0, 2 * np.pi, 6, endpoint=False)
    points = np.column_stack([np.cos(angles), np.sin(angles)])
    return np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)

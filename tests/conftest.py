"""
Pytest configuration and shared fixtures for the parking visualizer tests.
"""
import numpy as np
import pytest

from parkingvisualizer.model.algorithms import list_algorithms


ALGORITHM_NAMES = list_algorithms()


@pytest.fixture
def rng():
    """Deterministic generator so failures are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def example_sizes():
    return [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]


@pytest.fixture(params=ALGORITHM_NAMES)
def algorithm(request):
    """Runs the test once per registered sort algorithm."""
    return request.param

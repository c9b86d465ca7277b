import numpy as np
import pytest

from tourbench.tasks.tsp import Instance


@pytest.fixture
def square():
    return Instance.from_points([(0, 0), (0, 10), (10, 10), (10, 0)])


@pytest.fixture
def crossed_square():
    return Instance.from_points([(0, 0), (10, 10), (0, 10), (10, 0)])


@pytest.fixture
def random_instance():
    rng = np.random.default_rng(7)
    return Instance.from_points(rng.uniform(0, 1000, size=(120, 2)))

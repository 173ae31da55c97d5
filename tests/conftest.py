import os

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from instance import TSPInstance


DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def square():
    return TSPInstance(np.array([[0, 0], [0, 10], [10, 10], [10, 0]]), name="square4")


@pytest.fixture
def random_instance():
    rng = np.random.default_rng(42)
    return TSPInstance(rng.uniform(0, 1000, size=(100, 2)), name="random100")

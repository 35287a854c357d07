import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from grayscott import Config, SimulationController


@pytest.fixture
def small_config():
    return Config(width=40, height=30)


@pytest.fixture
def controller(small_config):
    return SimulationController(small_config)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")

import random

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from neural_arena.core import build_network, forward_pass
from neural_arena.data import generate_data
from neural_arena.utils import decision_grid, plot_decision_boundary, plot_training_history


def test_decision_grid_matches_forward_pass() -> None:
    network = build_network([2, 4, 1], rng=random.Random(0))
    grid = decision_grid(network, resolution=5)
    assert grid.shape == (5, 5)
    assert np.all((grid > 0.0) & (grid < 1.0))
    probe = network.copy()
    assert grid[4, 0] == pytest.approx(forward_pass((0.0, 1.0), probe))
    assert grid[1, 3] == pytest.approx(forward_pass((0.75, 0.25), probe))


def test_decision_grid_leaves_network_state_alone() -> None:
    network = build_network([2, 3, 1], rng=random.Random(1))
    forward_pass((0.2, 0.8), network)
    activations = [n.activation for n in network.neurons]
    decision_grid(network, resolution=4)
    assert [n.activation for n in network.neurons] == activations
    with pytest.raises(ValueError):
        decision_grid(network, resolution=1)


def test_plots_render() -> None:
    rng = random.Random(2)
    network = build_network([2, 4, 1], rng=rng)
    data = generate_data("moons", 40, rng=rng)
    ax = plot_decision_boundary(network, data, resolution=10)
    assert ax.get_title() == "Decision Boundary"
    fig = plot_training_history([0.7, 0.6, 0.5], [50.0, 60.0, 70.0], target_accuracy=82.0)
    assert len(fig.axes) == 2
    plt.close("all")

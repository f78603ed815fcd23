import math
import random

import pytest

from neural_arena.core import build_network
from neural_arena.data import DataPoint, generate_data
from neural_arena.training import binary_cross_entropy, compute_accuracy


def _constant_network(bias: float):
    network = build_network([2, 1], rng=random.Random(0))
    for conn in network.connections:
        conn.weight = 0.0
    network.output_neuron.bias = bias
    return network


def test_accuracy_is_perfect_when_bias_forces_class_one() -> None:
    data = [DataPoint(random.random(), random.random(), 1) for _ in range(25)]
    assert compute_accuracy(data, _constant_network(3.0)) == 100.0
    assert compute_accuracy(data, _constant_network(-3.0)) == 0.0


def test_threshold_counts_half_as_class_one() -> None:
    data = [DataPoint(0.2, 0.2, 1), DataPoint(0.8, 0.8, 0)]
    assert compute_accuracy(data, _constant_network(0.0)) == 50.0


def test_accuracy_is_a_percentage() -> None:
    rng = random.Random(1)
    for pattern in ("circle", "spiral", "clusters"):
        data = generate_data(pattern, 60, rng=rng)
        accuracy = compute_accuracy(data, build_network([2, 4, 1], rng=rng))
        assert 0.0 <= accuracy <= 100.0


def test_accuracy_rejects_empty_dataset() -> None:
    with pytest.raises(ValueError):
        compute_accuracy([], _constant_network(0.0))


def test_binary_cross_entropy_values() -> None:
    assert binary_cross_entropy(0.5, 0) == pytest.approx(math.log(2.0))
    assert binary_cross_entropy(0.9, 1) == pytest.approx(-math.log(0.9))
    assert binary_cross_entropy(0.0, 1) == pytest.approx(-math.log(1e-7))
    assert binary_cross_entropy(1.0, 0) == pytest.approx(-math.log(1e-7), rel=1e-6)
    assert math.isfinite(binary_cross_entropy(-3.0, 0))

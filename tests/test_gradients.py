import random

import pytest

torch = pytest.importorskip("torch")

from neural_arena.core import Activation, build_network
from neural_arena.data import generate_data
from neural_arena.training import numerical_gradients


def _autograd_gradients(network, batch):
    """Mean cross-entropy gradients of a [2, hidden, 1] network via torch autograd."""

    hidden = network.layer_sizes[1]
    w1 = torch.zeros(hidden, 2, dtype=torch.float64)
    w2 = torch.zeros(1, hidden, dtype=torch.float64)
    for conn in network.connections:
        source = network.neurons[conn.source]
        target = network.neurons[conn.target]
        if source.layer == 0:
            w1[target.index, source.index] = conn.weight
        else:
            w2[0, source.index] = conn.weight
    b1 = torch.tensor([n.bias for n in network.layer(1)], dtype=torch.float64)
    b2 = torch.tensor([network.output_neuron.bias], dtype=torch.float64)
    params = [w1, b1, w2, b2]
    for param in params:
        param.requires_grad_(True)

    x = torch.tensor([[p.x, p.y] for p in batch], dtype=torch.float64)
    y = torch.tensor([[float(p.label)] for p in batch], dtype=torch.float64)
    h = torch.tanh(x @ w1.T + b1)
    probs = torch.sigmoid(h @ w2.T + b2)
    loss = torch.nn.functional.binary_cross_entropy(probs, y)
    loss.backward()
    return w1.grad, b1.grad, w2.grad, b2.grad


def test_finite_differences_match_autograd() -> None:
    rng = random.Random(0)
    network = build_network([2, 3, 1], rng=rng)
    for neuron in network.layer(1):
        neuron.activation_fn = Activation.TANH
    batch = generate_data("circle", 16, rng=rng)

    estimate = numerical_gradients(batch, network)
    g_w1, g_b1, g_w2, g_b2 = _autograd_gradients(network, batch)

    for conn, grad in zip(network.connections, estimate.weights):
        source = network.neurons[conn.source]
        target = network.neurons[conn.target]
        if source.layer == 0:
            expected = float(g_w1[target.index, source.index])
        else:
            expected = float(g_w2[0, source.index])
        assert grad == pytest.approx(expected, abs=5e-3)
    for neuron in network.layer(1):
        assert estimate.biases[neuron.id] == pytest.approx(float(g_b1[neuron.index]), abs=5e-3)
    assert estimate.biases[network.output_neuron.id] == pytest.approx(float(g_b2[0]), abs=5e-3)

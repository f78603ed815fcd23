"""Network data model, builder and forward evaluation."""

from .activations import Activation, apply_activation, relu, sigmoid, tanh
from .network import Connection, Network, Neuron, build_network, forward_pass, predict

__all__ = [
    "Activation",
    "Connection",
    "Network",
    "Neuron",
    "apply_activation",
    "build_network",
    "forward_pass",
    "predict",
    "relu",
    "sigmoid",
    "tanh",
]

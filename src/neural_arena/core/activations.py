"""Scalar activation functions used by the network neurons."""
from __future__ import annotations

from enum import Enum
import math


class Activation(str, Enum):
    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"


def sigmoid(x: float) -> float:
    # exp of a large positive argument overflows, so branch on the sign
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def relu(x: float) -> float:
    return x if x > 0.0 else 0.0


def tanh(x: float) -> float:
    return math.tanh(x)


_FUNCTIONS = {
    Activation.RELU: relu,
    Activation.SIGMOID: sigmoid,
    Activation.TANH: tanh,
}


def apply_activation(x: float, fn: Activation) -> float:
    """Apply the activation function identified by ``fn`` to ``x``."""

    return _FUNCTIONS[fn](x)

"""Topology edits bounded by a neuron budget.

Every edit returns a new tuple of layer widths; the caller rebuilds the
network from it. The input layer (2 neurons) and the output layer (1 neuron)
never change width.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .core.activations import Activation
from .core.network import Network

Layers = Tuple[int, ...]


class ArchitectureError(ValueError):
    """Raised when a topology edit is not allowed."""


def _check_hidden(layers: Sequence[int], layer: int) -> None:
    if not 0 < layer < len(layers) - 1:
        raise ArchitectureError(f"layer {layer} is not a hidden layer")


def validate_layers(layers: Sequence[int], max_neurons: int, *, max_layers: int = 6) -> Layers:
    """Check a complete topology against the editing rules and return it as a tuple."""

    layers = tuple(layers)
    if len(layers) < 2 or layers[0] != 2 or layers[-1] != 1:
        raise ArchitectureError(f"topology {list(layers)} must start with 2 inputs and end with 1 output")
    if any(width < 1 for width in layers[1:-1]):
        raise ArchitectureError("a hidden layer keeps at least one neuron")
    if len(layers) > max_layers:
        raise ArchitectureError(f"at most {max_layers} layers are allowed")
    if sum(layers) > max_neurons:
        raise ArchitectureError(f"neuron budget of {max_neurons} reached")
    return layers


def add_neuron(layers: Sequence[int], layer: int, max_neurons: int) -> Layers:
    _check_hidden(layers, layer)
    if sum(layers) >= max_neurons:
        raise ArchitectureError(f"neuron budget of {max_neurons} reached")
    updated = list(layers)
    updated[layer] += 1
    return tuple(updated)


def remove_neuron(layers: Sequence[int], layer: int) -> Layers:
    _check_hidden(layers, layer)
    if layers[layer] <= 1:
        raise ArchitectureError("a hidden layer keeps at least one neuron")
    updated = list(layers)
    updated[layer] -= 1
    return tuple(updated)


def add_layer(layers: Sequence[int], max_neurons: int, *, max_layers: int = 6, width: int = 3) -> Layers:
    """Insert a hidden layer of ``width`` neurons just before the output layer."""

    if len(layers) >= max_layers:
        raise ArchitectureError(f"at most {max_layers} layers are allowed")
    if sum(layers) + width > max_neurons:
        raise ArchitectureError(f"neuron budget of {max_neurons} reached")
    updated = list(layers)
    updated.insert(len(updated) - 1, width)
    return tuple(updated)


def remove_layer(layers: Sequence[int]) -> Layers:
    """Drop the hidden layer closest to the output."""

    if len(layers) <= 2:
        raise ArchitectureError("there is no hidden layer to remove")
    updated = list(layers)
    del updated[-2]
    return tuple(updated)


def set_activation(network: Network, neuron_id: int, fn: Activation | str) -> Network:
    """Return a copy of ``network`` with the activation of one neuron replaced.

    Input neurons only relay the data, so their activation cannot be set.
    """

    if not 0 <= neuron_id < network.neuron_count:
        raise ArchitectureError(f"unknown neuron id {neuron_id}")
    if network.neurons[neuron_id].layer == 0:
        raise ArchitectureError("input neurons have no activation function")
    try:
        activation = Activation(fn)
    except ValueError:
        raise ArchitectureError(f"unknown activation function {fn!r}") from None
    updated = network.copy()
    updated.neurons[neuron_id].activation_fn = activation
    return updated

"""Dense feed-forward network built from plain Python records.

Neurons and connections live in two flat lists (arenas) and refer to each
other by integer position. The topology indices (per-layer neuron ranges and
per-neuron incoming connection ids) are computed once when the network is
built and shared between copies, so a forward pass never searches for a
neuron or a connection.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import random
from typing import List, Sequence, Tuple

from .activations import Activation, apply_activation

LayerRange = Tuple[int, int]


@dataclass(slots=True)
class Neuron:
    """A single unit of the network.

    ``x`` and ``y`` are normalised display coordinates: the layer position
    across the network and the neuron position within its layer.
    """

    id: int
    layer: int
    index: int
    x: float
    y: float
    bias: float = 0.0
    activation: float = 0.0
    activation_fn: Activation = Activation.RELU

    @property
    def key(self) -> str:
        return f"n-{self.layer}-{self.index}"


@dataclass(slots=True)
class Connection:
    """Weighted edge from ``source`` to ``target`` (neuron ids)."""

    id: int
    source: int
    target: int
    weight: float
    signal: float = 0.0


def _layer_ranges(layer_sizes: Sequence[int]) -> tuple[LayerRange, ...]:
    ranges = []
    start = 0
    for size in layer_sizes:
        ranges.append((start, start + size))
        start += size
    return tuple(ranges)


class Network:
    """Neuron and connection arenas plus the indices needed to evaluate them."""

    def __init__(self, layer_sizes: Sequence[int], neurons: List[Neuron], connections: List[Connection]) -> None:
        self.layer_sizes = tuple(layer_sizes)
        self.neurons = neurons
        self.connections = connections
        self.layer_ranges = _layer_ranges(self.layer_sizes)
        incoming: list[list[int]] = [[] for _ in neurons]
        for conn in connections:
            incoming[conn.target].append(conn.id)
        self.incoming = tuple(tuple(ids) for ids in incoming)

    @property
    def neuron_count(self) -> int:
        return len(self.neurons)

    @property
    def connection_count(self) -> int:
        return len(self.connections)

    @property
    def output_neuron(self) -> Neuron | None:
        if not self.neurons:
            return None
        start, _ = self.layer_ranges[-1]
        return self.neurons[start]

    def layer(self, layer_idx: int) -> list[Neuron]:
        start, stop = self.layer_ranges[layer_idx]
        return self.neurons[start:stop]

    def neuron(self, layer_idx: int, index: int) -> Neuron:
        start, stop = self.layer_ranges[layer_idx]
        if not 0 <= index < stop - start:
            raise IndexError(f"layer {layer_idx} has no neuron {index}")
        return self.neurons[start + index]

    def copy(self) -> "Network":
        """Return a network with fresh neuron/connection records.

        Parameters, activations and signals are copied; the topology indices
        are immutable and shared with the original.
        """

        clone = Network.__new__(Network)
        clone.layer_sizes = self.layer_sizes
        clone.layer_ranges = self.layer_ranges
        clone.incoming = self.incoming
        clone.neurons = [replace(neuron) for neuron in self.neurons]
        clone.connections = [replace(conn) for conn in self.connections]
        return clone

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        sizes = ", ".join(str(size) for size in self.layer_sizes)
        return f"Network(layers=[{sizes}], connections={len(self.connections)})"


def build_network(layer_sizes: Sequence[int], *, rng: random.Random | None = None) -> Network:
    """Build a fully connected network with randomly initialised parameters.

    Biases are drawn from ``U(-0.25, 0.25)`` and weights from ``U(-0.5, 0.5)``.
    The output layer uses ``sigmoid``; every other layer uses ``relu``.
    """

    if not layer_sizes:
        raise ValueError("layer_sizes must not be empty")
    if any(size <= 0 for size in layer_sizes):
        raise ValueError("layer widths must be positive")
    rng = rng or random.Random()

    total_layers = len(layer_sizes)
    neurons: list[Neuron] = []
    for layer_idx, size in enumerate(layer_sizes):
        is_output = layer_idx == total_layers - 1
        for i in range(size):
            neurons.append(
                Neuron(
                    id=len(neurons),
                    layer=layer_idx,
                    index=i,
                    x=0.5 if total_layers == 1 else layer_idx / (total_layers - 1),
                    y=0.5 if size == 1 else i / (size - 1),
                    bias=rng.uniform(-0.25, 0.25),
                    activation_fn=Activation.SIGMOID if is_output else Activation.RELU,
                )
            )

    ranges = _layer_ranges(layer_sizes)
    connections: list[Connection] = []
    for (src_start, src_stop), (dst_start, dst_stop) in zip(ranges, ranges[1:]):
        for source in range(src_start, src_stop):
            for target in range(dst_start, dst_stop):
                connections.append(
                    Connection(
                        id=len(connections),
                        source=source,
                        target=target,
                        weight=rng.uniform(-0.5, 0.5),
                    )
                )

    return Network(layer_sizes, neurons, connections)


def forward_pass(inputs: Sequence[float], network: Network) -> float:
    """Evaluate ``network`` on ``inputs`` and return the output activation.

    Every neuron's ``activation`` and every connection's ``signal`` are
    refreshed in place. Missing input values count as zero; a network
    without neurons evaluates to ``0.0``.
    """

    neurons = network.neurons
    if not neurons:
        return 0.0

    start, stop = network.layer_ranges[0]
    for i, neuron_id in enumerate(range(start, stop)):
        neurons[neuron_id].activation = float(inputs[i]) if i < len(inputs) else 0.0

    connections = network.connections
    incoming = network.incoming
    for begin, end in network.layer_ranges[1:]:
        for neuron_id in range(begin, end):
            neuron = neurons[neuron_id]
            total = neuron.bias
            for conn_id in incoming[neuron_id]:
                conn = connections[conn_id]
                signal = neurons[conn.source].activation * conn.weight
                conn.signal = signal
                total += signal
            neuron.activation = apply_activation(total, neuron.activation_fn)

    output_start, _ = network.layer_ranges[-1]
    return neurons[output_start].activation


def predict(inputs: Sequence[float], network: Network) -> int:
    """Classify ``inputs`` as ``1`` when the network output reaches 0.5."""

    return 1 if forward_pass(inputs, network) >= 0.5 else 0

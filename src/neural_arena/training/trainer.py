"""Finite-difference gradient descent on a copy of the network."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..config import TrainerConfig
from ..core.network import Connection, Network, Neuron, forward_pass
from ..data.patterns import DataPoint
from .metrics import point_loss


@dataclass(slots=True)
class StepResult:
    """Network produced by :func:`train_step` and the loss reported for the step."""

    network: Network
    loss: float


@dataclass(slots=True)
class GradientEstimate:
    """Batch-averaged finite-difference gradients, in arena order."""

    weights: list[float] = field(default_factory=list)
    biases: dict[int, float] = field(default_factory=dict)


def sample_batch(
    data: Sequence[DataPoint], batch_size: int, rng: random.Random
) -> List[DataPoint]:
    """Shuffle a copy of ``data`` and return its first ``batch_size`` points."""

    pool = list(data)
    rng.shuffle(pool)
    return pool[: min(batch_size, len(pool))]


def _estimate(
    batch: Sequence[DataPoint],
    network: Network,
    param: Connection | Neuron,
    attribute: str,
    config: TrainerConfig,
) -> Tuple[float, float]:
    """Return ``(gradient_sum, original_loss_sum)`` for one parameter over ``batch``."""

    epsilon = config.epsilon
    floor = config.probability_floor
    gradient_sum = 0.0
    loss_sum = 0.0
    for point in batch:
        original = point_loss(point, network, floor)
        loss_sum += original
        value = getattr(param, attribute)
        setattr(param, attribute, value + epsilon)
        perturbed = point_loss(point, network, floor)
        setattr(param, attribute, value)
        gradient_sum += (perturbed - original) / epsilon
    return gradient_sum, loss_sum


def _clamp(value: float, bound: float) -> float:
    return max(-bound, min(bound, value))


def numerical_gradients(
    batch: Sequence[DataPoint],
    network: Network,
    *,
    config: TrainerConfig | None = None,
) -> GradientEstimate:
    """Estimate the mean loss gradient of every trainable parameter.

    Nothing is updated, so every estimate is taken at the same point in
    parameter space. Input-layer biases are not trainable and are skipped.
    """

    if not batch:
        raise ValueError("cannot estimate gradients on an empty batch")
    config = config or TrainerConfig()
    estimate = GradientEstimate()
    for conn in network.connections:
        gradient_sum, _ = _estimate(batch, network, conn, "weight", config)
        estimate.weights.append(gradient_sum / len(batch))
    for neuron in network.neurons:
        if neuron.layer == 0:
            continue
        gradient_sum, _ = _estimate(batch, network, neuron, "bias", config)
        estimate.biases[neuron.id] = gradient_sum / len(batch)
    return estimate


def train_step(
    data: Sequence[DataPoint],
    network: Network,
    learning_rate: float = 0.1,
    *,
    rng: random.Random | None = None,
    config: TrainerConfig | None = None,
) -> StepResult:
    """Run one optimisation step and return the updated network.

    ``network`` and ``data`` are left untouched. Parameters are updated one
    at a time, weights first and then biases, so each gradient estimate sees
    the updates made before it. The reported loss sums the unperturbed losses
    seen while estimating weight gradients and divides by
    ``batch_size * connection_count``; it tracks training progress but is not
    the mean cross-entropy of the batch.
    """

    if not data:
        raise ValueError("cannot train on an empty dataset")
    config = config or TrainerConfig()
    rng = rng or random.Random()

    working = network.copy()
    batch = sample_batch(data, config.batch_size, rng)
    batch_size = len(batch)
    total_loss = 0.0

    for conn in working.connections:
        gradient_sum, loss_sum = _estimate(batch, working, conn, "weight", config)
        total_loss += loss_sum
        conn.weight = _clamp(conn.weight - learning_rate * (gradient_sum / batch_size), config.weight_clip)

    for neuron in working.neurons:
        if neuron.layer == 0:
            continue
        gradient_sum, _ = _estimate(batch, working, neuron, "bias", config)
        neuron.bias = _clamp(neuron.bias - learning_rate * (gradient_sum / batch_size), config.bias_clip)

    # refresh activations and signals for display
    forward_pass(batch[0].inputs, working)

    connection_count = working.connection_count
    loss = total_loss / (batch_size * connection_count) if connection_count else 0.0
    return StepResult(network=working, loss=loss)

"""Loss and accuracy measurements."""
from __future__ import annotations

import math
from typing import Sequence

from ..core.network import Network, forward_pass
from ..data.patterns import DataPoint


def binary_cross_entropy(probability: float, label: int, floor: float = 1e-7) -> float:
    """Cross-entropy of a single prediction with the probability clamped away from 0 and 1."""

    p = min(max(probability, floor), 1.0 - floor)
    return -(label * math.log(p) + (1 - label) * math.log(1.0 - p))


def point_loss(point: DataPoint, network: Network, floor: float = 1e-7) -> float:
    return binary_cross_entropy(forward_pass(point.inputs, network), point.label, floor)


def compute_accuracy(data: Sequence[DataPoint], network: Network) -> float:
    """Return the percentage of ``data`` classified correctly at the 0.5 threshold."""

    if not data:
        raise ValueError("cannot score an empty dataset")
    correct = 0
    for point in data:
        predicted = 1 if forward_pass(point.inputs, network) >= 0.5 else 0
        if predicted == point.label:
            correct += 1
    return correct / len(data) * 100.0

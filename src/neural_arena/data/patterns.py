"""Synthetic two-class point sets on the unit square."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List


class Pattern(str, Enum):
    LINEAR = "linear"
    CIRCLE = "circle"
    XOR = "xor"
    MOONS = "moons"
    SPIRAL = "spiral"
    CLUSTERS = "clusters"


@dataclass(frozen=True, slots=True)
class DataPoint:
    """A labelled point; coordinates lie in the unit square up to noise."""

    x: float
    y: float
    label: int

    @property
    def inputs(self) -> tuple[float, float]:
        return (self.x, self.y)


def _linear(count: int, rng: random.Random) -> List[DataPoint]:
    half = count // 2
    points = [DataPoint(rng.random() * 0.45 + 0.05, rng.random() * 0.9 + 0.05, 0) for _ in range(half)]
    points += [DataPoint(rng.random() * 0.45 + 0.5, rng.random() * 0.9 + 0.05, 1) for _ in range(half)]
    return points


def _circle(count: int, rng: random.Random) -> List[DataPoint]:
    half = count // 2
    points: List[DataPoint] = []
    for label, (r_min, r_span) in enumerate(((0.0, 0.2), (0.25, 0.2))):
        for _ in range(half):
            angle = rng.random() * 2.0 * math.pi
            r = r_min + rng.random() * r_span
            points.append(DataPoint(0.5 + r * math.cos(angle), 0.5 + r * math.sin(angle), label))
    return points


def _xor(count: int, rng: random.Random) -> List[DataPoint]:
    points: List[DataPoint] = []
    for _ in range(count):
        x = rng.random()
        y = rng.random()
        noise = (rng.random() - 0.5) * 0.1
        # label from the clean quadrant, noise applied afterwards
        label = int((x > 0.5) != (y > 0.5))
        points.append(DataPoint(x + noise * 0.5, y + noise * 0.5, label))
    return points


def _moons(count: int, rng: random.Random) -> List[DataPoint]:
    half = count // 2
    points: List[DataPoint] = []
    arcs = ((0.0, 0.35, 0.4), (math.pi, 0.55, 0.55))
    for label, (offset, cx, cy) in enumerate(arcs):
        for i in range(half):
            angle = offset + math.pi * (i / half)
            noise = (rng.random() - 0.5) * 0.08
            points.append(DataPoint(cx + 0.25 * math.cos(angle) + noise, cy + 0.25 * math.sin(angle) + noise, label))
    return points


def _spiral(count: int, rng: random.Random) -> List[DataPoint]:
    half = count // 2
    points: List[DataPoint] = []
    for label, direction in enumerate((1.0, -1.0)):
        for i in range(half):
            t = (i / half) * 3.0 * math.pi
            r = t / (3.0 * math.pi) * 0.35
            noise = (rng.random() - 0.5) * 0.04
            points.append(
                DataPoint(
                    0.5 + direction * r * math.cos(t) + noise,
                    0.5 + direction * r * math.sin(t) + noise,
                    label,
                )
            )
    return points


CLUSTER_CENTERS = (
    (0.25, 0.25, 0),
    (0.75, 0.75, 0),
    (0.25, 0.75, 1),
    (0.75, 0.25, 1),
)


def _clusters(count: int, rng: random.Random) -> List[DataPoint]:
    points: List[DataPoint] = []
    for i in range(count):
        cx, cy, label = CLUSTER_CENTERS[i % len(CLUSTER_CENTERS)]
        points.append(DataPoint(cx + (rng.random() - 0.5) * 0.2, cy + (rng.random() - 0.5) * 0.2, label))
    return points


_GENERATORS: Dict[Pattern, Callable[[int, random.Random], List[DataPoint]]] = {
    Pattern.LINEAR: _linear,
    Pattern.CIRCLE: _circle,
    Pattern.XOR: _xor,
    Pattern.MOONS: _moons,
    Pattern.SPIRAL: _spiral,
    Pattern.CLUSTERS: _clusters,
}


def generate_data(pattern: Pattern | str, count: int = 200, *, rng: random.Random | None = None) -> List[DataPoint]:
    """Generate ``count`` labelled points following ``pattern``.

    Two-arm patterns (``linear``, ``circle``, ``moons``, ``spiral``) produce
    ``count // 2`` points per class, so an odd ``count`` yields one point
    fewer. ``xor`` and ``clusters`` produce exactly ``count`` points.
    """

    try:
        key = Pattern(pattern)
    except ValueError:
        raise ValueError(f"Unknown data pattern: {pattern!r}") from None
    if count < 0:
        raise ValueError("count must be non-negative")
    return _GENERATORS[key](count, rng or random.Random())

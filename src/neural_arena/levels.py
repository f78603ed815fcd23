"""Level catalogue for the arena campaign."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .data.patterns import Pattern


@dataclass(frozen=True, slots=True)
class Level:
    """Static description of one level.

    Parameters
    ----------
    target_accuracy:
        Accuracy percentage the network must reach to clear the level.
    initial_layers:
        Layer widths the network starts from. The first width is the number
        of inputs (2) and the last is the single output neuron.
    max_neurons:
        Budget for the total neuron count across all layers.
    """

    id: int
    name: str
    description: str
    target_accuracy: float
    data_pattern: Pattern
    initial_layers: Tuple[int, ...]
    max_neurons: int
    unlock_message: str

    def __post_init__(self) -> None:
        if not 0.0 < self.target_accuracy <= 100.0:
            raise ValueError("target_accuracy must lie in (0, 100]")
        if len(self.initial_layers) < 2:
            raise ValueError("initial_layers needs an input and an output layer")
        if self.initial_layers[0] != 2 or self.initial_layers[-1] != 1:
            raise ValueError("initial_layers must start with 2 inputs and end with 1 output")
        if any(width <= 0 for width in self.initial_layers):
            raise ValueError("layer widths must be positive")
        if sum(self.initial_layers) > self.max_neurons:
            raise ValueError("initial_layers exceed the neuron budget")


LEVELS: Tuple[Level, ...] = (
    Level(
        id=1,
        name="Linear Frontier",
        description="Separate two linearly separable classes. A warm-up for your neural cortex.",
        target_accuracy=90.0,
        data_pattern=Pattern.LINEAR,
        initial_layers=(2, 1),
        max_neurons=8,
        unlock_message="You mastered linear separation!",
    ),
    Level(
        id=2,
        name="The Circle Problem",
        description="Points inside vs outside a circle. You'll need hidden layers for this one.",
        target_accuracy=85.0,
        data_pattern=Pattern.CIRCLE,
        initial_layers=(2, 4, 1),
        max_neurons=12,
        unlock_message="Non-linear boundaries conquered!",
    ),
    Level(
        id=3,
        name="XOR Paradox",
        description="The classic XOR problem that stumped early perceptrons. Can you solve it?",
        target_accuracy=88.0,
        data_pattern=Pattern.XOR,
        initial_layers=(2, 4, 1),
        max_neurons=16,
        unlock_message="XOR defeated! Minsky would be proud.",
    ),
    Level(
        id=4,
        name="Crescent Moons",
        description="Two interlocking crescent shapes. Requires sophisticated decision boundaries.",
        target_accuracy=82.0,
        data_pattern=Pattern.MOONS,
        initial_layers=(2, 6, 4, 1),
        max_neurons=20,
        unlock_message="Beautiful boundary shaping!",
    ),
    Level(
        id=5,
        name="Spiral Descent",
        description="Two interleaving spirals. The ultimate test of your network architecture.",
        target_accuracy=78.0,
        data_pattern=Pattern.SPIRAL,
        initial_layers=(2, 8, 6, 4, 1),
        max_neurons=28,
        unlock_message="Spiral master! You've graduated Neural Network Arena.",
    ),
)


def get_level(level_id: int) -> Level:
    for level in LEVELS:
        if level.id == level_id:
            return level
    raise KeyError(f"Unknown level id: {level_id}")

"""Configuration dataclasses for the trainer and the training session."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class TrainerConfig:
    """Constants controlling a single finite-difference training step.

    Parameters
    ----------
    batch_size:
        Maximum number of data points sampled per step. Smaller datasets are
        used in full.
    epsilon:
        Perturbation applied to a parameter when estimating its gradient.
    weight_clip:
        Connection weights are clamped to ``[-weight_clip, weight_clip]``
        after every update.
    bias_clip:
        Neuron biases are clamped to ``[-bias_clip, bias_clip]`` after every
        update.
    probability_floor:
        Network outputs are clamped into
        ``[probability_floor, 1 - probability_floor]`` before taking the
        logarithm in the cross-entropy loss.
    """

    batch_size: int = 32
    epsilon: float = 1e-3
    weight_clip: float = 5.0
    bias_clip: float = 3.0
    probability_floor: float = 1e-7

    def __post_init__(self) -> None:
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if self.weight_clip <= 0 or self.bias_clip <= 0:
            raise ValueError("clip bounds must be positive")
        if not 0.0 < self.probability_floor < 0.5:
            raise ValueError("probability_floor must lie in (0, 0.5)")


@dataclass(slots=True)
class SessionConfig:
    """Settings for a :class:`~neural_arena.training.session.TrainingSession`."""

    learning_rate: float = 0.05
    point_count: int = 200
    history_length: int = 200
    max_layers: int = 6
    new_layer_width: int = 3
    seed: int | None = None
    trainer: TrainerConfig = field(default_factory=TrainerConfig)

    def __post_init__(self) -> None:
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.point_count <= 0:
            raise ValueError("point_count must be positive")
        if self.history_length <= 0:
            raise ValueError("history_length must be positive")
        if self.max_layers < 2:
            raise ValueError("max_layers must allow an input and an output layer")
        if self.new_layer_width <= 0:
            raise ValueError("new_layer_width must be positive")

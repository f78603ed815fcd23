"""Steppable training session for one level of the arena."""
from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Sequence

from tqdm.auto import tqdm

from .. import architecture
from ..config import SessionConfig
from ..core.activations import Activation
from ..core.network import Network, build_network
from ..data.patterns import DataPoint, generate_data
from ..levels import LEVELS, Level, get_level
from .metrics import compute_accuracy
from .trainer import train_step


@dataclass(slots=True)
class StepRecord:
    """Scalar metrics reported after one session step."""

    epoch: int
    loss: float
    accuracy: float
    won: bool


class TrainingSession:
    """Own the dataset, network and training history of the current level.

    The host application drives the session: :meth:`step` performs exactly
    one training step and one accuracy evaluation, and :meth:`run` repeats it
    for as long as :attr:`is_training` stays set. A step in progress always
    completes; :meth:`stop` takes effect before the next one.
    """

    def __init__(
        self,
        level: Level,
        *,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.level = level
        self.learning_rate = self.config.learning_rate
        self.completed_levels: set[int] = set()
        self.reset()

    @classmethod
    def from_level(
        cls,
        level_id: int,
        *,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "TrainingSession":
        return cls(get_level(level_id), config=config, rng=rng)

    def reset(self) -> None:
        """Regenerate the dataset and rebuild the level's initial network."""

        self.data: List[DataPoint] = generate_data(self.level.data_pattern, self.config.point_count, rng=self.rng)
        self.layer_sizes = tuple(self.level.initial_layers)
        self.network: Network = build_network(self.layer_sizes, rng=self.rng)
        self.epoch = 0
        self.loss = 0.0
        self.loss_history: Deque[float] = deque(maxlen=self.config.history_length)
        self.accuracy_history: Deque[float] = deque(maxlen=self.config.history_length)
        self.has_won = False
        self.is_training = False
        self.accuracy = compute_accuracy(self.data, self.network)

    @property
    def total_neurons(self) -> int:
        return sum(self.layer_sizes)

    def select_level(self, level_id: int) -> None:
        self.level = get_level(level_id)
        self.reset()

    def next_level(self) -> Level | None:
        """Move to the following level; returns ``None`` after the last one."""

        if self.level.id >= LEVELS[-1].id:
            return None
        self.select_level(self.level.id + 1)
        return self.level

    def set_learning_rate(self, learning_rate: float) -> None:
        if learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        self.learning_rate = learning_rate

    def start(self) -> None:
        self.is_training = True

    def stop(self) -> None:
        self.is_training = False

    def step(self) -> StepRecord:
        """Train for one step, re-score the network and check the level target."""

        result = train_step(
            self.data,
            self.network,
            self.learning_rate,
            rng=self.rng,
            config=self.config.trainer,
        )
        self.network = result.network
        self.loss = result.loss
        self.epoch += 1
        self.accuracy = compute_accuracy(self.data, self.network)
        self.loss_history.append(self.loss)
        self.accuracy_history.append(self.accuracy)

        if self.accuracy >= self.level.target_accuracy and not self.has_won:
            self.has_won = True
            self.completed_levels.add(self.level.id)
            self.is_training = False
        return StepRecord(epoch=self.epoch, loss=self.loss, accuracy=self.accuracy, won=self.has_won)

    def run(
        self,
        max_steps: int,
        *,
        should_continue: Callable[[StepRecord], bool] | None = None,
        progress: bool = False,
    ) -> list[StepRecord]:
        """Step until the level is won, training is stopped or ``max_steps`` is reached.

        ``should_continue`` is called after every step; returning ``False``
        stops the session before the next step.
        """

        if max_steps <= 0:
            raise ValueError("max_steps must be positive")
        self.start()
        records: list[StepRecord] = []
        with tqdm(total=max_steps, desc=f"Level {self.level.id}", disable=not progress) as bar:
            for _ in range(max_steps):
                if not self.is_training:
                    break
                record = self.step()
                records.append(record)
                bar.update(1)
                bar.set_postfix(loss=f"{record.loss:.4f}", accuracy=f"{record.accuracy:.1f}")
                if should_continue is not None and not should_continue(record):
                    self.stop()
        self.stop()
        return records

    # ---- architecture edits: every edit rebuilds the network from scratch ----

    def _rebuild(self, layer_sizes: tuple[int, ...]) -> None:
        self.layer_sizes = layer_sizes
        self.network = build_network(layer_sizes, rng=self.rng)
        self.accuracy = compute_accuracy(self.data, self.network)

    def set_layers(self, layer_sizes: Sequence[int]) -> None:
        """Replace the whole topology in one edit."""

        self._rebuild(
            architecture.validate_layers(layer_sizes, self.level.max_neurons, max_layers=self.config.max_layers)
        )

    def add_neuron(self, layer: int) -> None:
        self._rebuild(architecture.add_neuron(self.layer_sizes, layer, self.level.max_neurons))

    def remove_neuron(self, layer: int) -> None:
        self._rebuild(architecture.remove_neuron(self.layer_sizes, layer))

    def add_layer(self) -> None:
        self._rebuild(
            architecture.add_layer(
                self.layer_sizes,
                self.level.max_neurons,
                max_layers=self.config.max_layers,
                width=self.config.new_layer_width,
            )
        )

    def remove_layer(self) -> None:
        self._rebuild(architecture.remove_layer(self.layer_sizes))

    def set_activation(self, neuron_id: int, fn: Activation | str) -> None:
        self.network = architecture.set_activation(self.network, neuron_id, fn)

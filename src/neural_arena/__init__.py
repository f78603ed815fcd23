"""Neural network arena.

A small feed-forward network engine for two-dimensional binary
classification:
- synthetic labelled point sets,
- dense networks built from a list of layer widths,
- forward evaluation and accuracy scoring, and
- training by finite-difference gradient descent.

Levels, architecture edits and a steppable training session sit on top of
the engine so a front end only has to render state and forward user input.
"""

from .config import SessionConfig, TrainerConfig
from .core import Activation, Connection, Network, Neuron, build_network, forward_pass, predict
from .data import DataPoint, Pattern, generate_data
from .levels import LEVELS, Level, get_level
from .training import StepResult, TrainingSession, compute_accuracy, train_step

__all__ = [
    "Activation",
    "Connection",
    "DataPoint",
    "LEVELS",
    "Level",
    "Network",
    "Neuron",
    "Pattern",
    "SessionConfig",
    "StepResult",
    "TrainerConfig",
    "TrainingSession",
    "build_network",
    "compute_accuracy",
    "forward_pass",
    "generate_data",
    "get_level",
    "predict",
    "train_step",
]

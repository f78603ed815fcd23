"""Training utilities: loss, accuracy, the finite-difference trainer and sessions."""

from .metrics import binary_cross_entropy, compute_accuracy, point_loss
from .session import StepRecord, TrainingSession
from .trainer import GradientEstimate, StepResult, numerical_gradients, sample_batch, train_step

__all__ = [
    "GradientEstimate",
    "StepRecord",
    "StepResult",
    "TrainingSession",
    "binary_cross_entropy",
    "compute_accuracy",
    "numerical_gradients",
    "point_loss",
    "sample_batch",
    "train_step",
]

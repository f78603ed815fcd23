"""Utility helpers for the arena."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from .visualization import decision_grid, plot_decision_boundary, plot_training_history

__all__ = [
    "decision_grid",
    "plot_decision_boundary",
    "plot_training_history",
]


def __getattr__(name: str):  # pragma: no cover - small wrapper
    if name in __all__:
        return getattr(import_module("neural_arena.utils.visualization"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""Plotting utilities for decision boundaries and training curves."""

from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..core.network import Network, forward_pass
from ..data.patterns import DataPoint


def decision_grid(network: Network, resolution: int = 50) -> np.ndarray:
    """Evaluate the network on a ``resolution x resolution`` grid over the unit square.

    Row ``r`` holds the outputs for ``y = r / (resolution - 1)``, so the array
    can be drawn with ``origin="lower"``. The network is evaluated on a copy
    and its displayed activations are left as they were.
    """

    if resolution < 2:
        raise ValueError("resolution must be at least 2")
    probe = network.copy()
    axis = np.linspace(0.0, 1.0, resolution)
    grid = np.empty((resolution, resolution), dtype=np.float64)
    for r, y in enumerate(axis):
        for c, x in enumerate(axis):
            grid[r, c] = forward_pass((float(x), float(y)), probe)
    return grid


def plot_decision_boundary(
    network: Network,
    data: Sequence[DataPoint],
    *,
    resolution: int = 60,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Draw the network output over the unit square with the data on top."""

    if ax is None:
        _, ax = plt.subplots()
    grid = decision_grid(network, resolution)
    ax.imshow(grid, origin="lower", extent=(0.0, 1.0, 0.0, 1.0), cmap="coolwarm", vmin=0.0, vmax=1.0, alpha=0.6)
    axis = np.linspace(0.0, 1.0, resolution)
    if grid.min() < 0.5 < grid.max():
        ax.contour(axis, axis, grid, levels=[0.5], colors="black", linewidths=1.0)
    if data:
        coords = np.array([[point.x, point.y] for point in data])
        labels = np.array([point.label for point in data])
        ax.scatter(coords[:, 0], coords[:, 1], c=labels, cmap="coolwarm", vmin=0, vmax=1, edgecolors="white", s=18)
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    ax.set_title("Decision Boundary")
    return ax


def plot_training_history(
    loss_history: Sequence[float],
    accuracy_history: Sequence[float],
    target_accuracy: Optional[float] = None,
) -> plt.Figure:
    """Plot loss and accuracy per training step."""

    fig, (loss_ax, acc_ax) = plt.subplots(2, 1, sharex=True)
    loss_ax.plot(list(loss_history))
    loss_ax.set_ylabel("Loss")
    acc_ax.plot(list(accuracy_history))
    if target_accuracy is not None:
        acc_ax.axhline(target_accuracy, linestyle="--", color="tab:green")
    acc_ax.set_ylim(0.0, 100.0)
    acc_ax.set_ylabel("Accuracy (%)")
    acc_ax.set_xlabel("Step")
    fig.tight_layout()
    return fig

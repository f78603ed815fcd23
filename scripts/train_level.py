#!/usr/bin/env python3
"""Train a network on one arena level from the command line."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from neural_arena.architecture import ArchitectureError
from neural_arena.config import SessionConfig
from neural_arena.levels import LEVELS
from neural_arena.training import TrainingSession
from neural_arena.utils.visualization import plot_decision_boundary, plot_training_history


def _layers(value: str) -> tuple[int, ...]:
    try:
        widths = tuple(int(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid layer list: {value!r}") from exc
    return widths


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--level", type=int, default=1, choices=[level.id for level in LEVELS])
    parser.add_argument("--steps", type=int, default=200, help="Maximum number of training steps")
    parser.add_argument("--lr", type=float, default=0.05)
    parser.add_argument("--points", type=int, default=200, help="Size of the generated dataset")
    parser.add_argument(
        "--hidden",
        type=_layers,
        default=None,
        help="Comma separated hidden layer widths replacing the level's initial topology",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-every", type=int, default=10)
    parser.add_argument("--plot-dir", type=Path, default=None, help="Directory for boundary/history plots")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = SessionConfig(learning_rate=args.lr, point_count=args.points, seed=args.seed)
    session = TrainingSession.from_level(args.level, config=config)
    if args.hidden is not None:
        try:
            session.set_layers((2, *args.hidden, 1))
        except ArchitectureError as exc:
            raise SystemExit(f"Cannot use hidden layers {list(args.hidden)}: {exc}") from exc

    level = session.level
    print(
        f"Level {level.id}: {level.name} pattern={level.data_pattern.value} "
        f"layers={list(session.layer_sizes)} target={level.target_accuracy:.0f}%"
    )
    print(f"Initial accuracy: {session.accuracy:.1f}%")

    def report(record) -> bool:
        if args.log_every and record.epoch % args.log_every == 0:
            print(f"step={record.epoch:04d} loss={record.loss:.4f} accuracy={record.accuracy:5.1f}%")
        return True

    records = session.run(args.steps, should_continue=report, progress=args.progress)
    print(f"Finished after {len(records)} steps: accuracy={session.accuracy:.1f}% loss={session.loss:.4f}")
    if session.has_won:
        print(level.unlock_message)
    else:
        print(f"Target of {level.target_accuracy:.0f}% not reached.")

    if args.plot_dir is not None:
        args.plot_dir.mkdir(parents=True, exist_ok=True)
        ax = plot_decision_boundary(session.network, session.data)
        boundary_path = args.plot_dir / f"level{level.id}_boundary.png"
        ax.figure.savefig(boundary_path)
        history = plot_training_history(session.loss_history, session.accuracy_history, level.target_accuracy)
        history_path = args.plot_dir / f"level{level.id}_history.png"
        history.savefig(history_path)
        print(f"Saved plots to {boundary_path} and {history_path}")


if __name__ == "__main__":
    main()

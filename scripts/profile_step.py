#!/usr/bin/env python3
"""Profile the finite-difference training step on CPU."""
from __future__ import annotations

import argparse
import random
import statistics
import time

from neural_arena.core import build_network
from neural_arena.data import generate_data
from neural_arena.training import train_step


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--runs", type=int, default=5, help="Number of training steps to profile")
    parser.add_argument(
        "--layers", type=str, default="2,4,1", help="Comma separated layer widths of the network"
    )
    parser.add_argument(
        "--pattern",
        choices=["linear", "circle", "xor", "moons", "spiral", "clusters"],
        default="circle",
    )
    parser.add_argument("--points", type=int, default=200, help="Size of the generated dataset")
    parser.add_argument("--lr", type=float, default=0.05)
    parser.add_argument("--seed", type=int, default=13, help="Random seed for reproducibility")
    return parser.parse_args()


def profile_step() -> None:
    args = parse_args()
    rng = random.Random(args.seed)
    layers = [int(part) for part in args.layers.split(",")]
    network = build_network(layers, rng=rng)
    data = generate_data(args.pattern, args.points, rng=rng)

    durations: list[float] = []
    for run in range(args.runs):
        start = time.perf_counter()
        result = train_step(data, network, args.lr, rng=rng)
        end = time.perf_counter()
        duration_ms = (end - start) * 1_000
        durations.append(duration_ms)
        network = result.network
        print(f"run={run:02d} time_ms={duration_ms:8.2f} loss={result.loss:.5f}")

    mean = statistics.fmean(durations)
    stdev = statistics.pstdev(durations) if len(durations) > 1 else 0.0
    print(
        f"\nmean_time_ms={mean:8.2f} stdev_ms={stdev:6.2f} runs={args.runs} "
        f"connections={network.connection_count} neurons={network.neuron_count}"
    )


if __name__ == "__main__":
    profile_step()

#!/usr/bin/env python3
"""Benchmark level generation per architect."""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from delve import config
from delve.environment.generators import ARCHITECTS, MapBuilder, create_architect
from delve.util import rng

GRID_SIZES: tuple[tuple[int, int], ...] = (
    (40, 30),
    (80, 50),
    (120, 80),
)


class GenerationBenchmark:
    """Benchmark runner timing MapBuilder.build() for each architect."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, name: str, width: int, height: int) -> float:
        """Run one benchmark case and return average build time in milliseconds."""
        elapsed_total = 0.0

        for i in range(self.iterations):
            rng.init((width * 1_000_000) + (height * 1_000) + i)
            stream = rng.get(f"bench.{name}")
            builder = MapBuilder(
                width, height, architect=create_architect(name, width, height)
            )

            start = time.perf_counter()
            builder.build(stream)
            elapsed_total += time.perf_counter() - start

        return (elapsed_total / self.iterations) * 1000.0

    def run(self) -> None:
        """Run every architect on every configured grid size."""
        print("Level Generation Benchmark")
        print("=" * 42)
        print(f"Iterations per case: {self.iterations}")
        print()
        print(f"{'Case':>22} {'Build (ms)':>14}")
        print("-" * 42)

        for width, height in GRID_SIZES:
            for name in sorted(ARCHITECTS):
                build_ms = self._run_case(name, width, height)

                case_key = f"{name}@{width}x{height}"
                self.results[case_key] = {"build_ms": build_ms}

                print(f"{case_key:>22} {build_ms:14.2f}")

    def save_results(self, filename: str) -> None:
        """Save benchmark output to a JSON file."""
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")

    def compare_with_baseline(self, baseline_file: str) -> None:
        """Compare current run with a saved baseline JSON file."""
        try:
            with Path(baseline_file).open() as f:
                baseline: dict[str, dict[str, float]] = json.load(f)
        except FileNotFoundError:
            print(f"\nBaseline file not found: {baseline_file}")
            return

        print(f"\nComparison vs baseline: {baseline_file}")
        print("=" * 64)

        for case_key, current in self.results.items():
            if case_key not in baseline:
                continue

            old_ms = baseline[case_key].get("build_ms", 0.0)
            new_ms = current["build_ms"]
            if old_ms <= 0:
                continue

            delta_pct = ((new_ms - old_ms) / old_ms) * 100.0
            trend = "faster" if new_ms < old_ms else "slower"
            print(
                f"{case_key:>22}: {new_ms:8.2f}ms vs {old_ms:8.2f}ms "
                f"| {trend} ({delta_pct:+6.1f}%)"
            )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark level generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of runs per case (default: 5)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare current results against baseline JSON",
    )
    args = parser.parse_args(argv)

    if config.IS_TEST_ENVIRONMENT:
        args.iterations = min(args.iterations, 1)

    benchmark = GenerationBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)

    if args.compare:
        benchmark.compare_with_baseline(args.compare)


if __name__ == "__main__":
    main()

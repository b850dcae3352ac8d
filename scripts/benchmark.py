#!/usr/bin/env python3
"""
Benchmark Barnes-Hut against direct summation on generated galaxies.

Usage:
    python scripts/benchmark.py [--sizes N,...] [--thetas T,...] [--generations G]

Examples:
    python scripts/benchmark.py
    python scripts/benchmark.py --sizes 100,500,2000 --thetas 0.3,0.5,1.0
    python scripts/benchmark.py --generations 5 --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

from barnes_hut import (
    BarnesHutSimulation,
    DirectSimulation,
    Universe,
    initialize_galaxy,
    initialize_universe,
)
from barnes_hut.base import BaseSimulation


def make_universe(num_stars: int, seed: int = 42) -> Universe:
    """Single galaxy centered in a 1e23 m domain, like the galaxy scenario."""
    galaxy = initialize_galaxy(num_stars, 1e22, 5e22, 5e22, seed=seed)
    return initialize_universe([galaxy], 1e23)


def benchmark_simulation(
    sim_class: type[BaseSimulation],
    universe: Universe,
    generations: int,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Benchmark a single engine.

    Returns:
        Dict with timing and result info
    """
    start = time.perf_counter()
    sim = sim_class(universe=universe, generations=generations, time_step=2e15, **kwargs)
    sim.run()
    elapsed = time.perf_counter() - start

    return {
        "time_seconds": elapsed,
        "num_bodies": len(universe.bodies),
        "final": sim.timepoints[-1],
    }


def max_relative_error(approx: Universe, exact: Universe) -> float:
    """Largest per-body relative acceleration error of ``approx`` against ``exact``."""
    worst = 0.0
    for a, b in zip(approx.bodies, exact.bodies):
        reference = b.acceleration.magnitude()
        if reference > 0:
            worst = max(worst, (a.acceleration - b.acceleration).magnitude() / reference)
    return worst


def run_benchmarks(
    sizes: list[int],
    thetas: list[float],
    generations: int = 1,
    direct_limit: int = 2000,
) -> list[dict]:
    """Run benchmarks for every galaxy size and opening angle."""
    results = []

    print(f"\nBenchmarking {len(thetas)} opening angles on {len(sizes)} galaxy sizes")
    print(f"Generations: {generations}")
    print("=" * 80)

    for size in sizes:
        universe = make_universe(size)
        print(f"\n{size} stars ({len(universe.bodies)} bodies)")
        print("-" * 60)

        exact = None
        if size <= direct_limit:
            result = benchmark_simulation(DirectSimulation, universe, generations)
            exact = result.pop("final")
            print(f"  {'direct':12s}: {result['time_seconds']:.4f}s")
            results.append({"size": size, "algorithm": "direct", **result})
        else:
            print(f"  {'direct':12s}: SKIPPED (O(n^2) too slow)")

        for theta in thetas:
            name = f"theta={theta:g}"
            result = benchmark_simulation(BarnesHutSimulation, universe, generations, theta=theta)
            final = result.pop("final")
            line = f"  {name:12s}: {result['time_seconds']:.4f}s"
            if exact is not None:
                result["max_relative_error"] = max_relative_error(final, exact)
                line += f"  (max error {result['max_relative_error']:.2%})"
            print(line)
            results.append({"size": size, "algorithm": name, **result})

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark Barnes-Hut against direct summation")
    parser.add_argument("--sizes", default="100,500,1000", help="Comma-separated star counts")
    parser.add_argument("--thetas", default="0.3,0.5,1.0", help="Comma-separated opening angles")
    parser.add_argument("--generations", type=int, default=1, help="Generations per run")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    results = run_benchmarks(
        sizes=[int(s) for s in args.sizes.split(",")],
        thetas=[float(t) for t in args.thetas.split(",")],
        generations=args.generations,
    )

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()

"""
Command-line entry point.

Usage:
    barnes-hut jupiter
    barnes-hut galaxy --generations 2000 --frequency 100 --seed 1
    barnes-hut collision --theta 0.7
    barnes-hut jupiter --data my_moons.txt --time-step 5
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .scenarios import SCENARIOS, get_scenario
from .simulation import BarnesHutSimulation, sample_timepoints
from .types import Event
from .validation import ValidationError, validate_frequency


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barnes-hut",
        description="Run a Barnes-Hut N-body simulation scenario.",
    )
    parser.add_argument("scenario", choices=sorted(SCENARIOS), help="Scenario to run")
    parser.add_argument("--data", help="Initial-conditions file (jupiter scenario)")
    parser.add_argument("--generations", type=int, help="Number of generations")
    parser.add_argument("--time-step", type=float, help="Integration time step (s)")
    parser.add_argument("--theta", type=float, help="Barnes-Hut opening angle")
    parser.add_argument("--frequency", type=int, help="Report every N-th generation")
    parser.add_argument("--seed", type=int, help="Random seed for generated galaxies")
    parser.add_argument(
        "--quiet", action="store_true", help="Only print the final summary"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    scenario = get_scenario(args.scenario)

    generations = args.generations if args.generations is not None else scenario.generations
    time_step = args.time_step if args.time_step is not None else scenario.time_step
    theta = args.theta if args.theta is not None else scenario.theta
    frequency = args.frequency if args.frequency is not None else scenario.frequency

    try:
        frequency = validate_frequency(frequency)
        universe = scenario.build_universe(args.data, seed=args.seed)
        print(f"Loaded {len(universe.bodies)} bodies ({scenario.description}).")

        def report(event: Optional[Event]) -> None:
            if event is None or args.quiet:
                return
            generation = event.get("generation", 0)
            if generation % frequency == 0:
                print(f"  generation {generation}/{generations}")

        sim = BarnesHutSimulation(
            universe=universe,
            generations=generations,
            time_step=time_step,
            theta=theta,
            on_tick=report,
        )
        sim.run()
    except (ValidationError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    frames = sample_timepoints(sim.timepoints, frequency)
    print(f"Simulation run: {len(sim.timepoints)} snapshots, {len(frames)} frames.")
    for index, frame in enumerate(frames):
        com = frame.center_of_mass()
        where = f"({com.x:.4g}, {com.y:.4g})" if com is not None else "n/a"
        print(f"  frame {index}: generation {index * frequency}, center of mass {where}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

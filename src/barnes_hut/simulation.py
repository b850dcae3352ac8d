"""
Simulation drivers.

BarnesHutSimulation advances a universe with the Barnes-Hut approximation:
each generation builds a fresh quadtree from the previous snapshot,
computes every body's new acceleration from it, then integrates velocity
and position with the velocity-Verlet scheme.

DirectSimulation uses the same integrator with exact O(n^2) pairwise
forces and serves as the accuracy reference.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .base import BaseSimulation
from .physics import (
    G,
    direct_net_force,
    update_acceleration,
    update_position,
    update_velocity,
)
from .spatial.quadtree import QuadTree, generate_quadtree, is_inside_universe
from .types import Body, Event, Universe, Vector
from .validation import validate_frequency, validate_theta


def copy_universe(universe: Universe) -> Universe:
    """Deep copy of a snapshot."""
    return universe.copy()


def _integrate(
    universe: Universe,
    time_step: float,
    acceleration: Callable[[Body], Vector],
) -> Universe:
    """
    Advance every body of a copy of ``universe`` by one step.

    ``acceleration`` is evaluated on the bodies of the original snapshot,
    so all bodies see the same pre-step state. Bodies outside the domain
    receive no force.
    """
    new_universe = universe.copy()

    for source, body in zip(universe.bodies, new_universe.bodies):
        old_acceleration, old_velocity = body.acceleration, body.velocity

        if is_inside_universe(source, universe.width):
            body.acceleration = acceleration(source)
        else:
            body.acceleration = Vector()
        body.velocity = update_velocity(body, old_acceleration, time_step)
        body.position = update_position(body, old_acceleration, old_velocity, time_step)

    return new_universe


def update_universe(
    universe: Universe,
    time_step: float,
    tree: QuadTree,
    gravitational_constant: float = G,
) -> Universe:
    """
    Compute the next snapshot using a quadtree built from ``universe``.

    Args:
        universe: Current snapshot (left unchanged)
        time_step: Integration time step
        tree: Quadtree over ``universe``'s bodies
        gravitational_constant: G

    Returns:
        New, independent snapshot
    """
    return _integrate(
        universe,
        time_step,
        lambda body: update_acceleration(body, tree, gravitational_constant),
    )


class BarnesHutSimulation(BaseSimulation):
    """
    Barnes-Hut N-body simulation.

    Example:
        sim = BarnesHutSimulation(
            universe=universe,
            generations=1000,
            time_step=2e14,
            theta=0.5,
        )
        sim.run()

        frames = sample_timepoints(sim.timepoints, frequency=100)
    """

    def __init__(
        self,
        *,
        universe: Optional[Universe] = None,
        generations: int = 1,
        time_step: float = 1.0,
        gravitational_constant: float = G,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # BarnesHut-specific parameters
        theta: float = 0.5,
    ) -> None:
        """
        Initialize Barnes-Hut simulation.

        Args:
            universe: Initial snapshot
            generations: Number of generations to compute
            time_step: Integration time step
            gravitational_constant: G used for every force evaluation
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            theta: Opening angle (0 = exact, 0.5 = balanced)
        """
        super().__init__(
            universe=universe,
            generations=generations,
            time_step=time_step,
            gravitational_constant=gravitational_constant,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )
        self._theta: float = validate_theta(theta)

    @property
    def theta(self) -> float:
        """Get Barnes-Hut opening angle."""
        return self._theta

    @theta.setter
    def theta(self, value: float) -> None:
        self._theta = validate_theta(value)

    def _step(self, universe: Universe) -> Universe:
        tree = generate_quadtree(universe, theta=self._theta)
        return update_universe(universe, self._time_step, tree, self._gravitational_constant)


class DirectSimulation(BaseSimulation):
    """
    Exact N-body simulation with O(n^2) pairwise forces.

    Uses the same integrator and domain policy as BarnesHutSimulation.
    """

    def _step(self, universe: Universe) -> Universe:
        inside = [body for body in universe.bodies if is_inside_universe(body, universe.width)]
        g = self._gravitational_constant
        return _integrate(
            universe,
            self._time_step,
            lambda body: direct_net_force(body, inside, g) / body.mass,
        )


def barnes_hut(
    initial_universe: Universe,
    generations: int,
    time_step: float,
    theta: float,
    gravitational_constant: float = G,
) -> list[Universe]:
    """
    Run a Barnes-Hut simulation.

    Args:
        initial_universe: Starting snapshot (not modified)
        generations: Number of generations N
        time_step: Integration time step
        theta: Opening angle
        gravitational_constant: G

    Returns:
        N + 1 snapshots; the first is a copy of ``initial_universe``
    """
    sim = BarnesHutSimulation(
        universe=initial_universe,
        generations=generations,
        time_step=time_step,
        theta=theta,
        gravitational_constant=gravitational_constant,
    )
    return sim.run().timepoints


def sample_timepoints(timepoints: Sequence[Universe], frequency: int) -> list[Universe]:
    """Every ``frequency``-th snapshot, starting with generation 0."""
    frequency = validate_frequency(frequency)
    return list(timepoints[::frequency])


__all__ = [
    "BarnesHutSimulation",
    "DirectSimulation",
    "barnes_hut",
    "copy_universe",
    "update_universe",
    "sample_timepoints",
]

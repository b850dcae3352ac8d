"""
Newtonian gravity and velocity-Verlet integration.

Pairwise force evaluation is shared by the quadtree traversal and by the
exact O(n^2) reference summation. The integration helpers advance a single
body by one time step:

    v(t+dt) = v(t) + 0.5 * (a(t+dt) + a(t)) * dt
    p(t+dt) = p(t) + v(t) * dt + 0.5 * a(t) * dt^2

Callers must compute the new acceleration first, then the velocity, then
the position (which still uses the previous velocity and acceleration).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from .types import Body, Vector

if TYPE_CHECKING:
    from .spatial.quadtree import QuadTree

# Gravitational constant (m^3 kg^-1 s^-2)
G = 6.67408e-11


def distance(p1: Vector, p2: Vector) -> tuple[float, float, float]:
    """
    Displacement and Euclidean distance between two points.

    Returns:
        (dx, dy, d) with dx = p1.x - p2.x and dy = p1.y - p2.y
    """
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx, dy, math.sqrt(dx * dx + dy * dy)


def compute_force(body: Body, other: Body, gravitational_constant: float = G) -> Vector:
    """
    Gravitational force exerted on ``body`` by ``other``.

    The force points from ``body`` toward ``other``. Coincident positions
    yield a zero force instead of dividing by zero.
    """
    dx, dy, d = distance(other.position, body.position)
    if d == 0.0:
        return Vector()

    f = gravitational_constant * body.mass * other.mass / (d * d)
    return Vector(f * dx / d, f * dy / d)


def direct_net_force(
    body: Body,
    bodies: Sequence[Body],
    gravitational_constant: float = G,
) -> Vector:
    """Exact O(n) net force on ``body`` from every other body in ``bodies``."""
    fx, fy = 0.0, 0.0
    for other in bodies:
        if other is body:
            continue
        force = compute_force(body, other, gravitational_constant)
        fx += force.x
        fy += force.y
    return Vector(fx, fy)


def update_acceleration(
    body: Body,
    tree: QuadTree,
    gravitational_constant: float = G,
) -> Vector:
    """New acceleration of ``body`` from the Barnes-Hut net force."""
    force = tree.calculate_force(body, gravitational_constant)
    return force / body.mass


def update_velocity(body: Body, old_acceleration: Vector, time_step: float) -> Vector:
    """
    Velocity after one step.

    ``body.acceleration`` must already hold the newly computed acceleration.
    """
    return Vector(
        body.velocity.x + 0.5 * (body.acceleration.x + old_acceleration.x) * time_step,
        body.velocity.y + 0.5 * (body.acceleration.y + old_acceleration.y) * time_step,
    )


def update_position(
    body: Body,
    old_acceleration: Vector,
    old_velocity: Vector,
    time_step: float,
) -> Vector:
    """Position after one step, from the previous velocity and acceleration."""
    dt_sq = time_step * time_step
    return Vector(
        body.position.x + old_velocity.x * time_step + 0.5 * old_acceleration.x * dt_sq,
        body.position.y + old_velocity.y * time_step + 0.5 * old_acceleration.y * dt_sq,
    )


__all__ = [
    "G",
    "distance",
    "compute_force",
    "direct_net_force",
    "update_acceleration",
    "update_velocity",
    "update_position",
]

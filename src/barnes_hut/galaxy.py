"""
Procedural initial conditions.

Builds disk-shaped galaxies of stars orbiting a central black hole, merges
galaxies into a universe, and pushes two galaxies toward each other for
collision runs.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from .physics import G
from .types import Body, Color, Galaxy, Universe, Vector
from .validation import InvalidParameterError, validate_width

SOLAR_MASS = 1.989e30
SOLAR_RADIUS = 6.9634e8
BLACK_HOLE_MASS = 4.1e6 * SOLAR_MASS

STAR_COLOR = Color(255, 255, 255)
BLACK_HOLE_COLOR = Color(0, 0, 255)


def initialize_galaxy(
    num_stars: int,
    radius: float,
    x: float,
    y: float,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    gravitational_constant: float = G,
) -> Galaxy:
    """
    Sample a disk galaxy centered at (x, y).

    Stars are placed uniformly in angle at a distance in [radius, 2 * radius)
    from the center and given a tangential (counter-clockwise) speed of half
    the circular orbital speed around the central black hole. The black
    hole is appended as the last body.

    Args:
        num_stars: Number of stars (excluding the black hole)
        radius: Inner radius of the star disk
        x, y: Galaxy center
        seed: Random seed for reproducible galaxies (ignored if rng is given)
        rng: NumPy random generator to draw from
        gravitational_constant: G used for the orbital speed

    Returns:
        List of num_stars + 1 bodies
    """
    if num_stars < 0:
        raise InvalidParameterError(f"num_stars must be >= 0, got {num_stars}")
    if radius <= 0:
        raise InvalidParameterError(f"radius must be positive, got {radius}")

    if rng is None:
        rng = np.random.default_rng(seed)

    dists = (rng.random(num_stars) + 1.0) * radius
    angles = rng.random(num_stars) * 2.0 * math.pi

    galaxy: Galaxy = []
    for dist, angle in zip(dists, angles):
        dist = float(dist)
        angle = float(angle)
        speed = 0.5 * math.sqrt(gravitational_constant * BLACK_HOLE_MASS / dist)
        galaxy.append(
            Body(
                position=Vector(x + dist * math.cos(angle), y + dist * math.sin(angle)),
                velocity=Vector(
                    speed * math.cos(angle + math.pi / 2.0),
                    speed * math.sin(angle + math.pi / 2.0),
                ),
                mass=SOLAR_MASS,
                radius=SOLAR_RADIUS,
                color=STAR_COLOR,
            )
        )

    galaxy.append(
        Body(
            position=Vector(x, y),
            mass=BLACK_HOLE_MASS,
            radius=10 * SOLAR_RADIUS,
            color=BLACK_HOLE_COLOR,
        )
    )
    return galaxy


def initialize_universe(galaxies: Sequence[Galaxy], width: float) -> Universe:
    """Put the bodies of all galaxies, in order, into one universe."""
    width = validate_width(width)
    bodies = [body for galaxy in galaxies for body in galaxy]
    return Universe(width, bodies)


def galaxy_center(galaxy: Galaxy) -> Vector:
    """Arithmetic mean of the galaxy's body positions."""
    if not galaxy:
        raise InvalidParameterError("Cannot compute the center of an empty galaxy")
    cx = sum(body.position.x for body in galaxy) / len(galaxy)
    cy = sum(body.position.y for body in galaxy) / len(galaxy)
    return Vector(cx, cy)


def galaxy_push(g0: Galaxy, g1: Galaxy, speed: float) -> None:
    """
    Give two galaxies opposite velocity kicks along the line joining them.

    ``g0`` is pushed toward ``g1`` and ``g1`` toward ``g0``, each by
    ``speed``. Galaxies with the same center are pushed along the x axis.
    Velocities are modified in place.
    """
    c0 = galaxy_center(g0)
    c1 = galaxy_center(g1)

    dx, dy = c1.x - c0.x, c1.y - c0.y
    dist = math.sqrt(dx * dx + dy * dy)
    if dist == 0:
        dx, dy = 1e-3, 0.0
        dist = 1e-3

    kick = Vector(speed * dx / dist, speed * dy / dist)
    for body in g0:
        body.velocity = body.velocity + kick
    for body in g1:
        body.velocity = body.velocity - kick


__all__ = [
    "SOLAR_MASS",
    "SOLAR_RADIUS",
    "BLACK_HOLE_MASS",
    "initialize_galaxy",
    "initialize_universe",
    "galaxy_center",
    "galaxy_push",
]

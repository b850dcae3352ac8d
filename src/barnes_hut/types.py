"""
Common types for the Barnes-Hut simulation engine.

This module provides the fundamental value types used across the engine:
- Vector: Immutable 2D point/vector
- Color: Display color of a body (opaque to the physics)
- Body: Point mass with position, velocity and acceleration
- Universe: One snapshot of the simulation (domain width + bodies)
- EventType: Simulation lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List, Optional, TypedDict


@dataclass(frozen=True)
class Vector:
    """Immutable 2D vector (also used for points)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Color:
    """RGB display color, each channel in [0, 255]."""

    red: int = 255
    green: int = 255
    blue: int = 255


@dataclass
class Body:
    """
    A point mass in the simulation.

    Attributes:
        position: Current position
        velocity: Current velocity
        acceleration: Acceleration computed in the previous step
        mass: Mass (strictly positive for real bodies)
        radius: Display radius (not used by the physics)
        color: Display color (not used by the physics)
        name: Optional label, e.g. read from a data file
    """

    position: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)
    acceleration: Vector = field(default_factory=Vector)
    mass: float = 0.0
    radius: float = 0.0
    color: Color = field(default_factory=Color)
    name: str = ""

    def copy(self) -> Body:
        """Return an independent copy (all fields are immutable values)."""
        return replace(self)

    def __repr__(self) -> str:
        return (
            f"Body(x={self.position.x:.4g}, y={self.position.y:.4g}, "
            f"mass={self.mass:.4g})"
        )


@dataclass
class Universe:
    """
    One simulation snapshot.

    The domain is the square [0, width] x [0, width]. Bodies are identified
    by their index in ``bodies``; each snapshot owns its own copies.
    """

    width: float
    bodies: List[Body] = field(default_factory=list)

    def copy(self) -> Universe:
        """Deep copy: every body is copied."""
        return Universe(self.width, [body.copy() for body in self.bodies])

    def __len__(self) -> int:
        return len(self.bodies)

    def total_mass(self) -> float:
        return sum(body.mass for body in self.bodies)

    def center_of_mass(self) -> Optional[Vector]:
        """Mass-weighted centroid of all bodies, or None if there is no mass."""
        total = self.total_mass()
        if total <= 0:
            return None
        x = sum(body.mass * body.position.x for body in self.bodies) / total
        y = sum(body.mass * body.position.y for body in self.bodies) / total
        return Vector(x, y)


Galaxy = List[Body]
"""A group of bodies built by the galaxy initializer."""


class EventType(IntEnum):
    """
    Simulation lifecycle events.

    - start: Generation loop has begun
    - tick: Fired once per generation
    - end: All generations have been computed (or the run was stopped)
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    generation: int
    universe: Universe


__all__ = [
    "Vector",
    "Color",
    "Body",
    "Universe",
    "Galaxy",
    "EventType",
    "Event",
]

"""
Input validation utilities for the simulation engine.

Provides centralized validation functions for universes, integration
parameters and frame sampling. Raises descriptive exceptions on invalid
input, before any generation is computed.
"""

from __future__ import annotations

import math
from typing import Any


class ValidationError(ValueError):
    """Base exception for simulation validation errors."""

    pass


class InvalidUniverseError(ValidationError):
    """Raised when a universe (domain or bodies) is invalid."""

    pass


class InvalidParameterError(ValidationError):
    """Raised when a simulation parameter is out of range."""

    pass


class UniverseFormatError(ValidationError):
    """Raised when an initial-conditions file is malformed."""

    pass


def validate_width(width: float) -> float:
    """
    Validate the domain width.

    Args:
        width: Side length of the square domain

    Returns:
        Validated width as float

    Raises:
        InvalidUniverseError: If width is not a positive finite number
    """
    width = float(width)
    if not math.isfinite(width) or width <= 0:
        raise InvalidUniverseError(f"Universe width must be positive, got {width}")
    return width


def validate_universe(universe: Any) -> Any:
    """
    Validate a universe snapshot.

    Every body must have a strictly positive mass; zero mass is reserved
    for empty quadtree nodes.

    Args:
        universe: Universe to check

    Returns:
        The same universe

    Raises:
        InvalidUniverseError: If the width or any body mass is invalid
    """
    validate_width(universe.width)

    issues = [
        f"Body {i}: mass must be positive, got {body.mass}"
        for i, body in enumerate(universe.bodies)
        if not body.mass > 0
    ]
    if issues:
        raise InvalidUniverseError("Invalid bodies:\n" + "\n".join(issues))
    return universe


def validate_generations(generations: int) -> int:
    """
    Validate generation count is non-negative.

    Raises:
        InvalidParameterError: If generations < 0
    """
    generations = int(generations)
    if generations < 0:
        raise InvalidParameterError(f"generations must be >= 0, got {generations}")
    return generations


def validate_time_step(time_step: float) -> float:
    """
    Validate the integration time step.

    Raises:
        InvalidParameterError: If time_step is not a positive finite number
    """
    time_step = float(time_step)
    if not math.isfinite(time_step) or time_step <= 0:
        raise InvalidParameterError(f"time_step must be positive, got {time_step}")
    return time_step


def validate_theta(theta: float) -> float:
    """
    Validate the Barnes-Hut opening angle.

    Raises:
        InvalidParameterError: If theta < 0
    """
    theta = float(theta)
    if math.isnan(theta) or theta < 0:
        raise InvalidParameterError(f"theta must be >= 0, got {theta}")
    return theta


def validate_frequency(frequency: int) -> int:
    """
    Validate frame sampling frequency.

    Raises:
        InvalidParameterError: If frequency < 1
    """
    frequency = int(frequency)
    if frequency < 1:
        raise InvalidParameterError(f"frequency must be >= 1, got {frequency}")
    return frequency


__all__ = [
    "ValidationError",
    "InvalidUniverseError",
    "InvalidParameterError",
    "UniverseFormatError",
    "validate_width",
    "validate_universe",
    "validate_generations",
    "validate_time_step",
    "validate_theta",
    "validate_frequency",
]

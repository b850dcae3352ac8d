"""
Preset simulation scenarios.

Each scenario bundles the integration parameters, the frame sampling
settings used by a visualization stage, and a builder for its initial
universe:

- jupiter: Jupiter and the Galilean moons, read from a data file
- galaxy: a single disk galaxy
- collision: two disk galaxies pushed toward each other
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np

from .galaxy import galaxy_push, initialize_galaxy, initialize_universe
from .loader import load_universe
from .types import Universe

DATA_DIR = Path(__file__).parent / "data"
JUPITER_MOONS_FILE = DATA_DIR / "jupiter_moons.txt"

# Speed given to each galaxy in the collision scenario (m/s)
COLLISION_PUSH_SPEED = 5e3


@dataclass(frozen=True)
class Scenario:
    """
    A named simulation setup.

    Attributes:
        name: Scenario name used on the command line
        description: One-line summary
        generations: Number of generations to compute
        time_step: Integration time step (s)
        theta: Barnes-Hut opening angle
        canvas_width: Frame width in pixels for rendering
        frequency: Keep every frequency-th snapshot as a frame
        scaling_factor: Display scaling of body radii
        builder: Creates the initial universe from (data_path, seed)
    """

    name: str
    description: str
    generations: int
    time_step: float
    theta: float
    canvas_width: int
    frequency: int
    scaling_factor: float
    builder: Callable[[Optional[Path], Optional[int]], Universe]

    def build_universe(
        self,
        data_path: Optional[Union[str, Path]] = None,
        seed: Optional[int] = None,
    ) -> Universe:
        """Create the initial universe for this scenario."""
        path = Path(data_path) if data_path is not None else None
        return self.builder(path, seed)


def _build_jupiter(data_path: Optional[Path], seed: Optional[int]) -> Universe:
    return load_universe(data_path if data_path is not None else JUPITER_MOONS_FILE)


def _build_galaxy(data_path: Optional[Path], seed: Optional[int]) -> Universe:
    g = initialize_galaxy(500, 1e22, 5e22, 5e22, seed=seed)
    return initialize_universe([g], 1.0e23)


def _build_collision(data_path: Optional[Path], seed: Optional[int]) -> Universe:
    rng = np.random.default_rng(seed)
    g0 = initialize_galaxy(500, 4e21, 7e22, 2e22, rng=rng)
    g1 = initialize_galaxy(500, 4e21, 3e22, 7e22, rng=rng)
    galaxy_push(g0, g1, COLLISION_PUSH_SPEED)
    return initialize_universe([g0, g1], 1.0e23)


SCENARIOS: dict[str, Scenario] = {
    "jupiter": Scenario(
        name="jupiter",
        description="Jupiter and its four Galilean moons",
        generations=100000,
        time_step=1e1,
        theta=0.5,
        canvas_width=1000,
        frequency=1000,
        scaling_factor=5.0,
        builder=_build_jupiter,
    ),
    "galaxy": Scenario(
        name="galaxy",
        description="A single 500-star disk galaxy",
        generations=100000,
        time_step=2e15,
        theta=0.5,
        canvas_width=1000,
        frequency=1000,
        scaling_factor=5e11,
        builder=_build_galaxy,
    ),
    "collision": Scenario(
        name="collision",
        description="Two 500-star galaxies pushed toward each other",
        generations=100000,
        time_step=2e14,
        theta=0.5,
        canvas_width=1000,
        frequency=1000,
        scaling_factor=1e11,
        builder=_build_collision,
    ),
}


def get_scenario(name: str) -> Scenario:
    """
    Look up a scenario by name.

    Raises:
        KeyError: If no scenario has that name
    """
    try:
        return SCENARIOS[name]
    except KeyError:
        valid = ", ".join(sorted(SCENARIOS))
        raise KeyError(f"Unknown scenario {name!r}, expected one of: {valid}") from None


__all__ = [
    "Scenario",
    "SCENARIOS",
    "JUPITER_MOONS_FILE",
    "COLLISION_PUSH_SPEED",
    "get_scenario",
]

"""
barnes-hut: Barnes-Hut gravitational N-body simulation in Python.

This package approximates 2D gravitational dynamics with a quadtree that
treats distant clusters of bodies as single aggregate masses, bringing the
force pass from O(n^2) down to roughly O(n log n).

Available components:
- spatial: Quadtree construction and Barnes-Hut force approximation
- physics: Pairwise gravity and velocity-Verlet integration
- simulation: Generation loop producing one snapshot per generation
- galaxy / loader / scenarios: Initial conditions
"""

__version__ = "0.1.0"

# Base class for building engines
from .base import BaseSimulation

# Procedural initial conditions
from .galaxy import (
    galaxy_center,
    galaxy_push,
    initialize_galaxy,
    initialize_universe,
)

# Initial conditions from files
from .loader import load_universe, parse_universe

# Physics
from .physics import (
    G,
    compute_force,
    direct_net_force,
    distance,
    update_acceleration,
    update_position,
    update_velocity,
)

# Scenario presets
from .scenarios import SCENARIOS, Scenario, get_scenario

# Simulation drivers
from .simulation import (
    BarnesHutSimulation,
    DirectSimulation,
    barnes_hut,
    copy_universe,
    sample_timepoints,
    update_universe,
)

# Spatial data structures
from .spatial import (
    CoincidentBodiesWarning,
    NodeKind,
    Quadrant,
    QuadTree,
    QuadTreeNode,
    find_quadrant,
    generate_quadtree,
    is_inside_universe,
    subdivide,
)
from .types import (
    Body,
    Color,
    Event,
    EventType,
    Galaxy,
    Universe,
    Vector,
)

# Validation
from .validation import (
    InvalidParameterError,
    InvalidUniverseError,
    UniverseFormatError,
    ValidationError,
)

__all__ = [
    "__version__",
    # Types
    "Vector",
    "Color",
    "Body",
    "Universe",
    "Galaxy",
    "EventType",
    "Event",
    # Base class
    "BaseSimulation",
    # Simulation
    "BarnesHutSimulation",
    "DirectSimulation",
    "barnes_hut",
    "copy_universe",
    "update_universe",
    "sample_timepoints",
    # Spatial
    "CoincidentBodiesWarning",
    "NodeKind",
    "Quadrant",
    "QuadTree",
    "QuadTreeNode",
    "find_quadrant",
    "generate_quadtree",
    "is_inside_universe",
    "subdivide",
    # Physics
    "G",
    "distance",
    "compute_force",
    "direct_net_force",
    "update_acceleration",
    "update_velocity",
    "update_position",
    # Initial conditions
    "initialize_galaxy",
    "initialize_universe",
    "galaxy_center",
    "galaxy_push",
    "load_universe",
    "parse_universe",
    "Scenario",
    "SCENARIOS",
    "get_scenario",
    # Validation
    "ValidationError",
    "InvalidUniverseError",
    "InvalidParameterError",
    "UniverseFormatError",
]

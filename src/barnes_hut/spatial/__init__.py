"""
Spatial data structures for efficient force calculations.

Provides quadtree implementation for Barnes-Hut O(n log n) force approximation.
"""

from .quadtree import (
    MAX_DEPTH,
    CoincidentBodiesWarning,
    NodeKind,
    Quadrant,
    QuadTree,
    QuadTreeNode,
    center_of_mass,
    find_quadrant,
    generate_quadtree,
    is_inside_universe,
    subdivide,
)

__all__ = [
    "MAX_DEPTH",
    "CoincidentBodiesWarning",
    "NodeKind",
    "Quadrant",
    "QuadTree",
    "QuadTreeNode",
    "center_of_mass",
    "find_quadrant",
    "generate_quadtree",
    "is_inside_universe",
    "subdivide",
]

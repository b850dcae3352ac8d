"""
Quadtree implementation for Barnes-Hut force approximation.

The quadtree recursively subdivides the square simulation domain into
quadrants, enabling O(n log n) approximate n-body force calculations.
A fresh tree is built for every generation and discarded afterwards.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence

from ..physics import G, compute_force, distance
from ..types import Body, Universe, Vector

# Deepest level a leaf may be split to. Bodies that still share a leaf at
# this depth are kept together in that leaf.
MAX_DEPTH = 64

NW, NE, SW, SE = 0, 1, 2, 3


class CoincidentBodiesWarning(UserWarning):
    """Warning issued when bodies are too close to be separated by subdivision."""

    pass


class NodeKind(IntEnum):
    """Kind of a quadtree node."""

    EMPTY = 0
    LEAF = 1
    INTERNAL = 2


@dataclass(frozen=True)
class Quadrant:
    """Axis-aligned square region given by its lower-left corner and width."""

    x: float
    y: float
    width: float

    def midpoint(self) -> tuple[float, float]:
        half = self.width / 2.0
        return self.x + half, self.y + half

    def contains(self, point: Vector) -> bool:
        """Check if point lies within this region (edges included)."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.width
        )


def subdivide(sector: Quadrant) -> List[Quadrant]:
    """
    Split a quadrant into four equal children.

    Returns:
        [NW, NE, SW, SE], each with half the parent's width
    """
    half = sector.width / 2.0
    x, y = sector.x, sector.y
    return [
        Quadrant(x, y + half, half),
        Quadrant(x + half, y + half, half),
        Quadrant(x, y, half),
        Quadrant(x + half, y, half),
    ]


def find_quadrant(sector: Quadrant, point: Vector) -> int:
    """
    Get the child quadrant index for a point.

    Points on a mid line go to the east and/or north side.

    Returns:
        0=NW, 1=NE, 2=SW, 3=SE
    """
    mid_x, mid_y = sector.midpoint()
    if point.x < mid_x and point.y >= mid_y:
        return NW
    if point.x >= mid_x and point.y >= mid_y:
        return NE
    if point.x < mid_x and point.y < mid_y:
        return SW
    return SE


def is_inside_universe(body: Body, width: float) -> bool:
    """True if the body lies in [0, width] x [0, width]."""
    return 0 <= body.position.x <= width and 0 <= body.position.y <= width


def center_of_mass(bodies: Sequence[Body]) -> Optional[Body]:
    """
    Aggregate body for a group: total mass at the mass-weighted centroid.

    Returns None if the group has no mass.
    """
    total_mass = 0.0
    weighted_x = 0.0
    weighted_y = 0.0
    for body in bodies:
        total_mass += body.mass
        weighted_x += body.mass * body.position.x
        weighted_y += body.mass * body.position.y

    if total_mass <= 0:
        return None
    return Body(
        position=Vector(weighted_x / total_mass, weighted_y / total_mass),
        mass=total_mass,
    )


@dataclass
class QuadTreeNode:
    """
    A node in the quadtree.

    Attributes:
        sector: Region covered by this node
        body: The real body of a single-body leaf, or the aggregate body
            (total mass at center of mass) of an internal node
        members: Real bodies stored in a leaf. Holds more than one body
            only for a leaf at the depth limit.
        children: Four child nodes [NW, NE, SW, SE] if internal
    """

    sector: Quadrant
    body: Optional[Body] = None
    members: List[Body] = field(default_factory=list)
    children: Optional[List[QuadTreeNode]] = None

    @property
    def kind(self) -> NodeKind:
        if self.children is not None:
            return NodeKind.INTERNAL
        if self.members:
            return NodeKind.LEAF
        return NodeKind.EMPTY

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.children is None

    def is_empty(self) -> bool:
        """True if this node contains no bodies."""
        return not self.members and self.children is None


class QuadTree:
    """
    Barnes-Hut quadtree for approximate gravitational force calculations.

    For distant clusters, the algorithm treats the cluster as a single
    body at its center of mass, reducing complexity from O(n^2) to
    O(n log n).

    Usage:
        tree = QuadTree(Quadrant(0, 0, universe.width), theta=0.5)
        for body in universe.bodies:
            tree.insert(body)
        tree.compute_mass_distribution()

        force = tree.calculate_force(body)

    The theta parameter controls the accuracy/speed tradeoff:
    - theta = 0: Exact calculation (every internal node is opened)
    - theta = 0.5: Good balance (recommended)
    - theta = 1.0+: Fast but less accurate
    """

    def __init__(
        self,
        sector: Quadrant,
        theta: float = 0.5,
        max_depth: int = MAX_DEPTH,
    ):
        """
        Initialize an empty quadtree.

        Args:
            sector: Region covered by the root node
            theta: Barnes-Hut threshold (0 = exact, higher = more approximation)
            max_depth: Deepest level a leaf may be subdivided to
        """
        self.root = QuadTreeNode(sector)
        self.theta = theta
        self.max_depth = max_depth
        self.body_count = 0
        self.excluded_count = 0
        self.co_located_count = 0

    def insert(self, body: Body) -> None:
        """Insert a body into the quadtree."""
        self._insert_into(self.root, body, 0)
        self.body_count += 1

    def _insert_into(self, node: QuadTreeNode, body: Body, depth: int) -> None:
        """Recursively insert body into subtree rooted at node."""
        if node.is_empty():
            node.body = body
            node.members = [body]
            return

        if node.children is None:
            if depth >= self.max_depth:
                node.members.append(body)
                self.co_located_count += 1
                return

            # Leaf with existing body - must subdivide
            existing = node.members
            node.body = None
            node.members = []
            node.children = [QuadTreeNode(q) for q in subdivide(node.sector)]
            for other in existing:
                self._insert_into_child(node, other, depth)

        self._insert_into_child(node, body, depth)

    def _insert_into_child(self, node: QuadTreeNode, body: Body, depth: int) -> None:
        assert node.children is not None
        quadrant = find_quadrant(node.sector, body.position)
        self._insert_into(node.children[quadrant], body, depth + 1)

    def compute_mass_distribution(self) -> None:
        """Compute aggregate bodies for all internal nodes (post-order)."""
        self._aggregate(self.root)

    def _aggregate(self, node: QuadTreeNode) -> Optional[Body]:
        """Return the node's aggregate body, filling in internal nodes on the way up."""
        if node.children is None:
            if len(node.members) > 1:
                node.body = center_of_mass(node.members)
            return node.body

        parts = []
        for child in node.children:
            aggregate = self._aggregate(child)
            if aggregate is not None:
                parts.append(aggregate)

        node.body = center_of_mass(parts)
        return node.body

    def calculate_force(self, body: Body, gravitational_constant: float = G) -> Vector:
        """
        Calculate approximate gravitational force on a body.

        If a cluster is sufficiently far away (width/distance < theta), it
        is treated as a single mass at its center of mass.

        Args:
            body: The body to calculate force on. Identity (not equality)
                is used to skip self-interaction.
            gravitational_constant: G in F = G * m1 * m2 / d^2

        Returns:
            Net force vector (attractive, pointing toward other bodies)
        """
        return self._calculate_force(self.root, body, gravitational_constant)

    def _calculate_force(
        self,
        node: QuadTreeNode,
        body: Body,
        g: float,
    ) -> Vector:
        """Recursively calculate force contribution from node."""
        if node.body is None or node.body.mass == 0:
            return Vector()

        if node.children is None:
            fx, fy = 0.0, 0.0
            for other in node.members:
                if other is body:
                    continue
                force = compute_force(body, other, g)
                fx += force.x
                fy += force.y
            return Vector(fx, fy)

        _, _, d = distance(node.body.position, body.position)

        # Barnes-Hut criterion: s/d < theta
        if d > 0 and node.sector.width / d < self.theta:
            return compute_force(body, node.body, g)

        # Node is too close - recurse into children
        fx, fy = 0.0, 0.0
        for child in node.children:
            force = self._calculate_force(child, body, g)
            fx += force.x
            fy += force.y
        return Vector(fx, fy)

    def calculate_acceleration(self, body: Body, gravitational_constant: float = G) -> Vector:
        """Net force divided by the body's own mass."""
        return self.calculate_force(body, gravitational_constant) / body.mass

    def leaves(self) -> List[QuadTreeNode]:
        """All non-empty leaves, in NW, NE, SW, SE depth-first order."""
        found: List[QuadTreeNode] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.children is not None:
                stack.extend(reversed(node.children))
            elif node.members:
                found.append(node)
        return found

    def depth(self) -> int:
        """Number of levels below the root."""
        return self._depth(self.root)

    def _depth(self, node: QuadTreeNode) -> int:
        if node.children is None:
            return 0
        return 1 + max(self._depth(child) for child in node.children)

    @classmethod
    def from_universe(
        cls,
        universe: Universe,
        theta: float = 0.5,
        max_depth: int = MAX_DEPTH,
    ) -> QuadTree:
        """
        Build a quadtree over a universe snapshot.

        Bodies outside [0, width] x [0, width] are skipped and counted in
        ``excluded_count``; they neither exert nor receive force.

        Args:
            universe: Snapshot to index
            theta: Barnes-Hut threshold
            max_depth: Deepest subdivision level

        Returns:
            QuadTree with all in-domain bodies inserted and mass computed
        """
        tree = cls(Quadrant(0.0, 0.0, universe.width), theta=theta, max_depth=max_depth)

        for body in universe.bodies:
            if is_inside_universe(body, universe.width):
                tree.insert(body)
            else:
                tree.excluded_count += 1

        tree.compute_mass_distribution()

        if tree.co_located_count:
            warnings.warn(
                f"{tree.co_located_count} body(ies) could not be separated from "
                f"a neighbour within {max_depth} subdivisions and share a leaf. "
                "Forces inside such a leaf are computed pairwise.",
                CoincidentBodiesWarning,
                stacklevel=3,
            )
        return tree


def generate_quadtree(
    universe: Universe,
    theta: float = 0.5,
    max_depth: int = MAX_DEPTH,
) -> QuadTree:
    """Build the quadtree for one generation (see QuadTree.from_universe)."""
    return QuadTree.from_universe(universe, theta=theta, max_depth=max_depth)


__all__ = [
    "MAX_DEPTH",
    "CoincidentBodiesWarning",
    "NodeKind",
    "Quadrant",
    "QuadTreeNode",
    "QuadTree",
    "subdivide",
    "find_quadrant",
    "is_inside_universe",
    "center_of_mass",
    "generate_quadtree",
]

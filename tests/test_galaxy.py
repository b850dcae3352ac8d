"""Tests for procedural galaxy generation."""

import math

import numpy as np
import pytest

from barnes_hut import (
    G,
    galaxy_center,
    galaxy_push,
    initialize_galaxy,
    initialize_universe,
)
from barnes_hut.galaxy import BLACK_HOLE_MASS, SOLAR_MASS
from barnes_hut.types import Body, Vector
from barnes_hut.validation import InvalidParameterError, InvalidUniverseError


class TestInitializeGalaxy:
    """Tests for initialize_galaxy()."""

    def test_body_count(self):
        """A galaxy holds the stars plus one black hole."""
        galaxy = initialize_galaxy(25, 100.0, 0.0, 0.0, seed=1)
        assert len(galaxy) == 26

    def test_black_hole_is_last(self):
        """The black hole sits at the center, at rest, as the last body."""
        galaxy = initialize_galaxy(10, 100.0, 3.0, 4.0, seed=1)
        black_hole = galaxy[-1]

        assert black_hole.position == Vector(3.0, 4.0)
        assert black_hole.velocity == Vector(0.0, 0.0)
        assert black_hole.mass == BLACK_HOLE_MASS
        assert all(star.mass == SOLAR_MASS for star in galaxy[:-1])

    def test_star_distances(self):
        """Stars lie between radius and twice the radius from the center."""
        galaxy = initialize_galaxy(200, 50.0, 10.0, -10.0, seed=2)
        for star in galaxy[:-1]:
            d = (star.position - Vector(10.0, -10.0)).magnitude()
            assert 50.0 - 1e-9 <= d < 100.0 + 1e-9

    def test_tangential_velocity(self):
        """Star velocity is perpendicular to the radius, counter-clockwise."""
        galaxy = initialize_galaxy(50, 1e3, 0.0, 0.0, seed=3)
        for star in galaxy[:-1]:
            p, v = star.position, star.velocity
            tolerance = 1e-9 * p.magnitude() * v.magnitude()
            assert p.x * v.x + p.y * v.y == pytest.approx(0.0, abs=tolerance)
            assert p.x * v.y - p.y * v.x > 0

    def test_orbital_speed(self):
        """Stars move at half the circular speed around the black hole."""
        galaxy = initialize_galaxy(20, 1e20, 0.0, 0.0, seed=4)
        for star in galaxy[:-1]:
            d = star.position.magnitude()
            expected = 0.5 * math.sqrt(G * BLACK_HOLE_MASS / d)
            assert star.velocity.magnitude() == pytest.approx(expected, rel=1e-9)

    def test_seed_is_reproducible(self):
        """The same seed produces the same galaxy."""
        assert initialize_galaxy(30, 10.0, 0.0, 0.0, seed=5) == initialize_galaxy(
            30, 10.0, 0.0, 0.0, seed=5
        )

    def test_shared_generator(self):
        """Galaxies drawn from one generator differ from each other."""
        rng = np.random.default_rng(6)
        g0 = initialize_galaxy(10, 10.0, 0.0, 0.0, rng=rng)
        g1 = initialize_galaxy(10, 10.0, 0.0, 0.0, rng=rng)
        assert g0[:-1] != g1[:-1]

    def test_no_stars(self):
        """Zero stars leave only the black hole."""
        galaxy = initialize_galaxy(0, 10.0, 1.0, 1.0)
        assert len(galaxy) == 1

    def test_invalid_arguments(self):
        """Negative star counts and non-positive radii are rejected."""
        with pytest.raises(InvalidParameterError, match="num_stars"):
            initialize_galaxy(-1, 10.0, 0.0, 0.0)
        with pytest.raises(InvalidParameterError, match="radius"):
            initialize_galaxy(10, 0.0, 0.0, 0.0)


class TestInitializeUniverse:
    """Tests for initialize_universe()."""

    def test_concatenates_in_order(self):
        """Bodies keep galaxy order."""
        g0 = [Body(mass=1.0, name="a"), Body(mass=1.0, name="b")]
        g1 = [Body(mass=1.0, name="c")]
        universe = initialize_universe([g0, g1], 100.0)

        assert universe.width == 100.0
        assert [b.name for b in universe.bodies] == ["a", "b", "c"]

    def test_invalid_width(self):
        """Non-positive widths are rejected."""
        with pytest.raises(InvalidUniverseError):
            initialize_universe([], 0.0)


class TestGalaxyPush:
    """Tests for galaxy_center() and galaxy_push()."""

    def test_center(self):
        """The center is the mean body position."""
        galaxy = [
            Body(position=Vector(0.0, 0.0), mass=1.0),
            Body(position=Vector(4.0, 2.0), mass=100.0),
        ]
        assert galaxy_center(galaxy) == Vector(2.0, 1.0)

    def test_empty_center_raises(self):
        """An empty galaxy has no center."""
        with pytest.raises(InvalidParameterError):
            galaxy_center([])

    def test_push_toward_each_other(self):
        """Each galaxy gains speed along the line to the other."""
        g0 = [Body(position=Vector(0.0, 0.0), mass=1.0)]
        g1 = [Body(position=Vector(3.0, 4.0), velocity=Vector(1.0, 1.0), mass=1.0)]

        galaxy_push(g0, g1, 10.0)

        assert g0[0].velocity.x == pytest.approx(6.0)
        assert g0[0].velocity.y == pytest.approx(8.0)
        assert g1[0].velocity.x == pytest.approx(1.0 - 6.0)
        assert g1[0].velocity.y == pytest.approx(1.0 - 8.0)

    def test_push_same_center(self):
        """Galaxies with one center are pushed along the x axis."""
        g0 = [Body(position=Vector(1.0, 1.0), mass=1.0)]
        g1 = [Body(position=Vector(1.0, 1.0), mass=1.0)]

        galaxy_push(g0, g1, 2.0)

        assert g0[0].velocity == Vector(2.0, 0.0)
        assert g1[0].velocity == Vector(-2.0, 0.0)

"""Tests for pairwise gravity and velocity-Verlet integration."""

import pytest

from barnes_hut.physics import (
    G,
    compute_force,
    direct_net_force,
    distance,
    update_acceleration,
    update_position,
    update_velocity,
)
from barnes_hut.spatial.quadtree import generate_quadtree
from barnes_hut.types import Body, Universe, Vector


class TestDistance:
    """Tests for distance()."""

    def test_distance_values(self):
        """Returns displacement p1 - p2 and Euclidean length."""
        dx, dy, d = distance(Vector(3.0, 4.0), Vector(0.0, 0.0))
        assert (dx, dy, d) == (3.0, 4.0, 5.0)

    def test_distance_recovers_displacement(self):
        """dx, dy reconstruct p1 - p2 exactly."""
        p1 = Vector(1.25, -7.5)
        p2 = Vector(-3.0, 2.75)
        dx, dy, _ = distance(p1, p2)
        assert Vector(dx, dy) == p1 - p2

    def test_distance_zero(self):
        """Identical points are at distance zero."""
        assert distance(Vector(2.0, 2.0), Vector(2.0, 2.0)) == (0.0, 0.0, 0.0)


class TestComputeForce:
    """Tests for pairwise Newtonian force."""

    def test_magnitude_and_direction(self):
        """F = G m1 m2 / d^2, pointing toward the other body."""
        body = Body(position=Vector(0.0, 0.0), mass=2.0)
        other = Body(position=Vector(2.0, 0.0), mass=3.0)

        force = compute_force(body, other, gravitational_constant=1.0)
        assert force.x == pytest.approx(1.5)
        assert force.y == 0.0

    def test_newtons_third_law(self):
        """Forces between two bodies are equal and opposite."""
        a = Body(position=Vector(1.0, 2.0), mass=5.0)
        b = Body(position=Vector(4.0, 6.0), mass=7.0)

        f_ab = compute_force(a, b)
        f_ba = compute_force(b, a)
        assert f_ab.x == pytest.approx(-f_ba.x)
        assert f_ab.y == pytest.approx(-f_ba.y)

    def test_default_constant(self):
        """The default gravitational constant is G."""
        a = Body(position=Vector(0.0, 0.0), mass=1.0)
        b = Body(position=Vector(1.0, 0.0), mass=1.0)
        assert compute_force(a, b).x == pytest.approx(G)

    def test_coincident_bodies(self):
        """Zero distance gives zero force."""
        a = Body(position=Vector(1.0, 1.0), mass=1.0)
        b = Body(position=Vector(1.0, 1.0), mass=1.0)
        assert compute_force(a, b) == Vector(0.0, 0.0)


class TestDirectNetForce:
    """Tests for exact summation."""

    def test_skips_self(self):
        """A lone body feels no force."""
        body = Body(position=Vector(1.0, 1.0), mass=1.0)
        assert direct_net_force(body, [body]) == Vector(0.0, 0.0)

    def test_symmetric_forces_cancel(self):
        """A body midway between two equal masses feels no net force."""
        middle = Body(position=Vector(5.0, 5.0), mass=1.0)
        left = Body(position=Vector(0.0, 5.0), mass=2.0)
        right = Body(position=Vector(10.0, 5.0), mass=2.0)

        force = direct_net_force(middle, [left, middle, right], gravitational_constant=1.0)
        assert force.x == pytest.approx(0.0)
        assert force.y == pytest.approx(0.0)


class TestIntegration:
    """Tests for the velocity-Verlet update helpers."""

    def test_velocity_from_rest(self):
        """From rest with no prior acceleration, v = 0.5 * a * dt."""
        body = Body(acceleration=Vector(2.0, -4.0), mass=1.0)
        velocity = update_velocity(body, Vector(0.0, 0.0), 0.5)
        assert velocity == Vector(0.5, -1.0)

    def test_position_from_rest(self):
        """From rest at the origin, p = 0.5 * a * dt^2."""
        body = Body(mass=1.0)
        position = update_position(body, Vector(2.0, -4.0), Vector(0.0, 0.0), 0.5)
        assert position == Vector(0.25, -0.5)

    def test_velocity_averages_accelerations(self):
        """v' = v + 0.5 * (a_new + a_old) * dt."""
        body = Body(velocity=Vector(1.0, 1.0), acceleration=Vector(3.0, 0.0), mass=1.0)
        velocity = update_velocity(body, Vector(1.0, 2.0), 2.0)
        assert velocity == Vector(1.0 + 0.5 * 4.0 * 2.0, 1.0 + 0.5 * 2.0 * 2.0)

    def test_position_uses_old_velocity(self):
        """p' = p + v_old * dt + 0.5 * a_old * dt^2, ignoring the body's new velocity."""
        body = Body(
            position=Vector(10.0, 20.0),
            velocity=Vector(100.0, 100.0),
            acceleration=Vector(50.0, 50.0),
            mass=1.0,
        )
        position = update_position(body, Vector(2.0, 0.0), Vector(1.0, -1.0), 3.0)
        assert position == Vector(10.0 + 3.0 + 9.0, 20.0 - 3.0)

    def test_update_acceleration(self):
        """Acceleration is the tree force divided by the body's mass."""
        a = Body(position=Vector(40.0, 50.0), mass=2.0)
        b = Body(position=Vector(60.0, 50.0), mass=8.0)
        tree = generate_quadtree(Universe(100.0, [a, b]))

        accel = update_acceleration(a, tree, gravitational_constant=1.0)
        assert accel.x == pytest.approx(8.0 / 400.0)
        assert accel.y == pytest.approx(0.0)

import math

import pytest

from sketchkit.physics.particle import Particle


def test_defaults():
    p = Particle()
    assert (p.x, p.y) == (0.0, 0.0)
    assert p.radius == 10
    assert p.mass == 1
    assert p.drag == pytest.approx(0.8)
    assert p.active is True
    assert p.collide is False


def test_mass_sets_inverse():
    p = Particle(mass=4.0)
    assert p.inv_mass * p.mass == pytest.approx(1.0)
    p.mass = 0.25
    assert p.inv_mass * p.mass == pytest.approx(1.0)


def test_zero_mass_rejected():
    with pytest.raises(ValueError):
        Particle(mass=0)


def test_update_at_rest_without_force_stays():
    p = Particle(3.0, 4.0)
    p.update()
    assert p.position == (3.0, 4.0)


def test_update_applies_force_scaled_by_mass():
    p = Particle(0.0, 0.0, mass=2.0, drag=1.0)
    p.apply_force((4.0, 0.0))
    p.update()
    assert p.x == pytest.approx(2.0)
    assert p.acceleration == (0.0, 0.0)


def test_update_damps_velocity_by_drag():
    p = Particle(0.0, 0.0, drag=0.5)
    p.velocity = (10.0, -4.0)
    p.update()
    vx, vy = p.velocity
    assert vx == pytest.approx(10.0 * 0.5)
    assert vy == pytest.approx(-4.0 * 0.5)


def test_inactive_particle_does_not_integrate():
    p = Particle(1.0, 1.0)
    p.velocity = (5.0, 5.0)
    p.active = False
    p.apply_force((10.0, 10.0))
    p.update()
    p.apply_impulse((3.0, 3.0))
    assert p.position == (1.0, 1.0)


def test_impulse_moves_active_particle():
    p = Particle(1.0, 2.0)
    p.apply_impulse((3.0, -1.0))
    assert p.position == (4.0, 1.0)
    assert p.velocity == (3.0, -1.0)


def test_distance_functions_agree():
    a = Particle(0.0, 0.0)
    b = Particle(3.0, 4.0)
    assert a.distance_to(b) == pytest.approx(5.0)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to_squared(b) == pytest.approx(a.distance_to(b) ** 2)


def test_contains_point():
    p = Particle(10.0, 10.0, radius=5.0)
    assert p.contains_point((10.0, 10.0))
    assert p.contains_point((12.0, 12.0))
    assert not p.contains_point((15.0, 10.0))


def test_move_to_keeps_velocity():
    p = Particle()
    p.velocity = (2.0, 3.0)
    p.move_to(50.0, -20.0)
    assert p.position == (50.0, -20.0)
    assert p.velocity == pytest.approx((2.0, 3.0))


def test_move_by_keeps_velocity():
    p = Particle(1.0, 1.0)
    p.velocity = (1.0, 0.0)
    p.move_by(4.0, 5.0)
    assert p.position == (5.0, 6.0)
    assert p.velocity == pytest.approx((1.0, 0.0))


def test_lerp_full_reaches_target_and_zero_stays():
    p = Particle(0.0, 0.0)
    p.lerp((8.0, 6.0), 0.0)
    assert p.position == (0.0, 0.0)
    p.lerp((8.0, 6.0), 1.0)
    assert p.position == pytest.approx((8.0, 6.0))


def test_move_towards_force_points_at_target():
    p = Particle(0.0, 0.0)
    p.move_towards((10.0, 0.0), 0.5)
    ax, ay = p.acceleration
    assert ax > 0
    assert ay == 0


def test_attraction_and_repulsion_are_opposite_in_direction():
    a = Particle(0.0, 0.0)
    r = Particle(0.0, 0.0)
    a.apply_attraction_force((0.0, 10.0), 1.0)
    r.apply_repulsion_force((0.0, 10.0), 1.0)
    assert a.acceleration[1] > 0
    assert r.acceleration[1] < 0


def test_attraction_at_target_adds_nothing():
    p = Particle(2.0, 2.0)
    p.apply_attraction_force((2.0, 2.0), 5.0)
    assert p.acceleration == (0.0, 0.0)


def test_stop_motion():
    p = Particle(1.0, 1.0)
    p.velocity = (3.0, 3.0)
    p.apply_force((1.0, 1.0))
    p.stop_motion()
    assert p.velocity == (0.0, 0.0)
    assert p.acceleration == (0.0, 0.0)


def test_set_speed_keeps_direction():
    p = Particle()
    p.velocity = (3.0, 4.0)
    p.set_speed(10.0)
    vx, vy = p.velocity
    assert math.hypot(vx, vy) == pytest.approx(10.0)
    assert vy / vx == pytest.approx(4.0 / 3.0)


def test_set_speed_at_rest_raises():
    with pytest.raises(ValueError):
        Particle().set_speed(1.0)
import pytest

from sketchkit.physics.constraints import (
    Constraint,
    ConstraintType,
    MaxDistSpring,
    MinDistSpring,
    Spring,
)
from sketchkit.physics.particle import Particle


def _pair(distance):
    return Particle(0.0, 0.0), Particle(distance, 0.0)


@pytest.mark.parametrize(
    "cls, expected_type, expected_value",
    [
        (Spring, ConstraintType.SPRING, 0),
        (MaxDistSpring, ConstraintType.MAX_DIST_SPRING, 3),
        (MinDistSpring, ConstraintType.MIN_DIST_SPRING, 4),
    ],
)
def test_type_values(cls, expected_type, expected_value):
    a, b = _pair(1.0)
    constraint = cls(a, b, 1.0)
    assert constraint.type is expected_type
    assert int(constraint.type) == expected_value


def test_base_is_abstract():
    a, b = _pair(1.0)
    with pytest.raises(TypeError):
        Constraint(a, b, 1.0, 1.0, ConstraintType.SPRING)


def test_spring_fields():
    a, b = _pair(10.0)
    s = Spring(a, b, 4.0)
    assert s.type is ConstraintType.SPRING
    assert s.strength == 1.0
    assert s.inv_rest * s.rest == pytest.approx(1.0)
    assert s.on


def test_involves():
    a, b = _pair(1.0)
    c = Particle()
    s = Spring(a, b, 1.0)
    assert s.involves(a)
    assert s.involves(b)
    assert not s.involves(c)


def test_spring_restores_rest_length_both_active():
    a, b = _pair(10.0)
    Spring(a, b, 5.0).update()
    assert a.distance_to(b) == pytest.approx(5.0)
    assert (a.x + b.x) / 2 == pytest.approx(5.0)


def test_spring_stretches_to_rest():
    a, b = _pair(2.0)
    Spring(a, b, 6.0).update()
    assert a.distance_to(b) == pytest.approx(6.0)


def test_spring_moves_only_active_end():
    a, b = _pair(10.0)
    a.active = False
    Spring(a, b, 4.0).update()
    assert a.position == (0.0, 0.0)
    assert a.distance_to(b) == pytest.approx(4.0)


def test_spring_both_inactive_does_nothing():
    a, b = _pair(10.0)
    a.active = b.active = False
    Spring(a, b, 4.0).update()
    assert b.position == (10.0, 0.0)


def test_spring_off_does_nothing():
    a, b = _pair(10.0)
    s = Spring(a, b, 4.0)
    s.on = False
    s.update()
    assert a.distance_to(b) == pytest.approx(10.0)


def test_max_dist_spring_ignores_short_distance():
    a, b = _pair(3.0)
    MaxDistSpring(a, b, 5.0).update()
    assert a.distance_to(b) == pytest.approx(3.0)


def test_max_dist_spring_pulls_in_long_distance():
    a, b = _pair(12.0)
    m = MaxDistSpring(a, b, 5.0)
    assert m.type is ConstraintType.MAX_DIST_SPRING
    m.update()
    assert a.distance_to(b) == pytest.approx(5.0)


def test_min_dist_spring_ignores_long_distance():
    a, b = _pair(12.0)
    MinDistSpring(a, b, 5.0).update()
    assert a.distance_to(b) == pytest.approx(12.0)


def test_min_dist_spring_pushes_apart():
    a, b = _pair(4.0)
    MinDistSpring(a, b, 10.0).update()
    assert a.distance_to(b) == pytest.approx(10.0)


def test_min_dist_spring_single_active_moves_half_way():
    a, b = _pair(4.0)
    a.active = False
    MinDistSpring(a, b, 10.0).update()
    assert a.position == (0.0, 0.0)
    assert b.x == pytest.approx(7.0)


def test_heavier_particle_moves_less():
    a = Particle(0.0, 0.0, mass=10.0)
    b = Particle(10.0, 0.0, mass=1.0)
    Spring(a, b, 5.0).update()
    assert abs(a.x) < abs(b.x - 10.0)
    assert a.distance_to(b) == pytest.approx(5.0)
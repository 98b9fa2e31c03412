import pytest

from sketchkit.physics.collision import (
    CollisionSolver,
    SimpleCollisionSolver,
    SortingCollisionSolver,
)
from sketchkit.physics.particle import Particle

SOLVERS = [SimpleCollisionSolver, SortingCollisionSolver]


def test_base_is_abstract():
    with pytest.raises(TypeError):
        CollisionSolver()


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_equal_masses_separate_symmetrically(solver_cls):
    a = Particle(0, 0, radius=5)
    b = Particle(6, 0, radius=5)
    solver_cls().solve([a, b])
    assert a.distance_to(b) == pytest.approx(a.radius + b.radius)
    assert (a.x + b.x) / 2 == pytest.approx(3.0)
    assert a.y == b.y == 0.0


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_heavier_particle_moves_less(solver_cls):
    a = Particle(0, 0, radius=5, mass=1)
    b = Particle(6, 0, radius=5, mass=3)
    solver_cls().solve([a, b])
    moved_a = abs(a.x - 0)
    moved_b = abs(b.x - 6)
    assert moved_a == pytest.approx(moved_b * 3)
    assert a.distance_to(b) == pytest.approx(a.radius + b.radius)


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_inactive_particle_stays(solver_cls):
    a = Particle(0, 0, radius=5)
    a.active = False
    b = Particle(0, 3, radius=5)
    solver_cls().solve([a, b])
    assert a.position == (0.0, 0.0)
    assert a.distance_to(b) == pytest.approx(a.radius + b.radius)


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_both_inactive_do_not_move(solver_cls):
    a = Particle(0, 0, radius=5)
    b = Particle(2, 0, radius=5)
    a.active = b.active = False
    solver_cls().solve([a, b])
    assert a.position == (0.0, 0.0)
    assert b.position == (2.0, 0.0)


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_single_particle_untouched(solver_cls):
    p = Particle(1, 2)
    particles = [p]
    solver_cls().solve(particles)
    assert particles == [p]
    assert p.position == (1.0, 2.0)


@pytest.mark.parametrize("solver_cls", SOLVERS)
def test_separated_particles_untouched(solver_cls):
    a = Particle(0, 0, radius=2)
    b = Particle(100, 0, radius=2)
    solver_cls().solve([a, b])
    assert a.position == (0.0, 0.0)
    assert b.position == (100.0, 0.0)


def test_sorting_solver_sorts_list_by_x():
    particles = [Particle(x, 0, radius=1) for x in (50, 10, 30, 0)]
    SortingCollisionSolver().solve(particles)
    xs = [p.x for p in particles]
    assert xs == sorted(xs)


def test_solvers_agree_on_pair():
    pair_a = [Particle(0, 0, radius=4), Particle(3, 2, radius=4)]
    pair_b = [Particle(0, 0, radius=4), Particle(3, 2, radius=4)]
    SimpleCollisionSolver().solve(pair_a)
    SortingCollisionSolver().solve(pair_b)
    for p, q in zip(pair_a, pair_b):
        assert p.position == pytest.approx(q.position)
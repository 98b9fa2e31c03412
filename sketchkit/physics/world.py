"""A 2D world of Verlet particles held together by constraints."""

from __future__ import annotations

from collections.abc import Iterable

from .collision import CollisionSolver, SortingCollisionSolver
from .constraints import Constraint
from .particle import Particle

__all__ = ["World"]

Vector = tuple[float, float]


class World:
    """Particles, constraints and the rules that step them forward.

    Each ``update`` applies gravity as an impulse, integrates every particle,
    then relaxes the constraints ``iterations`` times. After each relaxation
    pass, collisions are resolved when enabled and particles are clamped into
    the world box when bounds checking is on and a box is set.
    """

    def __init__(
        self,
        gravity: Vector = (0.0, 0.0),
        collisions: bool = False,
        iterations: int = 10,
        world_min: Vector = (0.0, 0.0),
        world_max: Vector | None = None,
        check_bounds: bool = True,
        gravity_enabled: bool = True,
        collision_solver: CollisionSolver | None = None,
    ) -> None:
        if iterations < 0:
            raise ValueError("iterations must not be negative")
        self.gravity: Vector = (float(gravity[0]), float(gravity[1]))
        self.collisions = collisions
        self.iterations = iterations
        self.world_min: Vector = (float(world_min[0]), float(world_min[1]))
        self.world_max: Vector | None = (
            None if world_max is None else (float(world_max[0]), float(world_max[1]))
        )
        self.check_bounds = check_bounds
        self.gravity_enabled = gravity_enabled
        self.collision_solver: CollisionSolver = (
            SortingCollisionSolver() if collision_solver is None else collision_solver
        )
        self.particles: list[Particle] = []
        self.constraints: list[Constraint] = []

    @property
    def num_particles(self) -> int:
        return len(self.particles)

    @property
    def num_constraints(self) -> int:
        return len(self.constraints)

    def update(self, time_step: float = 1.0) -> None:
        """Advance the world by one step."""
        if self.gravity_enabled:
            for particle in self.particles:
                particle.apply_impulse(self.gravity)
        for particle in self.particles:
            particle.update(time_step)
        for _ in range(self.iterations):
            for constraint in self.constraints:
                constraint.update()
            if self.collisions:
                self.collision_solver.solve(self.particles)
            if self.check_bounds:
                self._constrain_to_bounds()

    def _constrain_to_bounds(self) -> None:
        if self.world_max is None:
            return
        min_x, min_y = self.world_min
        max_x, max_y = self.world_max
        for particle in self.particles:
            r = particle.radius
            particle.x = max(min_x + r, min(max_x - r, particle.x))
            particle.y = max(min_y + r, min(max_y - r, particle.y))

    def add_particle(self, particle: Particle, collisions: bool | None = None) -> None:
        """Add ``particle``; its collision flag follows the world unless given."""
        self.particles.append(particle)
        particle.collide = self.collisions if collisions is None else collisions

    def add_particles(self, particles: Iterable[Particle]) -> None:
        for particle in particles:
            self.add_particle(particle)

    def add_constraint(self, constraint: Constraint) -> None:
        self.constraints.append(constraint)

    def remove_particle(self, particle: Particle) -> None:
        """Remove ``particle`` if present; its constraints are left in place."""
        for index, candidate in enumerate(self.particles):
            if candidate is particle:
                del self.particles[index]
                return

    def remove_constraint(self, constraint: Constraint) -> None:
        """Remove ``constraint`` if present."""
        for index, candidate in enumerate(self.constraints):
            if candidate is constraint:
                del self.constraints[index]
                return

    def has_particle(self, particle: Particle) -> bool:
        return any(candidate is particle for candidate in self.particles)

    def has_constraint(self, constraint: Constraint) -> bool:
        return any(candidate is constraint for candidate in self.constraints)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Particle):
            return self.has_particle(item)
        if isinstance(item, Constraint):
            return self.has_constraint(item)
        return False

    def remove_constraints_with_particle(self, particle: Particle) -> None:
        """Remove every constraint that has ``particle`` at one of its ends."""
        self.constraints = [c for c in self.constraints if not c.involves(particle)]

    def has_constraints_with_particle(self, particle: Particle) -> bool:
        return any(c.involves(particle) for c in self.constraints)

    def constraint_with_particle(self, particle: Particle) -> Constraint | None:
        """The first constraint attached to ``particle``, if any."""
        return next((c for c in self.constraints if c.involves(particle)), None)

    def nearest_particle(self, point: Vector) -> Particle | None:
        """The particle closest to ``point``; the earliest wins a tie."""
        if not self.particles:
            return None
        px, py = point
        return min(
            self.particles,
            key=lambda p: (p.x - px) * (p.x - px) + (p.y - py) * (p.y - py),
        )

    def particle_under_point(self, point: Vector) -> Particle | None:
        """The first particle whose circle strictly contains ``point``, if any."""
        return next((p for p in self.particles if p.contains_point(point)), None)

    def clear_particles(self) -> None:
        self.particles.clear()

    def clear_constraints(self) -> None:
        self.constraints.clear()

    def clear(self) -> None:
        self.clear_particles()
        self.clear_constraints()
"""Verlet particles for the 2D physics world."""

from __future__ import annotations

import math

__all__ = ["Particle"]

Vector = tuple[float, float]


class Particle:
    """A round particle integrated with position Verlet.

    The velocity is implicit: it is the difference between the current and
    the previous position. Forces collect into an acceleration that is
    consumed by the next ``update``. An inactive particle is not moved by
    integration, impulses or constraints.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        radius: float = 10.0,
        mass: float = 1.0,
        drag: float = 0.8,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self._old_x = self.x
        self._old_y = self.y
        self._ax = 0.0
        self._ay = 0.0
        self.radius = radius
        self.drag = drag
        self.mass = mass
        self.active = True
        self.collide = False

    def __repr__(self) -> str:
        return (
            f"Particle(x={self.x!r}, y={self.y!r}, radius={self.radius!r}, "
            f"mass={self.mass!r}, drag={self.drag!r})"
        )

    @property
    def mass(self) -> float:
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        if value == 0:
            raise ValueError("mass must not be zero")
        self._mass = value
        self._inv_mass = 1.0 / value

    @property
    def inv_mass(self) -> float:
        return self._inv_mass

    @property
    def position(self) -> Vector:
        return (self.x, self.y)

    @property
    def velocity(self) -> Vector:
        """Displacement since the previous step."""
        return (self.x - self._old_x, self.y - self._old_y)

    @velocity.setter
    def velocity(self, vel: Vector) -> None:
        self._old_x = self.x - vel[0]
        self._old_y = self.y - vel[1]

    @property
    def acceleration(self) -> Vector:
        """Force accumulated since the last ``update``."""
        return (self._ax, self._ay)

    def update(self, time_step: float = 1.0) -> None:
        """Advance one Verlet step, consuming the accumulated force."""
        if not self.active:
            return
        prev_x, prev_y = self.x, self.y
        ax = self._ax * self._inv_mass
        ay = self._ay * self._inv_mass
        dt2 = time_step * time_step
        self.x += (self.x - self._old_x) * self.drag + ax * dt2
        self.y += (self.y - self._old_y) * self.drag + ay * dt2
        self._ax = self._ay = 0.0
        self._old_x, self._old_y = prev_x, prev_y

    def apply_force(self, force: Vector) -> None:
        self._ax += force[0]
        self._ay += force[1]

    def apply_impulse(self, impulse: Vector) -> None:
        """Shift the position, and so the velocity, of an active particle."""
        if self.active:
            self.x += impulse[0]
            self.y += impulse[1]

    def distance_to(self, other: Particle) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def distance_to_squared(self, other: Particle) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def contains_point(self, point: Vector) -> bool:
        """Whether ``point`` lies strictly inside the particle's circle."""
        dx = point[0] - self.x
        dy = point[1] - self.y
        return dx * dx + dy * dy < self.radius * self.radius

    def move_to(self, x: float, y: float) -> None:
        """Place the particle at ``(x, y)`` keeping its velocity."""
        self.move_by(x - self.x, y - self.y)

    def move_by(self, dx: float, dy: float) -> None:
        """Translate the particle keeping its velocity."""
        self.x += dx
        self.y += dy
        self._old_x += dx
        self._old_y += dy

    def lerp(self, target: Vector, amount: float) -> None:
        """Move a fraction ``amount`` of the way to ``target``, keeping velocity."""
        self.move_by((target[0] - self.x) * amount, (target[1] - self.y) * amount)

    def move_towards(self, target: Vector, strength: float) -> None:
        """Apply a force towards ``target`` proportional to the distance."""
        self.apply_force(
            ((target[0] - self.x) * strength, (target[1] - self.y) * strength)
        )

    def apply_attraction_force(self, target: Vector, amount: float) -> None:
        fx = target[0] - self.x
        fy = target[1] - self.y
        length = math.hypot(fx, fy)
        if length == 0:
            return
        dist = min(1.0, length)
        scale = amount / (dist * dist * dist)
        self.apply_force((fx * scale, fy * scale))

    def apply_repulsion_force(self, target: Vector, amount: float) -> None:
        fx = target[0] - self.x
        fy = target[1] - self.y
        dist = max(1.0, math.hypot(fx, fy))
        scale = -amount / (dist * dist * dist)
        self.apply_force((fx * scale, fy * scale))

    def stop_motion(self) -> None:
        """Drop accumulated force and velocity."""
        self._ax = self._ay = 0.0
        self._old_x, self._old_y = self.x, self.y

    def set_speed(self, speed: float) -> None:
        """Rescale the velocity to ``speed`` keeping its direction."""
        vx, vy = self.velocity
        magnitude = math.hypot(vx, vy)
        if magnitude == 0:
            raise ValueError("cannot set the speed of a particle at rest")
        factor = speed / magnitude
        self.velocity = (vx * factor, vy * factor)
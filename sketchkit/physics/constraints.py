"""Distance constraints between pairs of particles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import IntEnum

from .particle import Particle

__all__ = [
    "ConstraintType",
    "Constraint",
    "Spring",
    "MaxDistSpring",
    "MinDistSpring",
]


class ConstraintType(IntEnum):
    SPRING = 0
    FOLLOWER = 1
    INEQUALITY = 2
    MAX_DIST_SPRING = 3
    MIN_DIST_SPRING = 4
    SUPPORT = 5
    COLLISION = 6


class Constraint(ABC):
    """A relation between particles ``a`` and ``b`` enforced by ``update``."""

    type: ConstraintType

    def __init__(
        self,
        a: Particle,
        b: Particle,
        rest: float,
        strength: float,
        kind: ConstraintType,
    ) -> None:
        self.a = a
        self.b = b
        self.rest = rest
        self.strength = strength
        self.type = kind
        self.on = True

    @property
    def inv_rest(self) -> float:
        return math.inf if self.rest == 0 else 1.0 / self.rest

    @abstractmethod
    def update(self) -> None:
        """Move the particles towards satisfying the constraint."""

    def involves(self, particle: Particle) -> bool:
        """Whether ``particle`` is one of the two ends."""
        return self.a is particle or self.b is particle

    def _delta(self) -> tuple[float, float, float]:
        dx = self.b.x - self.a.x
        dy = self.b.y - self.a.y
        return dx, dy, dx * dx + dy * dy

    def _relax(
        self,
        dx: float,
        dy: float,
        dist_sq: float,
        both_factor: float,
        single_factor: float,
    ) -> None:
        """Pull the ends along ``(dx, dy)`` towards the rest length."""
        a, b = self.a, self.b
        dist = 1.0 if dist_sq < 1 else math.sqrt(dist_sq)
        if a.active and b.active:
            move = both_factor * (dist - self.rest) / (dist * (a.inv_mass + b.inv_mass))
            wa = move * a.inv_mass
            a.x += dx * wa
            a.y += dy * wa
            wb = move * b.inv_mass
            b.x -= dx * wb
            b.y -= dy * wb
        else:
            move = single_factor * (dist - self.rest) / dist
            if a.active:
                a.x += dx * move
                a.y += dy * move
            else:
                b.x -= dx * move
                b.y -= dy * move

    def _skip(self) -> bool:
        return not self.on or (not self.a.active and not self.b.active)


class Spring(Constraint):
    """Keeps the two particles at the rest distance."""

    def __init__(
        self, a: Particle, b: Particle, rest: float, strength: float = 1.0
    ) -> None:
        super().__init__(a, b, rest, strength, ConstraintType.SPRING)

    def update(self) -> None:
        if self._skip():
            return
        dx, dy, dist_sq = self._delta()
        self._relax(dx, dy, dist_sq, self.strength, self.strength)


class MaxDistSpring(Constraint):
    """Acts only once the particles are farther apart than the rest distance."""

    def __init__(
        self, a: Particle, b: Particle, rest: float, strength: float = 1.0
    ) -> None:
        super().__init__(a, b, rest, strength, ConstraintType.MAX_DIST_SPRING)

    def update(self) -> None:
        if self._skip():
            return
        dx, dy, dist_sq = self._delta()
        if dist_sq < self.rest * self.rest:
            return
        self._relax(dx, dy, dist_sq, self.strength, self.strength * 0.5)


class MinDistSpring(Constraint):
    """Acts only once the particles are closer than the rest distance."""

    def __init__(
        self, a: Particle, b: Particle, rest: float, strength: float = 1.0
    ) -> None:
        super().__init__(a, b, rest, strength, ConstraintType.MIN_DIST_SPRING)

    def update(self) -> None:
        if self._skip():
            return
        dx, dy, dist_sq = self._delta()
        if dist_sq > self.rest * self.rest:
            return
        self._relax(dx, dy, dist_sq, self.strength, 0.5)
"""Constraints with special rules: bounds, following, collision and support."""

from __future__ import annotations

import math

from .constraints import Constraint, ConstraintType, MinDistSpring, Spring
from .particle import Particle

__all__ = [
    "InequalityConstraint",
    "FollowerConstraint",
    "CollisionConstraint",
    "SupportConstraint",
]


class InequalityConstraint(Constraint):
    """Acts only when the particles are closer than ``min_rest`` or farther than ``max_rest``.

    While acting, ``rest`` is set to whichever bound was crossed.
    """

    def __init__(
        self,
        a: Particle,
        b: Particle,
        min_rest: float,
        max_rest: float,
        strength: float,
    ) -> None:
        super().__init__(a, b, min_rest, strength, ConstraintType.INEQUALITY)
        self.min_rest = min_rest
        self.max_rest = max_rest

    def update(self) -> None:
        if self._skip():
            return
        a, b = self.a, self.b
        dx, dy, dist_sq = self._delta()
        min_sq = self.min_rest * self.min_rest
        max_sq = self.max_rest * self.max_rest
        if min_sq < dist_sq < max_sq:
            return
        self.rest = self.min_rest if dist_sq < min_sq else self.max_rest
        dist = 1.0 if dist_sq < 1 else math.sqrt(dist_sq)
        if a.active and b.active:
            # With both ends free, each end shifts by the same amount on both axes.
            move = self.strength * (dist - self.rest) / dist * (a.inv_mass + b.inv_mass)
            wa = move * a.inv_mass
            a.x += move * wa
            a.y += move * wa
            wb = move * b.inv_mass
            b.x -= move * wb
            b.y -= move * wb
        else:
            move = self.strength * (dist - self.rest) / dist
            if a.active:
                a.x += move * dx
                a.y += move * dy
            else:
                b.x -= move * dx
                b.y -= move * dy


class FollowerConstraint(Constraint):
    """Pulls the follower (``a``) towards the leader (``b``); the leader is not moved."""

    def __init__(self, follower: Particle, leader: Particle, strength: float) -> None:
        super().__init__(follower, leader, 0.0, strength, ConstraintType.FOLLOWER)

    @property
    def follower(self) -> Particle:
        return self.a

    @property
    def leader(self) -> Particle:
        return self.b

    def update(self) -> None:
        if not self.on or not self.a.active:
            return
        a, b = self.a, self.b
        factor = self.strength * a.inv_mass
        a.x += (b.x - a.x) * factor
        a.y += (b.y - a.y) * factor


class CollisionConstraint(Constraint):
    """Pushes two particles apart while their circles overlap.

    The rest distance is the sum of the radii, taken afresh on every update.
    The constraint acts whether or not it is switched on.
    """

    def __init__(self, a: Particle, b: Particle) -> None:
        super().__init__(a, b, 1.0, 1.0, ConstraintType.COLLISION)

    def update(self) -> None:
        a, b = self.a, self.b
        if not a.active and not b.active:
            return
        self.rest = a.radius + b.radius
        dx, dy, dist_sq = self._delta()
        if dist_sq > self.rest * self.rest:
            return
        self._relax(dx, dy, dist_sq, 1.0, 1.0)


class SupportConstraint(Constraint):
    """Two springs from a pivot to ``begin`` and ``end``, plus a minimum-distance
    spring that keeps ``begin`` and ``end`` from folding together."""

    def __init__(
        self,
        begin: Particle,
        end: Particle,
        pivot: Particle,
        rest: float,
        support_rest: float,
        strength: float = 1.0,
    ) -> None:
        self.pivot = pivot
        self._support = MinDistSpring(begin, end, support_rest, strength)
        self._spring_a = Spring(pivot, begin, rest, strength)
        self._spring_b = Spring(pivot, end, rest, strength)
        self._support_rest = support_rest
        super().__init__(begin, end, rest, strength, ConstraintType.SUPPORT)

    @property
    def begin(self) -> Particle:
        return self.a

    @begin.setter
    def begin(self, particle: Particle) -> None:
        self.a = particle

    @property
    def end(self) -> Particle:
        return self.b

    @end.setter
    def end(self, particle: Particle) -> None:
        self.b = particle

    @property
    def support(self) -> MinDistSpring:
        return self._support

    @property
    def spring_a(self) -> Spring:
        return self._spring_a

    @property
    def spring_b(self) -> Spring:
        return self._spring_b

    @property
    def rest(self) -> float:
        return self._rest

    @rest.setter
    def rest(self, value: float) -> None:
        self._rest = value
        self._spring_a.rest = value
        self._spring_b.rest = value

    @property
    def strength(self) -> float:
        return self._strength

    @strength.setter
    def strength(self, value: float) -> None:
        self._strength = value
        self._support.strength = value

    @property
    def support_rest(self) -> float:
        return self._support_rest

    @support_rest.setter
    def support_rest(self, value: float) -> None:
        self._support_rest = value
        self._support.rest = value

    def update(self) -> None:
        if not self.on:
            return
        if not (self.a.active or self.b.active):
            return
        self._support.update()
        self._spring_a.update()
        self._spring_b.update()
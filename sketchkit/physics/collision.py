"""Collision solvers that push overlapping particles apart."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .particle import Particle

__all__ = ["CollisionSolver", "SimpleCollisionSolver", "SortingCollisionSolver"]


def _separate(a: Particle, b: Particle) -> None:
    """Push ``a`` and ``b`` apart if their circles overlap."""
    if not a.active and not b.active:
        return
    rest = a.radius + b.radius
    dx = a.x - b.x
    dy = a.y - b.y
    dist_sq = dx * dx + dy * dy
    if dist_sq > rest * rest:
        return
    dist = 1.0 if dist_sq < 1 else math.sqrt(dist_sq)
    if a.active and b.active:
        move = (dist - rest) / (dist * (a.inv_mass + b.inv_mass))
        wa = move * a.inv_mass
        a.x -= dx * wa
        a.y -= dy * wa
        wb = move * b.inv_mass
        b.x += dx * wb
        b.y += dy * wb
    else:
        move = (dist - rest) / dist
        if a.active:
            a.x -= dx * move
            a.y -= dy * move
        else:
            b.x += dx * move
            b.y += dy * move


class CollisionSolver(ABC):
    """Resolves overlaps within a list of particles."""

    @abstractmethod
    def solve(self, particles: list[Particle]) -> None:
        """Move overlapping particles apart in place."""


class SimpleCollisionSolver(CollisionSolver):
    """Checks every pair of particles."""

    def solve(self, particles: list[Particle]) -> None:
        if len(particles) < 2:
            return
        for i, a in enumerate(particles):
            for b in particles[:i]:
                _separate(a, b)


class SortingCollisionSolver(CollisionSolver):
    """Sorts the particles by x and checks only neighbours close enough in x.

    The list passed in is sorted in place.
    """

    def solve(self, particles: list[Particle]) -> None:
        if len(particles) < 2:
            return
        max_dist = max(int(p.radius) for p in particles) * 2
        particles.sort(key=lambda p: p.x)
        for i, a in enumerate(particles):
            for j in range(i - 1, -1, -1):
                b = particles[j]
                if abs(a.x - b.x) > max_dist:
                    break
                _separate(a, b)
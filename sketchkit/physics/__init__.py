"""A small 2D Verlet particle engine with constraints and collision solvers."""

__all__ = ["collision", "constraints", "particle", "special", "world"]
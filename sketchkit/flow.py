"""Sparse optical-flow points and operations on sets of them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = ["FlowPoint", "FlowField"]


@dataclass
class FlowPoint:
    """A tracked point with its earlier position and the displacement between them."""

    x: float
    y: float
    old_x: float
    old_y: float
    dx: float = field(init=False)
    dy: float = field(init=False)

    def __post_init__(self) -> None:
        self.dx = self.x - self.old_x
        self.dy = self.y - self.old_y

    def distance(self) -> float:
        """Length of the displacement."""
        return math.hypot(self.dx, self.dy)

    def distance_squared(self) -> float:
        """Squared length of the displacement."""
        return self.dx * self.dx + self.dy * self.dy

    def scale(self, sx: float, sy: float) -> None:
        """Scale position, old position and displacement in place."""
        self.x *= sx
        self.y *= sy
        self.old_x *= sx
        self.old_y *= sy
        self.dx *= sx
        self.dy *= sy


class FlowField:
    """The flow points found in an image of a given size."""

    def __init__(
        self, width: int, height: int, points: Iterable[FlowPoint] = ()
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image size must be positive")
        self.width = width
        self.height = height
        self.points: list[FlowPoint] = list(points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[FlowPoint]:
        return iter(self.points)

    def set_points(self, points: Iterable[FlowPoint]) -> None:
        """Replace the flow points."""
        self.points = list(points)

    def normalize(self) -> None:
        """Map image coordinates into 0..1."""
        self.scale(1.0 / self.width, 1.0 / self.height)

    def scale(self, sx: float, sy: float) -> None:
        for point in self.points:
            point.scale(sx, sy)

    def scale_to(self, width: float, height: float) -> None:
        """Map image coordinates onto a target area of ``width`` x ``height``."""
        self.scale(width / self.width, height / self.height)

    def filter(self, min_flow: float, max_flow: float) -> None:
        """Keep the points whose displacement lies strictly between the bounds."""
        lo, hi = min_flow * min_flow, max_flow * max_flow
        self.points = [p for p in self.points if lo < p.distance_squared() < hi]

    def average_flow(self) -> tuple[float, float]:
        """Mean displacement of all points."""
        if not self.points:
            raise ValueError("no flow points")
        n = len(self.points)
        return (
            sum(p.dx for p in self.points) / n,
            sum(p.dy for p in self.points) / n,
        )

    def clear(self) -> None:
        self.points.clear()
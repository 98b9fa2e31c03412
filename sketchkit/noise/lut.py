"""Sine and cosine lookup tables."""

from __future__ import annotations

import math

__all__ = ["SinCosLUT"]


class SinCosLUT:
    """Precomputed sine and cosine over one full turn.

    The table is sampled every ``precision`` degrees; the default of 0.25
    degrees gives 1440 entries.
    """

    def __init__(self, precision: float = 0.25) -> None:
        if precision <= 0:
            raise ValueError("precision must be positive")
        self.precision = precision
        self.period = int(360.0 / precision)
        step = math.radians(precision)
        self.sin_table = tuple(math.sin(i * step) for i in range(self.period))
        self.cos_table = tuple(math.cos(i * step) for i in range(self.period))
        self._rad_to_index = math.degrees(1.0) / precision

    def _index(self, theta: float) -> int:
        if theta < 0:
            theta %= math.tau
        return int(theta * self._rad_to_index) % self.period

    def sin(self, theta: float) -> float:
        """Table sine of ``theta`` radians."""
        return self.sin_table[self._index(theta)]

    def cos(self, theta: float) -> float:
        """Table cosine of ``theta`` radians."""
        return self.cos_table[self._index(theta)]
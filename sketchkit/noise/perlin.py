"""Classic value-based Perlin noise in one to three dimensions."""

from __future__ import annotations

import random

from .lut import SinCosLUT

__all__ = ["Perlin"]

_YWRAPB = 4
_YWRAP = 1 << _YWRAPB
_ZWRAPB = 8
_ZWRAP = 1 << _ZWRAPB
_SIZE = 4095


class Perlin:
    """Octave noise over a table of 4096 random values.

    A fresh generator fills its table with values in -1..1, so ``noise``
    returns values in that range; after ``noise_seed`` the table holds values
    in 0..1. ``noise_uf`` maps the result of ``noise`` by ``r * 0.5 + 0.5``.
    """

    def __init__(self, seed: int | None = None, lut: SinCosLUT | None = None) -> None:
        self.octaves = 4
        self.falloff = 0.5
        self._lut = SinCosLUT() if lut is None else lut
        self._two_pi = self._lut.period
        self._pi = self._two_pi >> 1
        rng = random.Random(seed)
        self.table = [rng.uniform(-1.0, 1.0) for _ in range(_SIZE + 1)]

    def _fsc(self, f: float) -> float:
        """Cosine smoothing of a fractional coordinate in 0..1."""
        return 0.5 * (1.0 - self._lut.cos_table[int(f * self._pi) % self._two_pi])

    def noise(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        """Noise at the given point; omitted coordinates are zero."""
        x, y, z = abs(x), abs(y), abs(z)
        xi, yi, zi = int(x), int(y), int(z)
        xf, yf, zf = x - xi, y - yi, z - zi

        table = self.table
        r = 0.0
        ampl = 0.5
        for _ in range(self.octaves):
            of = xi + (yi << _YWRAPB) + (zi << _ZWRAPB)
            rxf = self._fsc(xf)
            ryf = self._fsc(yf)

            n1 = table[of & _SIZE]
            n1 += rxf * (table[(of + 1) & _SIZE] - n1)
            n2 = table[(of + _YWRAP) & _SIZE]
            n2 += rxf * (table[(of + _YWRAP + 1) & _SIZE] - n2)
            n1 += ryf * (n2 - n1)

            of += _ZWRAP
            n2 = table[of & _SIZE]
            n2 += rxf * (table[(of + 1) & _SIZE] - n2)
            n3 = table[(of + _YWRAP) & _SIZE]
            n3 += rxf * (table[(of + _YWRAP + 1) & _SIZE] - n3)
            n2 += ryf * (n3 - n2)

            n1 += self._fsc(zf) * (n2 - n1)

            r += n1 * ampl
            ampl *= self.falloff

            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2
            zi <<= 1
            zf *= 2
            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1
            if zf >= 1.0:
                zi += 1
                zf -= 1
        return r

    def noise_uf(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        """``noise`` shifted and scaled by ``r * 0.5 + 0.5``."""
        return self.noise(x, y, z) * 0.5 + 0.5

    def noise_detail(self, lod: int, falloff: float | None = None) -> None:
        """Set the number of octaves and, optionally, the amplitude falloff.

        Values that are not positive leave the current setting unchanged.
        """
        if lod > 0:
            self.octaves = lod
        if falloff is not None and falloff > 0:
            self.falloff = falloff

    def noise_seed(self, what: int) -> None:
        """Refill the table with values in 0..1 drawn from ``what``."""
        rng = random.Random(what)
        self.table = [rng.random() for _ in range(_SIZE + 1)]
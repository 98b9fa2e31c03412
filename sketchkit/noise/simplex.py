"""Simplex noise in two, three and four dimensions."""

from __future__ import annotations

__all__ = ["Simplex", "fast_floor"]

_F2 = 0.36602540378444
_G2 = 0.211325
_G22 = -0.57735

_F3 = 0.33333333333333
_G3 = 0.16666666666667

_F4 = 0.309017
_G4 = 0.138197
_G42 = 0.276393
_G43 = 0.41459
_G44 = -0.447214

_GRAD3 = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

_GRAD4 = (
    (0, 1, 1, 1), (0, 1, 1, -1), (0, 1, -1, 1), (0, 1, -1, -1),
    (0, -1, 1, 1), (0, -1, 1, -1), (0, -1, -1, 1), (0, -1, -1, -1),
    (1, 0, 1, 1), (1, 0, 1, -1), (1, 0, -1, 1), (1, 0, -1, -1),
    (-1, 0, 1, 1), (-1, 0, 1, -1), (-1, 0, -1, 1), (-1, 0, -1, -1),
    (1, 1, 0, 1), (1, 1, 0, -1), (1, -1, 0, 1), (1, -1, 0, -1),
    (-1, 1, 0, 1), (-1, 1, 0, -1), (-1, -1, 0, 1), (-1, -1, 0, -1),
    (1, 1, 1, 0), (1, 1, -1, 0), (1, -1, 1, 0), (1, -1, -1, 0),
    (-1, 1, 1, 0), (-1, 1, -1, 0), (-1, -1, 1, 0), (-1, -1, -1, 0),
)

_P = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# Traversal order of the 4D simplex, indexed by the comparison bits of the
# cell-relative coordinates. Indices not listed never occur.
_SIMPLEX_ORDER = {
    0: (0, 1, 2, 3), 1: (0, 1, 3, 2), 3: (0, 2, 3, 1), 7: (1, 2, 3, 0),
    8: (0, 2, 1, 3), 10: (0, 3, 1, 2), 11: (0, 3, 2, 1), 15: (1, 3, 2, 0),
    24: (1, 2, 0, 3), 26: (1, 3, 0, 2), 30: (2, 3, 0, 1), 31: (2, 3, 1, 0),
    32: (1, 0, 2, 3), 33: (1, 0, 3, 2), 37: (2, 0, 3, 1), 39: (2, 1, 3, 0),
    48: (2, 0, 1, 3), 52: (3, 0, 1, 2), 53: (3, 0, 2, 1), 55: (3, 1, 2, 0),
    56: (2, 1, 0, 3), 60: (3, 1, 0, 2), 62: (3, 2, 0, 1), 63: (3, 2, 1, 0),
}
_SIMPLEX = tuple(_SIMPLEX_ORDER.get(i, (0, 0, 0, 0)) for i in range(64))


def fast_floor(x: float) -> int:
    """Truncate positive values; truncate and subtract one otherwise.

    Zero and negative integers therefore map one below themselves.
    """
    return int(x) if x > 0 else int(x) - 1


class Simplex:
    """Simplex noise generator over a fixed permutation table."""

    def __init__(self) -> None:
        self._perm = tuple(_P[i & 0xFF] for i in range(0x200))

    def noise(
        self, x: float, y: float, z: float | None = None, w: float | None = None
    ) -> float:
        """Noise in roughly -1..1; the number of coordinates picks 2D, 3D or 4D."""
        if z is None:
            if w is not None:
                raise ValueError("w given without z")
            return self._noise2(x, y)
        if w is None:
            return self._noise3(x, y, z)
        return self._noise4(x, y, z, w)

    def noise_uf(
        self, x: float, y: float, z: float | None = None, w: float | None = None
    ) -> float:
        """``noise`` mapped into roughly 0..1 by ``r * 0.5 + 0.5``."""
        return self.noise(x, y, z, w) * 0.5 + 0.5

    def _noise2(self, x: float, y: float) -> float:
        perm = self._perm
        s = (x + y) * _F2
        i = fast_floor(x + s)
        j = fast_floor(y + s)
        t = (i + j) * _G2
        x0 = x - (i - t)
        y0 = y - (j - t)
        i1, j1 = (1, 0) if x0 > y0 else (0, 1)
        x1 = x0 - i1 + _G2
        y1 = y0 - j1 + _G2
        x2 = x0 + _G22
        y2 = y0 + _G22
        ii = i & 0xFF
        jj = j & 0xFF

        total = 0.0
        t0 = 0.5 - x0 * x0 - y0 * y0
        if t0 > 0:
            t0 *= t0
            g = _GRAD3[perm[ii + perm[jj]] % 12]
            total += t0 * t0 * (g[0] * x0 + g[1] * y0)
        t1 = 0.5 - x1 * x1 - y1 * y1
        if t1 > 0:
            t1 *= t1
            g = _GRAD3[perm[ii + i1 + perm[jj + j1]] % 12]
            total += t1 * t1 * (g[0] * x1 + g[1] * y1)
        t2 = 0.5 - x2 * x2 - y2 * y2
        if t2 > 0:
            t2 *= t2
            g = _GRAD3[perm[ii + 1 + perm[jj + 1]] % 12]
            total += t2 * t2 * (g[0] * x2 + g[1] * y2)
        return 70.0 * total

    def _noise3(self, x: float, y: float, z: float) -> float:
        perm = self._perm
        s = (x + y + z) * _F3
        i = fast_floor(x + s)
        j = fast_floor(y + s)
        k = fast_floor(z + s)
        t = (i + j + k) * _G3
        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)

        if x0 >= y0:
            if y0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
            elif x0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
            else:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
        else:
            if y0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
            elif x0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
            else:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

        corners = (
            (x0, y0, z0, 0, 0, 0),
            (x0 - i1 + _G3, y0 - j1 + _G3, z0 - k1 + _G3, i1, j1, k1),
            (x0 - i2 + _F3, y0 - j2 + _F3, z0 - k2 + _F3, i2, j2, k2),
            (x0 - 0.5, y0 - 0.5, z0 - 0.5, 1, 1, 1),
        )
        ii = i & 0xFF
        jj = j & 0xFF
        kk = k & 0xFF

        total = 0.0
        for cx, cy, cz, oi, oj, ok in corners:
            tc = 0.6 - cx * cx - cy * cy - cz * cz
            if tc > 0:
                tc *= tc
                g = _GRAD3[perm[ii + oi + perm[jj + oj + perm[kk + ok]]] % 12]
                total += tc * tc * (g[0] * cx + g[1] * cy + g[2] * cz)
        return 32.0 * total

    def _noise4(self, x: float, y: float, z: float, w: float) -> float:
        perm = self._perm
        s = (x + y + z + w) * _F4
        i = fast_floor(x + s)
        j = fast_floor(y + s)
        k = fast_floor(z + s)
        l = fast_floor(w + s)  # noqa: E741
        t = (i + j + k + l) * _G4
        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)
        w0 = w - (l - t)

        c = (
            (0x20 if x0 > y0 else 0)
            | (0x10 if x0 > z0 else 0)
            | (0x08 if y0 > z0 else 0)
            | (0x04 if x0 > w0 else 0)
            | (0x02 if y0 > w0 else 0)
            | (0x01 if z0 > w0 else 0)
        )
        order = _SIMPLEX[c]
        o1 = tuple(1 if v >= 3 else 0 for v in order)
        o2 = tuple(1 if v >= 2 else 0 for v in order)
        o3 = tuple(1 if v >= 1 else 0 for v in order)

        corners = [(x0, y0, z0, w0, (0, 0, 0, 0))]
        for offset, unskew in ((o1, _G4), (o2, _G42), (o3, _G43)):
            corners.append(
                (
                    x0 - offset[0] + unskew,
                    y0 - offset[1] + unskew,
                    z0 - offset[2] + unskew,
                    w0 - offset[3] + unskew,
                    offset,
                )
            )
        corners.append((x0 + _G44, y0 + _G44, z0 + _G44, w0 + _G44, (1, 1, 1, 1)))

        ii = i & 0xFF
        jj = j & 0xFF
        kk = k & 0xFF
        ll = l & 0xFF

        total = 0.0
        for cx, cy, cz, cw, (oi, oj, ok, ol) in corners:
            tc = 0.6 - cx * cx - cy * cy - cz * cz - cw * cw
            if tc > 0:
                tc *= tc
                gi = perm[ii + oi + perm[jj + oj + perm[kk + ok + perm[ll + ol]]]] % 32
                g = _GRAD4[gi]
                # The w component of the gradient is not part of the product.
                total += tc * tc * (g[0] * cx + g[1] * cy + g[2] * cz)
        return 27.0 * total
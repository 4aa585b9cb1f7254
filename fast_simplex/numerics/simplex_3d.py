# fast_simplex/numerics/simplex_3d.py
from __future__ import annotations
import numpy as np
from numba import njit

from .gradients import F3, G3, GRAD3, NORM_3D, PERIOD_MASK


@njit(inline='always', cache=True)
def _corner(t: float, gi: int, x: float, y: float, z: float) -> float:
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * (GRAD3[gi, 0] * x + GRAD3[gi, 1] * y + GRAD3[gi, 2] * z)


@njit(cache=True)
def raw_noise_3d(x: float, y: float, z: float, perm: np.ndarray, perm_mod12: np.ndarray) -> float:
    s = (x + y + z) * F3
    i = int(np.floor(x + s))
    j = int(np.floor(y + s))
    k = int(np.floor(z + s))
    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Какой из шести тетраэдров куба: ранжируем x0, y0, z0
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1 = 1, 0, 0; i2, j2, k2 = 1, 1, 0
        elif x0 >= z0:
            i1, j1, k1 = 1, 0, 0; i2, j2, k2 = 1, 0, 1
        else:
            i1, j1, k1 = 0, 0, 1; i2, j2, k2 = 1, 0, 1
    else:
        if y0 < z0:
            i1, j1, k1 = 0, 0, 1; i2, j2, k2 = 0, 1, 1
        elif x0 < z0:
            i1, j1, k1 = 0, 1, 0; i2, j2, k2 = 0, 1, 1
        else:
            i1, j1, k1 = 0, 1, 0; i2, j2, k2 = 1, 1, 0

    x1, y1, z1 = x0 - i1 + G3, y0 - j1 + G3, z0 - k1 + G3
    x2, y2, z2 = x0 - i2 + 2.0 * G3, y0 - j2 + 2.0 * G3, z0 - k2 + 2.0 * G3
    x3, y3, z3 = x0 - 1.0 + 3.0 * G3, y0 - 1.0 + 3.0 * G3, z0 - 1.0 + 3.0 * G3

    ii = i & PERIOD_MASK
    jj = j & PERIOD_MASK
    kk = k & PERIOD_MASK
    gi0 = perm_mod12[ii + perm[jj + perm[kk]]]
    gi1 = perm_mod12[ii + i1 + perm[jj + j1 + perm[kk + k1]]]
    gi2 = perm_mod12[ii + i2 + perm[jj + j2 + perm[kk + k2]]]
    gi3 = perm_mod12[ii + 1 + perm[jj + 1 + perm[kk + 1]]]

    n0 = _corner(0.5 - x0 * x0 - y0 * y0 - z0 * z0, gi0, x0, y0, z0)
    n1 = _corner(0.5 - x1 * x1 - y1 * y1 - z1 * z1, gi1, x1, y1, z1)
    n2 = _corner(0.5 - x2 * x2 - y2 * y2 - z2 * z2, gi2, x2, y2, z2)
    n3 = _corner(0.5 - x3 * x3 - y3 * y3 - z3 * z3, gi3, x3, y3, z3)

    return NORM_3D * (n0 + n1 + n2 + n3)

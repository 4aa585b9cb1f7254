# fast_simplex/numerics/simplex_2d.py
from __future__ import annotations
import numpy as np
from numba import njit

from .gradients import F2, G2, GRAD3, NORM_2D, PERIOD_MASK


@njit(cache=True)
def raw_noise_2d(x: float, y: float, perm: np.ndarray, perm_mod12: np.ndarray) -> float:
    # Скос входного пространства -> ячейка симплекс-решётки
    s = (x + y) * F2
    i = int(np.floor(x + s))
    j = int(np.floor(y + s))
    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Нижний или верхний треугольник; равенство x0 == y0 -> верхний
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    # У каждой вершины свой индекс градиента
    ii = i & PERIOD_MASK
    jj = j & PERIOD_MASK
    gi0 = perm_mod12[ii + perm[jj]]
    gi1 = perm_mod12[ii + i1 + perm[jj + j1]]
    gi2 = perm_mod12[ii + 1 + perm[jj + 1]]

    n0 = 0.0
    t0 = 0.5 - x0 * x0 - y0 * y0
    if not t0 < 0.0:
        t0 *= t0
        n0 = t0 * t0 * (GRAD3[gi0, 0] * x0 + GRAD3[gi0, 1] * y0)

    n1 = 0.0
    t1 = 0.5 - x1 * x1 - y1 * y1
    if not t1 < 0.0:
        t1 *= t1
        n1 = t1 * t1 * (GRAD3[gi1, 0] * x1 + GRAD3[gi1, 1] * y1)

    n2 = 0.0
    t2 = 0.5 - x2 * x2 - y2 * y2
    if not t2 < 0.0:
        t2 *= t2
        n2 = t2 * t2 * (GRAD3[gi2, 0] * x2 + GRAD3[gi2, 1] * y2)

    return NORM_2D * (n0 + n1 + n2)

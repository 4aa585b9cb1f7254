# ======================================================================
# Файл: fast_simplex/numerics/fractal.py
# Назначение: Сумма октав (fBm) поверх сырого симплекс-шума и
#             линейный перенос результата в диапазон [lo, hi].
# ВАЖНО: без fastmath, одна октава должна давать ровно raw-значение.
# ======================================================================
from __future__ import annotations
import numpy as np
from numba import njit

from .simplex_2d import raw_noise_2d
from .simplex_3d import raw_noise_3d


@njit(cache=True)
def fbm_2d(x: float, y: float, perm: np.ndarray, perm_mod12: np.ndarray,
           amplitude: float, frequency: float, octaves: int, persistence: float) -> float:
    amp, freq = amplitude, frequency
    total, max_amp = 0.0, 0.0
    for _ in range(octaves):
        total += raw_noise_2d(x * freq, y * freq, perm, perm_mod12) * amp
        max_amp += amp
        amp *= persistence
        freq *= 2.0
    return total / max_amp


@njit(cache=True)
def fbm_3d(x: float, y: float, z: float, perm: np.ndarray, perm_mod12: np.ndarray,
           amplitude: float, frequency: float, octaves: int, persistence: float) -> float:
    amp, freq = amplitude, frequency
    total, max_amp = 0.0, 0.0
    for _ in range(octaves):
        total += raw_noise_3d(x * freq, y * freq, z * freq, perm, perm_mod12) * amp
        max_amp += amp
        amp *= persistence
        freq *= 2.0
    return total / max_amp


@njit(inline='always', cache=True)
def scale_to_range(value: float, lo: float, hi: float) -> float:
    if lo == -1.0 and hi == 1.0:
        return value
    return lo + ((value + 1.0) / 2.0) * (hi - lo)


@njit(cache=True)
def scaled_noise_2d(x, y, perm, perm_mod12, amplitude, frequency, octaves, persistence, lo, hi):
    v = fbm_2d(x, y, perm, perm_mod12, amplitude, frequency, octaves, persistence)
    return scale_to_range(v, lo, hi)


@njit(cache=True)
def scaled_noise_3d(x, y, z, perm, perm_mod12, amplitude, frequency, octaves, persistence, lo, hi):
    v = fbm_3d(x, y, z, perm, perm_mod12, amplitude, frequency, octaves, persistence)
    return scale_to_range(v, lo, hi)

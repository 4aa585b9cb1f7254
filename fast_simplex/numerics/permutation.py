# ======================================================================
# Файл: fast_simplex/numerics/permutation.py
# Назначение: Таблица перестановок для хеширования координат решётки.
#   perm:       512 значений, две копии перестановки 0..255
#   perm_mod12: perm % 12, сразу индекс в GRAD3
# ======================================================================
from __future__ import annotations
import logging
import math
import numbers
from typing import Callable, NamedTuple

import numpy as np

from fast_simplex.core.errors import InvalidConfiguration
from .gradients import GRAD_COUNT, PERIOD, PERIOD_MASK, TABLE_SIZE

logger = logging.getLogger(__name__)


class PermutationTables(NamedTuple):
    perm: np.ndarray
    perm_mod12: np.ndarray


def _draw(random: Callable[[], float]) -> float:
    value = random()
    if (not isinstance(value, numbers.Real) or isinstance(value, bool)
            or not math.isfinite(value) or not 0.0 <= value < 1.0):
        raise InvalidConfiguration(
            "random", f"random source must return a float in [0, 1), got {value!r}"
        )
    return float(value)


def build_permutation(random: Callable[[], float]) -> PermutationTables:
    """
    Перемешивает 0..255 (Фишер–Йейтс, от 255 вниз до 1) и дублирует
    результат до 512 элементов, чтобы индексы вида ii + perm[jj] не
    требовали проверки переполнения.
    """
    p = np.arange(PERIOD, dtype=np.uint8)
    for i in range(PERIOD - 1, 0, -1):
        n = int(math.floor(_draw(random) * (i + 1)))
        p[i], p[n] = p[n], p[i]

    perm = p[np.arange(TABLE_SIZE) & PERIOD_MASK]
    perm_mod12 = (perm % GRAD_COUNT).astype(np.uint8)
    perm.setflags(write=False)
    perm_mod12.setflags(write=False)

    logger.debug("permutation built, head=%s", perm[:8].tolist())
    return PermutationTables(perm, perm_mod12)

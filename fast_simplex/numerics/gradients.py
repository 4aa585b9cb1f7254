# ======================================================================
# Файл: fast_simplex/numerics/gradients.py
# Назначение: Константы симплекс-решётки и таблица градиентов.
# ======================================================================
from __future__ import annotations
import math
import numpy as np

PERIOD = 256
PERIOD_MASK = PERIOD - 1
TABLE_SIZE = PERIOD * 2

# Скос/обратный скос для 2D и 3D
F2 = (math.sqrt(3.0) - 1.0) / 2.0
G2 = (3.0 - math.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0

# Масштаб, чтобы сумма вкладов вершин держалась внутри [-1, 1]
NORM_2D = 70.14805770653952
NORM_3D = 94.68493150681972

# 12 направлений: середины рёбер куба. Для 2D берутся только x, y.
GRAD3 = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.int8)
GRAD3.setflags(write=False)

GRAD_COUNT = GRAD3.shape[0]

# ======================================================================
# Файл: fast_simplex/generator.py
# Назначение: Публичный объект генератора симплекс-шума.
# Таблицы строятся один раз в конструкторе и дальше только читаются,
# поэтому один экземпляр можно безопасно делить между потоками.
# ======================================================================
from __future__ import annotations
import logging
from typing import Callable, Optional

from fast_simplex.core.config import NoiseConfig
from fast_simplex.core.rng import SeedLike, resolve_random_source
from fast_simplex.numerics.fractal import scaled_noise_2d, scaled_noise_3d
from fast_simplex.numerics.gradients import G2, G3, GRAD3
from fast_simplex.numerics.permutation import build_permutation
from fast_simplex.numerics.simplex_2d import raw_noise_2d
from fast_simplex.numerics.simplex_3d import raw_noise_3d

logger = logging.getLogger(__name__)


class FastSimplexNoise:
    """
    Симплекс-шум 2D/3D с фрактальным (многооктавным) вариантом.

    raw_2d / raw_3d:   одна октава, значения примерно в [-1, 1]
    scaled_2d / _3d:   сумма октав, перенесённая в [min, max]
    """

    G2 = G2
    G3 = G3
    GRAD3D = GRAD3

    def __init__(
        self,
        *,
        amplitude: float = 1.0,
        frequency: float = 1.0,
        octaves: int = 1,
        persistence: float = 0.5,
        min: float = -1.0,
        max: float = 1.0,
        random: Optional[Callable[[], float]] = None,
        seed: Optional[SeedLike] = None,
    ):
        config = NoiseConfig(
            amplitude=amplitude,
            frequency=frequency,
            octaves=octaves,
            persistence=persistence,
            min_value=min,
            max_value=max,
        )
        self._setup(config, random, seed)

    @classmethod
    def from_config(cls, config: NoiseConfig, random: Optional[Callable[[], float]] = None,
                    seed: Optional[SeedLike] = None) -> "FastSimplexNoise":
        obj = cls.__new__(cls)
        obj._setup(config, random, seed)
        return obj

    def _setup(self, config: NoiseConfig, random, seed) -> None:
        config.validate()
        source = resolve_random_source(random, seed)

        self.config = config
        self._amplitude = float(config.amplitude)
        self._frequency = float(config.frequency)
        self._octaves = int(config.octaves)
        self._persistence = float(config.persistence)
        self._min = float(config.min_value)
        self._max = float(config.max_value)

        # источник случайности нужен только здесь и не сохраняется
        self.perm, self.perm_mod12 = build_permutation(source)
        logger.debug("FastSimplexNoise ready: %s", config.summary())

    # --- параметры (только чтение) ---
    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def octaves(self) -> int:
        return self._octaves

    @property
    def persistence(self) -> float:
        return self._persistence

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    # --- вычисление ---
    def raw_2d(self, x: float, y: float) -> float:
        return raw_noise_2d(float(x), float(y), self.perm, self.perm_mod12)

    def raw_3d(self, x: float, y: float, z: float) -> float:
        return raw_noise_3d(float(x), float(y), float(z), self.perm, self.perm_mod12)

    def scaled_2d(self, x: float, y: float) -> float:
        return scaled_noise_2d(
            float(x), float(y), self.perm, self.perm_mod12,
            self._amplitude, self._frequency, self._octaves, self._persistence,
            self._min, self._max,
        )

    def scaled_3d(self, x: float, y: float, z: float) -> float:
        return scaled_noise_3d(
            float(x), float(y), float(z), self.perm, self.perm_mod12,
            self._amplitude, self._frequency, self._octaves, self._persistence,
            self._min, self._max,
        )

    # совместимые имена
    raw2D = raw_2d
    raw3D = raw_3d
    scaled2D = scaled_2d
    scaled3D = scaled_3d

    def __repr__(self) -> str:
        return f"FastSimplexNoise({self.config.summary()})"

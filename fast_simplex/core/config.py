# ======================================================================
# Файл: fast_simplex/core/config.py
# Назначение: Параметры фрактального шума и их проверка.
# ======================================================================
from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Any

from .errors import InvalidConfiguration


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _require_finite(field: str, value: Any) -> None:
    if not _is_number(value):
        raise InvalidConfiguration(field, f"{field} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfiguration(field, f"{field} must be finite, got {value!r}")


@dataclass(frozen=True)
class NoiseConfig:
    amplitude: float = 1.0
    frequency: float = 1.0
    octaves: int = 1
    persistence: float = 0.5
    min_value: float = -1.0
    max_value: float = 1.0

    def validate(self) -> None:
        _require_finite("amplitude", self.amplitude)
        _require_finite("frequency", self.frequency)
        _require_finite("persistence", self.persistence)
        _require_finite("min", self.min_value)
        _require_finite("max", self.max_value)

        octaves = self.octaves
        if isinstance(octaves, bool) or not _is_number(octaves):
            raise InvalidConfiguration("octaves", f"octaves must be an integer, got {octaves!r}")
        if not isinstance(octaves, numbers.Integral):
            # 3.0 допустимо, 1.5, inf, nan нельзя
            if not math.isfinite(octaves) or not float(octaves).is_integer():
                raise InvalidConfiguration("octaves", f"octaves must be an integer, got {octaves!r}")
        if octaves < 1:
            raise InvalidConfiguration("octaves", f"octaves must be >= 1, got {octaves!r}")

        if self.persistence < 0:
            raise InvalidConfiguration(
                "persistence", f"persistence must be non-negative, got {self.persistence!r}"
            )

        if self.min_value >= self.max_value:
            raise InvalidConfiguration(
                "min", f"min ({self.min_value}) must be less than max ({self.max_value})"
            )

        # сумма переполняется в inf -> total / inf даёт плоский ноль
        max_amp = self.max_amplitude
        if not math.isfinite(max_amp) or max_amp == 0.0:
            raise InvalidConfiguration(
                "amplitude",
                f"sum of octave amplitudes must be finite and non-zero, got {max_amp!r}",
            )

    @property
    def max_amplitude(self) -> float:
        """Сумма амплитуд всех октав (тот же порядок операций, что и в fbm-ядре)."""
        amp = float(self.amplitude)
        total = 0.0
        for _ in range(int(self.octaves)):
            total += amp
            amp *= float(self.persistence)
        return total

    @property
    def is_unit_range(self) -> bool:
        return self.min_value == -1.0 and self.max_value == 1.0

    def summary(self) -> str:
        rng = "unit" if self.is_unit_range else f"[{self.min_value}, {self.max_value}]"
        return (
            f"amplitude={self.amplitude} frequency={self.frequency} octaves={self.octaves} "
            f"persistence={self.persistence} range={rng}"
        )

# fast_simplex/core/errors.py
from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Ошибка параметров генератора. Поле `field` указывает на проблемную опцию."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

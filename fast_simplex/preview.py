# ======================================================================
# Файл: fast_simplex/preview.py
# Назначение: Превью шума в PNG (оттенки серого) для визуальной проверки.
# ======================================================================
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from fast_simplex.generator import FastSimplexNoise

logger = logging.getLogger(__name__)


def render_noise(noise: FastSimplexNoise, width: int, height: int,
                 scale: float = 64.0, z: Optional[float] = None) -> np.ndarray:
    """
    Считает scaled-шум в каждом пикселе. scale: сколько пикселей на
    единицу пространства шума. Если задан z, берётся срез 3D-шума.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Размер превью должен быть больше нуля: {width}x{height}")
    if scale <= 0:
        raise ValueError(f"scale должен быть больше нуля: {scale}")

    inv = 1.0 / scale
    out = np.empty((height, width), dtype=np.float32)
    for j in range(height):
        v = j * inv
        for i in range(width):
            u = i * inv
            if z is None:
                out[j, i] = noise.scaled_2d(u, v)
            else:
                out[j, i] = noise.scaled_3d(u, v, z)
    return out


def to_grayscale(field: np.ndarray, lo: float, hi: float) -> np.ndarray:
    a = (np.asarray(field, dtype=np.float32) - lo) / (hi - lo)
    return (np.clip(a, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)


def save_preview_png(path: Path, image_u8: np.ndarray) -> Path:
    path = Path(path)
    if image_u8.dtype != np.uint8 or image_u8.ndim != 2:
        raise ValueError("Ожидается 2D массив uint8")
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(image_u8).save(path)
    logger.info("preview saved: %s (%dx%d)", path, image_u8.shape[1], image_u8.shape[0])
    return path

# render_preview.py
# Использование: python render_preview.py [seed] [out.png] [octaves]
import logging
import pathlib
import sys

from fast_simplex import FastSimplexNoise, InvalidConfiguration
from fast_simplex.preview import render_noise, save_preview_png, to_grayscale
from fast_simplex.setup_logging import setup_logging

# --- НАСТРОЙКИ ---
ARTIFACTS_ROOT = pathlib.Path(__file__).resolve().parent / "artifacts"
PREVIEW_SIZE = 256
PIXELS_PER_UNIT = 64.0
PERSISTENCE = 0.5

logger = logging.getLogger("render_preview")


def render_preview(seed: int, out_path: pathlib.Path, octaves: int = 4) -> pathlib.Path:
    noise = FastSimplexNoise(seed=seed, octaves=octaves, persistence=PERSISTENCE, min=0.0, max=1.0)
    logger.info("rendering %dx%d preview for seed %d (%s)", PREVIEW_SIZE, PREVIEW_SIZE, seed, noise)
    field = render_noise(noise, PREVIEW_SIZE, PREVIEW_SIZE, scale=PIXELS_PER_UNIT)
    return save_preview_png(out_path, to_grayscale(field, 0.0, 1.0))


if __name__ == "__main__":
    setup_logging(log_file=ARTIFACTS_ROOT / "logs" / "preview.log")

    args = sys.argv[1:]
    try:
        seed = int(args[0]) if len(args) > 0 else 12345
        octaves = int(args[2]) if len(args) > 2 else 4
    except ValueError:
        print("seed и octaves должны быть целыми числами.")
        sys.exit(2)
    out = pathlib.Path(args[1]) if len(args) > 1 else ARTIFACTS_ROOT / "preview" / f"simplex_{seed}.png"

    try:
        render_preview(seed, out, octaves)
    except InvalidConfiguration as e:
        print(f"!!! ERROR: {e}")
        sys.exit(1)

from .core.config import NoiseConfig
from .core.errors import InvalidConfiguration
from .core.rng import RNG, RandomSource
from .generator import FastSimplexNoise
from .numerics.permutation import PermutationTables, build_permutation

__all__ = [
    "FastSimplexNoise",
    "NoiseConfig",
    "InvalidConfiguration",
    "RNG",
    "RandomSource",
    "PermutationTables",
    "build_permutation",
]

# fast_simplex/core/rng.py
from __future__ import annotations
import random
from typing import Callable, Optional, Protocol, Union

from .errors import InvalidConfiguration

SeedLike = Union[int, str, bytes]


class RandomSource(Protocol):
    """Любой вызываемый объект, возвращающий float в [0, 1)."""

    def __call__(self) -> float: ...


def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & 0xFFFFFFFFFFFFFFFF
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & 0xFFFFFFFFFFFFFFFF
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & 0xFFFFFFFFFFFFFFFF
    return z ^ (z >> 31)


def _bad_seed(x) -> InvalidConfiguration:
    return InvalidConfiguration("seed", f"seed must be int, str or bytes, got {type(x).__name__}")


def seed_from_any(x: SeedLike) -> int:
    if isinstance(x, bool):
        raise _bad_seed(x)
    if isinstance(x, int):
        return x & 0xFFFFFFFFFFFFFFFF
    if isinstance(x, bytes):
        # FNV-1a
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & 0xFFFFFFFFFFFFFFFF
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode('utf-8'))
    raise _bad_seed(x)


class RNG:
    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & 0xFFFFFFFFFFFFFFFF

    def u64(self) -> int:
        self.state = _splitmix64(self.state)
        return self.state

    def uniform(self) -> float:
        # 53 старших бита -> [0, 1)
        return (self.u64() >> 11) * (1.0 / (1 << 53))


def resolve_random_source(source: Optional[Callable[[], float]] = None,
                          seed: Optional[SeedLike] = None) -> RandomSource:
    if source is not None and seed is not None:
        raise InvalidConfiguration("random", "pass either random or seed, not both")
    if source is not None:
        if not callable(source):
            raise InvalidConfiguration("random", f"random must be callable, got {source!r}")
        return source
    if seed is not None:
        return RNG(seed_from_any(seed)).uniform
    return random.random

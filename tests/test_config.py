# ==============================================================================
# Файл: tests/test_config.py
# Назначение: Проверка параметров генератора (NoiseConfig + конструктор).
# ==============================================================================
import math
import unittest

import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from fast_simplex import FastSimplexNoise, InvalidConfiguration, NoiseConfig
from fast_simplex.core.rng import seed_from_any


class TestNoiseConfig(unittest.TestCase):

    def test_defaults_are_valid(self):
        cfg = NoiseConfig()
        cfg.validate()
        self.assertEqual(cfg.octaves, 1)
        self.assertEqual(cfg.persistence, 0.5)
        self.assertTrue(cfg.is_unit_range)

    def test_max_amplitude(self):
        self.assertAlmostEqual(NoiseConfig(amplitude=2.0, octaves=3, persistence=0.5).max_amplitude, 3.5)
        self.assertEqual(NoiseConfig(amplitude=1.0, octaves=1).max_amplitude, 1.0)

    def test_integral_float_and_numpy_octaves_accepted(self):
        NoiseConfig(octaves=3.0).validate()
        NoiseConfig(octaves=np.int64(4)).validate()
        NoiseConfig(amplitude=np.float32(0.5)).validate()

    def test_summary_marks_unit_range(self):
        self.assertIn("range=unit", NoiseConfig().summary())
        cfg = NoiseConfig(min_value=0.0, max_value=255.0)
        self.assertFalse(cfg.is_unit_range)
        self.assertIn("range=[0.0, 255.0]", cfg.summary())
        self.assertIn("range=unit", repr(FastSimplexNoise(seed=1)))

    def test_frozen(self):
        cfg = NoiseConfig()
        with self.assertRaises(Exception):
            cfg.octaves = 5


class TestConstructorValidation(unittest.TestCase):

    def assertInvalid(self, field, **options):
        with self.assertRaises(InvalidConfiguration) as ctx:
            FastSimplexNoise(**options)
        self.assertEqual(ctx.exception.field, field)
        self.assertIsInstance(ctx.exception, ValueError)
        return ctx.exception

    def test_min_equal_max(self):
        err = self.assertInvalid("min", min=0, max=0)
        self.assertIn("0", str(err))

    def test_min_greater_than_max_mentions_both(self):
        err = self.assertInvalid("min", min=5.5, max=-2.25)
        self.assertIn("5.5", str(err))
        self.assertIn("-2.25", str(err))

    def test_bad_octaves(self):
        for bad in (0, -3, 1.5, math.inf, math.nan, "4", True, None):
            with self.subTest(octaves=bad):
                self.assertInvalid("octaves", octaves=bad)

    def test_non_numeric_fields(self):
        for field, key in (("amplitude", "amplitude"), ("frequency", "frequency"),
                           ("persistence", "persistence"), ("min", "min"), ("max", "max")):
            for bad in ("1", None, [1.0], False):
                with self.subTest(field=field, value=bad):
                    self.assertInvalid(field, **{key: bad})

    def test_non_finite_fields(self):
        self.assertInvalid("amplitude", amplitude=math.nan)
        self.assertInvalid("frequency", frequency=math.inf)
        self.assertInvalid("max", max=math.inf)

    def test_zero_amplitude(self):
        self.assertInvalid("amplitude", amplitude=0.0)
        self.assertInvalid("amplitude", amplitude=0, octaves=5)

    def test_overflowing_amplitude_sum(self):
        # каждое значение конечно, но сумма октав уходит в inf
        self.assertTrue(math.isinf(NoiseConfig(amplitude=1e308, persistence=1.0, octaves=2).max_amplitude))
        err = self.assertInvalid("amplitude", amplitude=1e308, persistence=1.0, octaves=2)
        self.assertIn("inf", str(err))
        FastSimplexNoise(amplitude=1e308, persistence=0.5, octaves=2)

    def test_negative_persistence(self):
        self.assertInvalid("persistence", persistence=-0.5)

    def test_random_not_callable(self):
        self.assertInvalid("random", random=0.5)
        self.assertInvalid("random", random="random")

    def test_random_and_seed_together(self):
        self.assertInvalid("random", random=lambda: 0.1, seed=3)

    def test_bad_seed_type(self):
        self.assertInvalid("seed", seed=1.5)
        self.assertInvalid("seed", seed=True)

    def test_seed_from_any_rejects_unsupported_types(self):
        for bad in (1.5, True, None, [1]):
            with self.subTest(seed=bad):
                with self.assertRaises(InvalidConfiguration) as ctx:
                    seed_from_any(bad)
                self.assertEqual(ctx.exception.field, "seed")

    def test_bad_random_sample(self):
        self.assertInvalid("random", random=lambda: 1.0)
        self.assertInvalid("random", random=lambda: math.nan)

    def test_from_config_validates(self):
        with self.assertRaises(InvalidConfiguration):
            FastSimplexNoise.from_config(NoiseConfig(octaves=0))


if __name__ == "__main__":
    unittest.main()

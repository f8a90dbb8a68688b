from __future__ import annotations

import math
import unittest

from yearview.brightness import (
    EMPTY_BRIGHTNESS,
    MIN_ACTIVE_BRIGHTNESS,
    brightness_level,
    calculate_brightness,
)


class TestBrightnessContract(unittest.TestCase):
    def test_zero_count_is_floor(self) -> None:
        for m in (0, 1, 5, 100):
            self.assertEqual(calculate_brightness(0, m), 0.08)

    def test_zero_year_max_is_floor(self) -> None:
        for n in (0, 1, 7):
            self.assertEqual(calculate_brightness(n, 0), 0.08)

    def test_count_equal_to_max_is_full(self) -> None:
        for m in (1, 2, 3, 13, 20, 999):
            self.assertEqual(calculate_brightness(m, m), 1.0)

    def test_formula(self) -> None:
        got = calculate_brightness(3, 20)
        want = 0.15 + 0.85 * math.log(4) / math.log(21)
        self.assertAlmostEqual(got, want, places=12)

    def test_monotonic_and_in_range(self) -> None:
        for m in (1, 4, 20, 50):
            prev = -1.0
            for n in range(0, m + 1):
                b = calculate_brightness(n, m)
                self.assertGreaterEqual(b, prev)
                self.assertGreaterEqual(b, EMPTY_BRIGHTNESS)
                self.assertLessEqual(b, 1.0)
                if n > 0:
                    self.assertGreaterEqual(b, MIN_ACTIVE_BRIGHTNESS)
                prev = b

    def test_single_particle_visible_above_floor(self) -> None:
        self.assertGreater(calculate_brightness(1, 20), 0.08)
        self.assertGreaterEqual(calculate_brightness(1, 20), 0.15)

    def test_brightness_level_buckets(self) -> None:
        self.assertEqual(brightness_level(0.08), 0)
        self.assertEqual(brightness_level(0.15), 1)
        self.assertEqual(brightness_level(1.0), 4)
        self.assertEqual(brightness_level(1.0, levels=3), 2)
        levels = [brightness_level(calculate_brightness(n, 20)) for n in range(0, 21)]
        self.assertEqual(levels, sorted(levels))
        with self.assertRaises(ValueError):
            brightness_level(0.5, levels=1)


if __name__ == "__main__":
    unittest.main(verbosity=2)

# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from nutritrack.profile.energy import calculate_bmr, calculate_tdee, has_metrics


class TestEnergy(unittest.TestCase):
    def test_male_bmr_and_tdee(self) -> None:
        user = {"weight": 80, "height": 180, "age": 30, "gender": "male", "activity_level": "moderate"}
        self.assertAlmostEqual(calculate_bmr(user), 1853.632, places=3)
        self.assertEqual(calculate_tdee(user), round(1853.632 * 1.55))

    def test_female_bmr(self) -> None:
        user = {"weight": 60, "height": 165, "age": 40, "gender": "female", "activity_level": "light"}
        expected = 447.593 + 9.247 * 60 + 3.098 * 165 - 4.330 * 40
        self.assertAlmostEqual(calculate_bmr(user), expected, places=6)
        self.assertEqual(calculate_tdee(user), round(expected * 1.375))

    def test_unknown_or_missing_activity_uses_sedentary(self) -> None:
        user = {"weight": 80, "height": 180, "age": 30, "gender": "male"}
        self.assertEqual(calculate_tdee(user), 2224)
        self.assertEqual(calculate_tdee({**user, "activity_level": "extreme"}), 2224)

    def test_incomplete_metrics(self) -> None:
        user = {"weight": 80, "height": 180, "age": None, "gender": "male"}
        self.assertFalse(has_metrics(user))
        self.assertEqual(calculate_bmr(user), 0.0)
        self.assertEqual(calculate_tdee(user), 0)


if __name__ == "__main__":
    unittest.main()

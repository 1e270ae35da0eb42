# -*- coding: utf-8 -*-
"""Daily energy needs: revised Harris-Benedict BMR times an activity multiplier."""

from __future__ import annotations

from typing import Any, Mapping

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "veryActive": 1.9,
}


def has_metrics(user: Mapping[str, Any]) -> bool:
    return all(user.get(key) for key in ("weight", "height", "age", "gender"))


def calculate_bmr(user: Mapping[str, Any]) -> float:
    if not has_metrics(user):
        return 0.0
    weight = float(user["weight"])
    height = float(user["height"])
    age = float(user["age"])
    if user["gender"] == "male":
        return 88.362 + (13.397 * weight) + (4.799 * height) - (5.677 * age)
    return 447.593 + (9.247 * weight) + (3.098 * height) - (4.330 * age)


def calculate_tdee(user: Mapping[str, Any]) -> int:
    bmr = calculate_bmr(user)
    if bmr <= 0:
        return 0
    multiplier = ACTIVITY_MULTIPLIERS.get(user.get("activity_level") or "sedentary", 1.2)
    return int(round(bmr * multiplier))

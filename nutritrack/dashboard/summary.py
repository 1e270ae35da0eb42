# -*- coding: utf-8 -*-
"""Dashboard — daily aggregation over food entries and exercises."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Dict

from ..dates import day_bounds
from ..diet.storage import get_food_entries
from ..exercise.storage import get_exercises
from ..profile.energy import calculate_tdee


def build_daily_summary(db_path: Path, user: Dict[str, Any], day: date) -> Dict[str, Any]:
    start, end = day_bounds(day)
    entries = get_food_entries(db_path, user["id"], start, end)
    exercises = get_exercises(db_path, user["id"], start, end)

    by_meal_type: Dict[str, int] = {}
    for entry in entries:
        by_meal_type[entry["meal_type"]] = by_meal_type.get(entry["meal_type"], 0) + int(entry["calories"])

    calories_in = sum(int(e["calories"]) for e in entries)
    calories_burned = sum(int(x["calories_burned"]) for x in exercises)
    net = calories_in - calories_burned
    tdee = calculate_tdee(user)

    return {
        "date": day.isoformat(),
        "calories_in": calories_in,
        "calories_burned": calories_burned,
        "net_calories": net,
        "tdee": tdee,
        "balance": net - tdee if tdee > 0 else 0,
        "by_meal_type": by_meal_type,
        "food_entry_count": len(entries),
        "exercise_count": len(exercises),
    }

# -*- coding: utf-8 -*-
"""Dashboard — Pydantic models."""

from __future__ import annotations

from typing import Dict

from pydantic import Field

from ..auth.models import CamelModel


class DailySummaryResponse(CamelModel):
    date: str = Field(..., description="YYYY-MM-DD (UTC)")
    calories_in: int = 0
    calories_burned: int = 0
    net_calories: int = 0
    tdee: int = 0
    balance: int = Field(0, description="netCalories - tdee; 0 when tdee is unknown")
    by_meal_type: Dict[str, int] = Field(default_factory=dict)
    food_entry_count: int = 0
    exercise_count: int = 0

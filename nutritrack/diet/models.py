# -*- coding: utf-8 -*-
"""Diet — Pydantic models."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from ..auth.models import CamelModel, UtcDatetime


class FoodEntryCreateRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    calories: int = Field(..., ge=0, le=100_000)
    # Free-text label, conventionally breakfast/lunch/dinner/snack.
    meal_type: str = Field(..., min_length=1, max_length=32)
    date: UtcDatetime


class FoodEntry(CamelModel):
    id: int
    user_id: int
    name: str
    calories: int
    date: str
    meal_type: str
    created_at: str

# -*- coding: utf-8 -*-
"""Exercise domain — Pydantic models."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from ..auth.models import CamelModel, UtcDatetime


class ExerciseCreateRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    type: str = Field(..., min_length=1, max_length=100, description="e.g. running, cycling")
    duration: int = Field(..., ge=0, le=1440, description="minutes")
    calories_burned: int = Field(..., ge=0, le=100_000)
    date: UtcDatetime


class Exercise(CamelModel):
    id: int
    user_id: int
    type: str
    duration: int
    calories_burned: int
    date: str
    created_at: str

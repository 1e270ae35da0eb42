# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..auth.models import ActivityLevel, CamelModel, Gender


class MetricsUpdateRequest(CamelModel):
    """Partial update; only the fields present in the body are written."""

    height: Optional[float] = Field(None, gt=0, le=300, description="cm")
    weight: Optional[float] = Field(None, gt=0, le=700, description="kg")
    age: Optional[int] = Field(None, ge=0, le=150, description="years")
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None


class EnergyResponse(CamelModel):
    bmr: float
    tdee: int
    complete: bool = Field(..., description="False when weight/height/age/gender are not all set")

# -*- coding: utf-8 -*-
"""Dashboard — API endpoints."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user, get_settings
from ..config import Settings
from ..dates import utc_now
from .models import DailySummaryResponse
from .summary import build_daily_summary

router = APIRouter(prefix="/api/summary", tags=["Dashboard"])


@router.get("", response_model=DailySummaryResponse, summary="Calories in/out and balance for one day")
def daily_summary(
    day: Optional[str] = Query(default=None, alias="date", description="YYYY-MM-DD, defaults to today (UTC)"),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    try:
        target = date.fromisoformat(day) if day else utc_now().date()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date: {day}") from exc
    data = build_daily_summary(settings.db_path, user, target)
    return DailySummaryResponse.model_validate(data)

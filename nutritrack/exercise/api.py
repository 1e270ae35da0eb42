# -*- coding: utf-8 -*-
"""Exercise domain — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user, get_settings
from ..config import Settings
from ..dates import parse_bound
from .models import Exercise, ExerciseCreateRequest
from .storage import add_exercise, get_exercises

router = APIRouter(prefix="/api/exercises", tags=["Exercise"])


@router.post("", response_model=Exercise, summary="Log an exercise")
def create_exercise(
    request: ExerciseCreateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    row = add_exercise(
        settings.db_path,
        user["id"],
        type=request.type,
        duration=request.duration,
        calories_burned=request.calories_burned,
        date=request.date,
    )
    return Exercise.model_validate(row)


@router.get("", response_model=List[Exercise], summary="List exercises in a date range")
def list_exercises(
    start: str = Query(..., description="ISO8601 timestamp or YYYY-MM-DD"),
    end: str = Query(..., description="ISO8601 timestamp or YYYY-MM-DD (inclusive)"),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    try:
        start_at = parse_bound(start)
        end_at = parse_bound(end, end=True)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date range: {exc}") from exc
    rows = get_exercises(settings.db_path, user["id"], start_at, end_at)
    return [Exercise.model_validate(r) for r in rows]

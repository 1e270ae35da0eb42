# -*- coding: utf-8 -*-
"""Diet — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user, get_settings
from ..config import Settings
from ..dates import day_bounds, parse_bound, utc_now
from ..errors import NotFoundError
from .models import FoodEntry, FoodEntryCreateRequest
from .storage import add_food_entry, delete_food_entry, get_food_entries

router = APIRouter(prefix="/api/food-entries", tags=["Diet"])

_MAX_ID = 2**63 - 1


@router.post("", response_model=FoodEntry, summary="Create a food entry")
def create_entry(
    request: FoodEntryCreateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    row = add_food_entry(
        settings.db_path,
        user["id"],
        name=request.name,
        calories=request.calories,
        meal_type=request.meal_type,
        date=request.date,
    )
    return FoodEntry.model_validate(row)


@router.get("", response_model=List[FoodEntry], summary="List food entries (defaults to today)")
def list_entries(
    start_date: Optional[str] = Query(default=None, alias="startDate", description="ISO8601 or YYYY-MM-DD"),
    end_date: Optional[str] = Query(default=None, alias="endDate", description="ISO8601 or YYYY-MM-DD (inclusive)"),
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    today_start, today_end = day_bounds(utc_now().date())
    try:
        start_at = parse_bound(start_date) if start_date else today_start
        end_at = parse_bound(end_date, end=True) if end_date else today_end
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date range: {exc}") from exc
    rows = get_food_entries(settings.db_path, user["id"], start_at, end_at)
    return [FoodEntry.model_validate(r) for r in rows]


@router.delete("/{entry_id}", summary="Delete a food entry")
def delete_entry(
    entry_id: str,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    try:
        numeric_id = int(entry_id, 10)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid ID format") from exc
    # Ids are issued from 1 and fit a signed 64-bit SQLite INTEGER.
    if not 1 <= numeric_id <= _MAX_ID or not delete_food_entry(settings.db_path, numeric_id, user["id"]):
        raise NotFoundError("Food entry not found")
    return {"message": "Food entry deleted successfully"}

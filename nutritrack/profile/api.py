# -*- coding: utf-8 -*-
"""Profile — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth.api import user_public
from ..auth.models import UserPublic
from ..auth.security import get_current_user, get_settings
from ..auth.storage import update_user_metrics
from ..config import Settings
from .energy import calculate_bmr, calculate_tdee, has_metrics
from .models import EnergyResponse, MetricsUpdateRequest

router = APIRouter(prefix="/api/user", tags=["Profile"])


@router.post("/metrics", response_model=UserPublic, summary="Update body metrics")
def update_metrics(
    request: MetricsUpdateRequest,
    user: dict = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    metrics = request.model_dump(mode="json", exclude_unset=True)
    row = update_user_metrics(settings.db_path, user["id"], metrics)
    return user_public(row)


@router.get("/energy", response_model=EnergyResponse, summary="BMR and TDEE for the current user")
def energy(user: dict = Depends(get_current_user)):
    return EnergyResponse(
        bmr=round(calculate_bmr(user), 1),
        tdee=calculate_tdee(user),
        complete=has_metrics(user),
    )

# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..config import Settings
from ..errors import ConflictError
from .models import LoginRequest, RegisterRequest, UserPublic
from .security import (
    CredentialVerifier,
    get_credential_verifier,
    get_current_user,
    get_session_token,
    get_settings,
    hash_password,
)
from .sessions import SESSION_COOKIE_NAME, create_session, destroy_session
from .storage import create_user, get_user_by_username

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


def user_public(row: Dict[str, Any]) -> UserPublic:
    return UserPublic(
        id=row["id"],
        username=row["username"],
        height=row.get("height"),
        weight=row.get("weight"),
        age=row.get("age"),
        gender=row.get("gender"),
        activity_level=row.get("activity_level"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def _start_session(response: Response, settings: Settings, user_id: int) -> None:
    token = create_session(
        settings.db_path,
        user_id=user_id,
        secret=settings.session_secret,
        ttl_days=settings.session_ttl_days,
    )
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=settings.session_ttl_seconds,
        path="/",
    )


@router.post("/register", response_model=UserPublic, status_code=201, summary="Register a new user")
def register(request: RegisterRequest, response: Response, settings: Settings = Depends(get_settings)):
    if get_user_by_username(settings.db_path, request.username):
        raise ConflictError("Username already exists")

    password_hash = hash_password(request.password)
    user = create_user(settings.db_path, username=request.username, password_hash=password_hash)
    _start_session(response, settings, user["id"])
    return user_public(user)


@router.post("/login", response_model=UserPublic, summary="Login")
def login(
    request: LoginRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    user = verifier.verify(request.username, request.password)
    if not user:
        logger.warning("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    _start_session(response, settings, user["id"])
    return user_public(user)


@router.post("/logout", summary="Logout")
def logout(request: Request, response: Response, settings: Settings = Depends(get_settings)):
    destroy_session(settings.db_path, get_session_token(request), secret=settings.session_secret)
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/user", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return user_public(user)

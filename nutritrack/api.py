# -*- coding: utf-8 -*-
"""
NutriTrack API

Session-authenticated REST backend for the food and exercise diary.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .auth.sessions import purge_expired_sessions
from .config import Settings
from .dashboard.api import router as dashboard_router
from .diet.api import router as diet_router
from .errors import ConflictError, NotFoundError, StoreError
from .exercise.api import router as exercise_router
from .profile.api import router as profile_router

logger = logging.getLogger(__name__)

_AUTH_EXEMPT_PATHS = (
    "/api/register",
    "/api/login",
    "/api/logout",
    "/api/health",
)
_AUTH_EXEMPT_PREFIXES = (
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


def _field_name(loc) -> str:
    # Drop the leading "body"/"query"/"path" marker.
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        errors = [{"field": _field_name(err.get("loc", ())), "message": err.get("msg", "")} for err in exc.errors()]
        return JSONResponse(status_code=400, content={"detail": "Invalid request", "errors": errors})

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc) or "Not found"})

    @app.exception_handler(ConflictError)
    async def _conflict(request: Request, exc: ConflictError):
        return JSONResponse(status_code=400, content={"detail": str(exc) or "Conflict"})

    @app.exception_handler(StoreError)
    async def _store_error(request: Request, exc: StoreError):
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.exception_handler(sqlite3.Error)
    async def _database_error(request: Request, exc: sqlite3.Error):
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="NutriTrack",
        description="Food and exercise diary with session-based auth",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings

    init_app_db(settings.db_path)
    purge_expired_sessions(settings.db_path)
    logger.info("NutriTrack database ready at %s", settings.db_path)

    @app.middleware("http")
    async def _auth_gate(request: Request, call_next):
        path = request.url.path.rstrip("/") or "/"
        if (
            path.startswith("/api")
            and path not in _AUTH_EXEMPT_PATHS
            and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES)
        ):
            try:
                request.state.user = await run_in_threadpool(get_current_user_from_request, request)
            except HTTPException as exc:
                return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
        return await call_next(request)

    # Added last so it wraps the auth gate; preflight requests never reach it.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(exercise_router)
    app.include_router(diet_router)
    app.include_router(dashboard_router)

    @app.get("/api/health", tags=["Health"])
    def health() -> dict:
        return {"ok": True}

    return app

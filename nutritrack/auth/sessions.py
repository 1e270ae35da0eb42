# -*- coding: utf-8 -*-
"""Auth — server-side session store.

Clients hold an opaque random token in a cookie; the table only keeps an HMAC of it,
so a leaked database does not hand out live sessions.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from datetime import timedelta
from pathlib import Path
from typing import Optional

from ..app_db import db_conn
from ..dates import to_db, utc_now

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "nutritrack_session"


def _hash_token(token: str, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), token.encode("utf-8"), hashlib.sha256).hexdigest()


def create_session(db_path: Path, *, user_id: int, secret: str, ttl_days: int) -> str:
    token = secrets.token_urlsafe(32)
    now = utc_now()
    expires = now + timedelta(days=int(ttl_days))
    purge_expired_sessions(db_path)
    with db_conn(db_path) as conn:
        conn.execute(
            "INSERT INTO sessions (token_hash, user_id, created_at, expires_at) VALUES (?, ?, ?, ?)",
            (_hash_token(token, secret), int(user_id), to_db(now), to_db(expires)),
        )
    return token


def resolve_session(db_path: Path, token: str, *, secret: str) -> Optional[int]:
    if not token:
        return None
    with db_conn(db_path) as conn:
        row = conn.execute(
            "SELECT user_id FROM sessions WHERE token_hash = ? AND expires_at > ?",
            (_hash_token(token, secret), to_db(utc_now())),
        ).fetchone()
        return int(row["user_id"]) if row else None


def destroy_session(db_path: Path, token: Optional[str], *, secret: str) -> None:
    if not token:
        return
    with db_conn(db_path) as conn:
        conn.execute("DELETE FROM sessions WHERE token_hash = ?", (_hash_token(token, secret),))


def purge_expired_sessions(db_path: Path) -> int:
    with db_conn(db_path) as conn:
        cur = conn.execute("DELETE FROM sessions WHERE expires_at <= ?", (to_db(utc_now()),))
        removed = cur.rowcount
    if removed:
        logger.info("Purged %d expired sessions", removed)
    return removed

# -*- coding: utf-8 -*-
"""Auth — DB storage helpers for the users table."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional

from ..app_db import db_conn
from ..dates import to_db, utc_now
from ..errors import ConflictError, NotFoundError
from ..sequences import USER_ID, next_id

logger = logging.getLogger(__name__)

METRIC_FIELDS = ("height", "weight", "age", "gender", "activity_level")


def get_user(db_path: Path, user_id: int) -> Optional[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (int(user_id),)).fetchone()
        return dict(row) if row else None


def get_user_by_username(db_path: Path, username: str) -> Optional[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE username = ?", (username.strip(),)).fetchone()
        return dict(row) if row else None


def create_user(db_path: Path, *, username: str, password_hash: str) -> Dict[str, Any]:
    now = to_db(utc_now())
    name = username.strip()
    user_id = next_id(db_path, USER_ID)
    try:
        with db_conn(db_path) as conn:
            conn.execute(
                """
                INSERT INTO users (id, username, password, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (user_id, name, password_hash, now, now),
            )
    except sqlite3.IntegrityError as exc:
        # A concurrent registration won the race past the pre-insert check.
        raise ConflictError("Username already exists") from exc
    logger.info("Created user id=%s", user_id)
    return {
        "id": user_id,
        "username": name,
        "password": password_hash,
        "height": None,
        "weight": None,
        "age": None,
        "gender": None,
        "activity_level": None,
        "created_at": now,
        "updated_at": now,
    }


def update_user_metrics(db_path: Path, user_id: int, metrics: Dict[str, Any]) -> Dict[str, Any]:
    """Merge the provided metric fields into the user row and return the updated row."""
    changes = {k: v for k, v in metrics.items() if k in METRIC_FIELDS}
    with db_conn(db_path) as conn:
        if changes:
            assignments = ", ".join(f"{column} = ?" for column in changes)
            params = list(changes.values()) + [to_db(utc_now()), int(user_id)]
            cur = conn.execute(f"UPDATE users SET {assignments}, updated_at = ? WHERE id = ?", params)
            if cur.rowcount == 0:
                raise NotFoundError("User not found")
        row = conn.execute("SELECT * FROM users WHERE id = ?", (int(user_id),)).fetchone()
        if not row:
            raise NotFoundError("User not found")
        return dict(row)

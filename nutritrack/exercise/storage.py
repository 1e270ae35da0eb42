# -*- coding: utf-8 -*-
"""Exercise domain — DB storage helpers.

``user_id`` always comes from the authenticated session, never from the request body.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from ..app_db import db_conn
from ..dates import to_db, utc_now
from ..sequences import EXERCISE_ID, next_id


def add_exercise(
    db_path: Path,
    user_id: int,
    *,
    type: str,
    duration: int,
    calories_burned: int,
    date: datetime,
) -> Dict[str, Any]:
    exercise_id = next_id(db_path, EXERCISE_ID)
    row = {
        "id": exercise_id,
        "user_id": int(user_id),
        "type": type.strip(),
        "duration": int(duration),
        "calories_burned": int(calories_burned),
        "date": to_db(date),
        "created_at": to_db(utc_now()),
    }
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO exercises (id, user_id, type, duration, calories_burned, date, created_at)
            VALUES (:id, :user_id, :type, :duration, :calories_burned, :date, :created_at)
            """,
            row,
        )
    return row


def get_exercises(db_path: Path, user_id: int, start: datetime, end: datetime) -> List[Dict[str, Any]]:
    """Exercises of ``user_id`` with ``start <= date <= end``."""
    with db_conn(db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM exercises
            WHERE user_id = ? AND date >= ? AND date <= ?
            ORDER BY date ASC, id ASC
            """,
            (int(user_id), to_db(start), to_db(end)),
        ).fetchall()
        return [dict(r) for r in rows]

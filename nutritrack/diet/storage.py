# -*- coding: utf-8 -*-
"""Diet — DB storage helpers for food entries."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from ..app_db import db_conn
from ..dates import to_db, utc_now
from ..sequences import FOOD_ENTRY_ID, next_id

logger = logging.getLogger(__name__)


def add_food_entry(
    db_path: Path,
    user_id: int,
    *,
    name: str,
    calories: int,
    meal_type: str,
    date: datetime,
) -> Dict[str, Any]:
    entry_id = next_id(db_path, FOOD_ENTRY_ID)
    row = {
        "id": entry_id,
        "user_id": int(user_id),
        "name": name,
        "calories": int(calories),
        "date": to_db(date),
        "meal_type": meal_type,
        "created_at": to_db(utc_now()),
    }
    with db_conn(db_path) as conn:
        conn.execute(
            """
            INSERT INTO food_entries (id, user_id, name, calories, date, meal_type, created_at)
            VALUES (:id, :user_id, :name, :calories, :date, :meal_type, :created_at)
            """,
            row,
        )
    return row


def get_food_entries(db_path: Path, user_id: int, start: datetime, end: datetime) -> List[Dict[str, Any]]:
    with db_conn(db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM food_entries
            WHERE user_id = ? AND date >= ? AND date <= ?
            ORDER BY date ASC, id ASC
            """,
            (int(user_id), to_db(start), to_db(end)),
        ).fetchall()
        return [dict(r) for r in rows]


def delete_food_entry(db_path: Path, entry_id: int, user_id: int) -> bool:
    """Delete the entry only if it belongs to ``user_id``; False when nothing matched."""
    with db_conn(db_path) as conn:
        cur = conn.execute(
            "DELETE FROM food_entries WHERE id = ? AND user_id = ?",
            (int(entry_id), int(user_id)),
        )
        deleted = cur.rowcount > 0
    if deleted:
        logger.info("Deleted food entry id=%s for user id=%s", entry_id, user_id)
    return deleted

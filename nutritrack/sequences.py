# -*- coding: utf-8 -*-
"""Per-kind integer id sequences kept in the ``counters`` table."""

from __future__ import annotations

from pathlib import Path

from .app_db import db_conn

USER_ID = "userId"
EXERCISE_ID = "exerciseId"
FOOD_ENTRY_ID = "foodEntryId"


def next_id(db_path: Path, kind: str) -> int:
    """Increment and return the counter for ``kind``, creating it at 1.

    The write lock is taken up front and held until the commit at the end of the
    block, so concurrent callers never read the same value. The increment commits on
    its own: an id is never handed out twice, even when the record meant to use it
    fails to save.
    """
    with db_conn(db_path) as conn:
        conn.execute("BEGIN IMMEDIATE")
        conn.execute(
            """
            INSERT INTO counters (name, seq) VALUES (?, 1)
            ON CONFLICT(name) DO UPDATE SET seq = seq + 1
            """,
            (kind,),
        )
        row = conn.execute("SELECT seq FROM counters WHERE name = ?", (kind,)).fetchone()
        return int(row["seq"])


def peek_sequence(db_path: Path, kind: str) -> int:
    """Last id issued for ``kind`` (0 if none yet)."""
    with db_conn(db_path) as conn:
        row = conn.execute("SELECT seq FROM counters WHERE name = ?", (kind,)).fetchone()
        return int(row["seq"]) if row else 0

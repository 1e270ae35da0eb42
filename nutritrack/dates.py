# -*- coding: utf-8 -*-
"""Timestamp helpers shared by the storage modules."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from typing import Tuple

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError("timestamp out of range") from exc


def to_db(value: datetime) -> str:
    """Fixed-width UTC ISO-8601 string; lexical order equals time order."""
    value = as_utc(value)
    return f"{value.year:04d}-" + value.strftime("%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = datetime.combine(day, time(23, 59, 59, 999000), tzinfo=timezone.utc)
    return start, end


def parse_bound(raw: str, *, end: bool = False) -> datetime:
    """Parse a query-string range bound.

    A bare ``YYYY-MM-DD`` end bound is widened to the last millisecond of that day so
    the range stays inclusive. Raises ValueError on unparseable or out-of-range input.
    """
    text = (raw or "").strip()
    if not text:
        raise ValueError("empty date")
    if _DATE_ONLY.match(text):
        start_of_day, end_of_day = day_bounds(date.fromisoformat(text))
        return end_of_day if end else start_of_day
    return as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))

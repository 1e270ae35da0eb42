# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

from nutritrack.app_db import init_app_db
from nutritrack.auth.storage import create_user, get_user, get_user_by_username, update_user_metrics
from nutritrack.diet.storage import add_food_entry, delete_food_entry, get_food_entries
from nutritrack.errors import ConflictError, NotFoundError
from nutritrack.exercise.storage import add_exercise, get_exercises

T0 = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


class TestUserStorage(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="nutritrack-test-"))
        self.db_path = self._tmp / "nutritrack.db"
        init_app_db(self.db_path)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_lookup_missing_user_returns_none(self) -> None:
        self.assertIsNone(get_user(self.db_path, 42))
        self.assertIsNone(get_user_by_username(self.db_path, "nobody"))

    def test_create_assigns_sequential_ids(self) -> None:
        alice = create_user(self.db_path, username="alice", password_hash="h.s")
        bob = create_user(self.db_path, username="bob", password_hash="h.s")
        self.assertEqual((alice["id"], bob["id"]), (1, 2))
        self.assertEqual(get_user_by_username(self.db_path, "bob")["id"], 2)

    def test_duplicate_username_is_a_conflict(self) -> None:
        create_user(self.db_path, username="alice", password_hash="h.s")
        with self.assertRaises(ConflictError):
            create_user(self.db_path, username="alice", password_hash="h.s")
        # The id consumed by the failed insert is not handed out again.
        self.assertEqual(create_user(self.db_path, username="carol", password_hash="h.s")["id"], 3)

    def test_update_metrics_merges_only_given_fields(self) -> None:
        user = create_user(self.db_path, username="alice", password_hash="h.s")
        update_user_metrics(self.db_path, user["id"], {"height": 170.0, "weight": 65.5})
        row = update_user_metrics(self.db_path, user["id"], {"age": 30, "activity_level": "moderate"})
        self.assertEqual(row["height"], 170.0)
        self.assertEqual(row["weight"], 65.5)
        self.assertEqual(row["age"], 30)
        self.assertEqual(row["activity_level"], "moderate")
        self.assertIsNone(row["gender"])
        self.assertEqual(row["password"], "h.s")

    def test_update_metrics_unknown_user(self) -> None:
        with self.assertRaises(NotFoundError):
            update_user_metrics(self.db_path, 99, {"age": 30})
        with self.assertRaises(NotFoundError):
            update_user_metrics(self.db_path, 99, {})


class TestDiaryStorage(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="nutritrack-test-"))
        self.db_path = self._tmp / "nutritrack.db"
        init_app_db(self.db_path)
        self.alice = create_user(self.db_path, username="alice", password_hash="h.s")["id"]
        self.bob = create_user(self.db_path, username="bob", password_hash="h.s")["id"]

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def _exercise(self, user_id: int, when: datetime) -> int:
        row = add_exercise(self.db_path, user_id, type="running", duration=30, calories_burned=300, date=when)
        return row["id"]

    def test_exercise_range_is_inclusive_and_owner_scoped(self) -> None:
        before = self._exercise(self.alice, T0 - timedelta(milliseconds=1))
        at_start = self._exercise(self.alice, T0)
        inside = self._exercise(self.alice, T0 + timedelta(hours=3))
        at_end = self._exercise(self.alice, T0 + timedelta(days=1))
        after = self._exercise(self.alice, T0 + timedelta(days=1, milliseconds=1))
        foreign = self._exercise(self.bob, T0 + timedelta(hours=1))

        rows = get_exercises(self.db_path, self.alice, T0, T0 + timedelta(days=1))
        ids = {r["id"] for r in rows}
        self.assertEqual(ids, {at_start, inside, at_end})
        self.assertNotIn(before, ids)
        self.assertNotIn(after, ids)
        self.assertNotIn(foreign, ids)
        self.assertTrue(all(r["user_id"] == self.alice for r in rows))

    def test_naive_timestamps_are_utc(self) -> None:
        exercise_id = self._exercise(self.alice, datetime(2024, 3, 10, 12, 0))
        rows = get_exercises(self.db_path, self.alice, T0, T0)
        self.assertEqual([r["id"] for r in rows], [exercise_id])
        self.assertEqual(rows[0]["date"], "2024-03-10T12:00:00.000Z")

    def test_delete_food_entry_requires_owner(self) -> None:
        entry = add_food_entry(self.db_path, self.alice, name="Apple", calories=95, meal_type="breakfast", date=T0)

        self.assertFalse(delete_food_entry(self.db_path, entry["id"], self.bob))
        self.assertEqual(len(get_food_entries(self.db_path, self.alice, T0, T0)), 1)

        self.assertTrue(delete_food_entry(self.db_path, entry["id"], self.alice))
        self.assertFalse(delete_food_entry(self.db_path, entry["id"], self.alice))
        self.assertEqual(get_food_entries(self.db_path, self.alice, T0, T0), [])

    def test_food_entry_ids_are_monotonic(self) -> None:
        first = add_food_entry(self.db_path, self.alice, name="Apple", calories=95, meal_type="snack", date=T0)
        delete_food_entry(self.db_path, first["id"], self.alice)
        second = add_food_entry(self.db_path, self.bob, name="Toast", calories=120, meal_type="breakfast", date=T0)
        self.assertGreater(second["id"], first["id"])


if __name__ == "__main__":
    unittest.main()

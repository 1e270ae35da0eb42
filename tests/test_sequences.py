# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from nutritrack.app_db import init_app_db
from nutritrack.sequences import EXERCISE_ID, FOOD_ENTRY_ID, USER_ID, next_id, peek_sequence


class TestSequences(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="nutritrack-test-"))
        self.db_path = self._tmp / "nutritrack.db"
        init_app_db(self.db_path)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_first_id_is_one_and_increments(self) -> None:
        self.assertEqual(peek_sequence(self.db_path, USER_ID), 0)
        self.assertEqual(next_id(self.db_path, USER_ID), 1)
        self.assertEqual(next_id(self.db_path, USER_ID), 2)
        self.assertEqual(next_id(self.db_path, USER_ID), 3)
        self.assertEqual(peek_sequence(self.db_path, USER_ID), 3)

    def test_kinds_are_independent(self) -> None:
        next_id(self.db_path, USER_ID)
        next_id(self.db_path, USER_ID)
        self.assertEqual(next_id(self.db_path, EXERCISE_ID), 1)
        self.assertEqual(next_id(self.db_path, FOOD_ENTRY_ID), 1)
        self.assertEqual(next_id(self.db_path, USER_ID), 3)

    def test_concurrent_calls_never_collide(self) -> None:
        total = 120
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: next_id(self.db_path, FOOD_ENTRY_ID), range(total)))
        self.assertEqual(len(set(ids)), total)
        self.assertEqual(sorted(ids), list(range(1, total + 1)))


if __name__ == "__main__":
    unittest.main()

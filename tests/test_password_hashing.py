# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from nutritrack.auth.security import hash_password, verify_password


class TestPasswordHashing(unittest.TestCase):
    def test_hash_then_verify(self) -> None:
        stored = hash_password("pw123456")
        self.assertTrue(verify_password("pw123456", stored))

    def test_wrong_password_rejected(self) -> None:
        stored = hash_password("pw123456")
        self.assertFalse(verify_password("pw123457", stored))
        self.assertFalse(verify_password("", stored))

    def test_stored_format_is_key_dot_salt(self) -> None:
        stored = hash_password("secret")
        key_hex, salt = stored.split(".")
        self.assertEqual(len(bytes.fromhex(key_hex)), 64)
        self.assertEqual(len(bytes.fromhex(salt)), 16)

    def test_salt_is_random(self) -> None:
        self.assertNotEqual(hash_password("same"), hash_password("same"))

    def test_malformed_hash_fails_closed(self) -> None:
        for stored in ("", "no-delimiter", "zz-not-hex.abcd", "abcd.", "." + "00" * 16, "00" * 64):
            with self.subTest(stored=stored):
                self.assertFalse(verify_password("pw123456", stored))

    def test_unicode_password(self) -> None:
        stored = hash_password("пароль-密码")
        self.assertTrue(verify_password("пароль-密码", stored))
        self.assertFalse(verify_password("пароль", stored))


if __name__ == "__main__":
    unittest.main()

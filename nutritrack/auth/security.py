# -*- coding: utf-8 -*-
"""Auth — password hashing, credential verification + FastAPI helpers."""

from __future__ import annotations

import hashlib
import hmac
import secrets
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from fastapi import Depends, HTTPException, Request

from ..config import Settings
from .sessions import SESSION_COOKIE_NAME, resolve_session
from .storage import get_user, get_user_by_username

# scrypt parameters; the stored format is "<hex key>.<hex salt>".
_SCRYPT_N = 16384
_SCRYPT_R = 8
_SCRYPT_P = 1
_KEY_LEN = 64
_SALT_BYTES = 16


def _derive(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("ascii"),
        n=_SCRYPT_N,
        r=_SCRYPT_R,
        p=_SCRYPT_P,
        dklen=_KEY_LEN,
    )


def hash_password(password: str) -> str:
    salt = secrets.token_hex(_SALT_BYTES)
    return f"{_derive(password, salt).hex()}.{salt}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        key_hex, salt = password_hash.split(".", 1)
        expected = bytes.fromhex(key_hex)
        if not salt or len(expected) != _KEY_LEN:
            return False
        actual = _derive(password, salt)
        return hmac.compare_digest(actual, expected)
    except (ValueError, TypeError, UnicodeError):
        return False


class CredentialVerifier(Protocol):
    """Turns submitted credentials into a user row, or None when they don't check out."""

    def verify(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        ...


class LocalCredentialVerifier:
    """Username + password checked against the users table."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def verify(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        user = get_user_by_username(self.db_path, username)
        # Unknown user and wrong password look the same to the caller.
        if not user or not verify_password(password, user["password"]):
            return None
        return user


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_credential_verifier(settings: Settings = Depends(get_settings)) -> CredentialVerifier:
    return LocalCredentialVerifier(settings.db_path)


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE_NAME) or None


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    # If middleware already authenticated, reuse it.
    user = getattr(request.state, "user", None)
    if user:
        return user

    settings = get_settings(request)
    token = get_session_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Authentication required")

    user_id = resolve_session(settings.db_path, token, secret=settings.session_secret)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Authentication required")

    user_row = get_user(settings.db_path, user_id)
    if not user_row:
        raise HTTPException(status_code=401, detail="Authentication required")

    # Cache on request for downstream handlers.
    request.state.user = user_row
    return user_row


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user

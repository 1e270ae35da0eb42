# -*- coding: utf-8 -*-
"""Store-level error kinds, mapped to HTTP statuses by the app factory."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for data-store failures."""


class NotFoundError(StoreError):
    """The addressed record does not exist (or is not owned by the caller)."""


class ConflictError(StoreError):
    """The write would violate a uniqueness rule."""

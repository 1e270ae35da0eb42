# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..dates import as_utc

# Client timestamps, normalised to UTC; offsets that push them past year 1..9999 are
# a validation error.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "veryActive"


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CredentialsRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username must not be blank")
        return value


class RegisterRequest(CredentialsRequest):
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(CredentialsRequest):
    pass


class UserPublic(CamelModel):
    """User as returned to clients; the password hash is never part of it."""

    id: int
    username: str
    height: Optional[float] = None
    weight: Optional[float] = None
    age: Optional[int] = None
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

"""Identity schemas."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from app.core.enums import MentorStatusEnum, RoleEnum
from app.shared.responses import CamelModel


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated identity derived from a verified access token."""

    user_id: UUID
    role: RoleEnum


class UserCreate(CamelModel):
    """User registration request."""

    full_name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    role_preference: RoleEnum | None = None

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_full_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class LoginRequest(CamelModel):
    """Credentials for login."""

    email: EmailStr
    password: str = Field(min_length=1)


class PasswordChangeRequest(CamelModel):
    """Password change payload for the authenticated user."""

    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=128)


class AuthSession(CamelModel):
    """Account summary returned with a freshly issued token."""

    id: UUID
    full_name: str
    email: str
    role: RoleEnum
    mentor_status: MentorStatusEnum
    token: str


class UserRead(CamelModel):
    """Public user projection; never carries the credential hash."""

    id: UUID
    full_name: str
    email: str
    role: RoleEnum
    mentor_status: MentorStatusEnum
    bio: str
    date_of_birth: date | None
    location: str
    current_role: str
    skills: str
    goals: str
    created_at: datetime
    updated_at: datetime

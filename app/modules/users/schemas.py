"""Users directory schemas."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from app.shared.responses import CamelModel


class ProfileUpdate(CamelModel):
    """Partial profile update; only fields present in the payload are applied."""

    full_name: str | None = Field(default=None, max_length=200)
    bio: str | None = Field(default=None, max_length=5000)
    date_of_birth: date | None = None
    location: str | None = Field(default=None, max_length=255)
    current_role: str | None = Field(default=None, max_length=255)
    skills: str | None = Field(default=None, max_length=5000)
    goals: str | None = Field(default=None, max_length=5000)

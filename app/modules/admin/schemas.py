"""Admin schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from app.core.enums import MentorStatusEnum, RoleEnum
from app.shared.responses import CamelModel


class MentorStatusUpdate(CamelModel):
    """Admin decision on a pending mentor; the service accepts only approved or rejected."""

    status: str


class MentorDecisionRead(CamelModel):
    """Mentor projection returned after an approval decision."""

    id: UUID
    full_name: str
    email: str
    role: RoleEnum
    mentor_status: MentorStatusEnum
    created_at: datetime


class AdminActionRead(CamelModel):
    """Admin journal entry response schema."""

    id: UUID
    admin_id: UUID
    action: str
    target_type: str
    target_id: str | None
    payload: dict
    created_at: datetime

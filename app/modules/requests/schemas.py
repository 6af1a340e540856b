"""Mentorship request schemas."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from app.core.enums import RequestStatusEnum, RoleEnum
from app.shared.responses import CamelModel


class MentorshipRequestCreate(CamelModel):
    """Student's request to a mentor."""

    mentor_id: UUID | None = None


class MentorshipRequestUpdate(CamelModel):
    """Mentor's decision on a pending request; the service accepts only accepted or rejected."""

    status: str


class UserSummary(CamelModel):
    """Name and email of a request party."""

    id: UUID
    full_name: str
    email: str


class StudentProfileSummary(UserSummary):
    """Student party with profile-completion fields, as shown to mentors."""

    bio: str
    date_of_birth: date | None
    location: str
    current_role: str
    skills: str
    goals: str


class MentorSummary(UserSummary):
    """Mentor party as shown to the requesting student."""

    role: RoleEnum


class RequestMessageRead(CamelModel):
    """Message of the request thread."""

    id: UUID
    sender_id: UUID | None
    text: str
    created_at: datetime


class MentorshipRequestRead(CamelModel):
    """Request with name/email projections of both parties."""

    id: UUID
    status: RequestStatusEnum
    student: UserSummary
    mentor: UserSummary
    messages: list[RequestMessageRead] = []
    created_at: datetime
    updated_at: datetime


class MentorQueueItem(MentorshipRequestRead):
    """Request as seen by its mentor."""

    student: StudentProfileSummary


class StudentRequestItem(MentorshipRequestRead):
    """Request as seen by the student who sent it."""

    mentor: MentorSummary

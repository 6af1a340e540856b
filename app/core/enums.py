"""Core enums used across modules."""

from enum import StrEnum


class RoleEnum(StrEnum):
    """System roles."""

    STUDENT = "student"
    MENTOR = "mentor"
    ADMIN = "admin"


class MentorStatusEnum(StrEnum):
    """Mentor application approval status."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RequestStatusEnum(StrEnum):
    """Mentorship request lifecycle status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


ACTIVE_REQUEST_STATUSES = (RequestStatusEnum.PENDING, RequestStatusEnum.ACCEPTED)

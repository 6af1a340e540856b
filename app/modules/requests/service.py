"""Mentorship request workflow.

Requests move from pending to accepted or rejected exactly once, and only
by the mentor they are addressed to. A student may hold at most one active
(pending or accepted) request per mentor; a rejected request does not block
asking the same mentor again.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db_session
from app.core.enums import MentorStatusEnum, RequestStatusEnum, RoleEnum
from app.core.metrics import record_request_event
from app.modules.identity.repository import IdentityRepository
from app.modules.identity.schemas import Principal
from app.modules.requests.models import MentorshipRequest
from app.modules.requests.repository import RequestsRepository
from app.shared.exceptions import (
    ConflictException,
    ForbiddenException,
    InvalidOperationException,
    NotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

MENTOR_CAPABLE_ROLES = (RoleEnum.MENTOR, RoleEnum.ADMIN)
DECISION_STATUSES = (RequestStatusEnum.ACCEPTED, RequestStatusEnum.REJECTED)

ALREADY_MENTORED_MESSAGE = "You are already mentored by this mentor"
ALREADY_PENDING_MESSAGE = "You already have a pending request with this mentor"


class RequestsService:
    """Mentorship request domain service."""

    def __init__(
        self,
        requests_repository: RequestsRepository,
        identity_repository: IdentityRepository,
    ) -> None:
        self.requests_repository = requests_repository
        self.identity_repository = identity_repository

    async def create_request(self, student: Principal, mentor_id: UUID | None) -> MentorshipRequest:
        """Create a pending request from student to an approved mentor."""
        if mentor_id is None:
            raise ValidationException("Mentor ID is required")

        mentor = await self.identity_repository.get_user_by_id(mentor_id)
        if mentor is None:
            raise NotFoundException("Mentor not found")
        if mentor.role not in MENTOR_CAPABLE_ROLES:
            raise InvalidOperationException("Selected user is not a mentor")
        if mentor.mentor_status != MentorStatusEnum.APPROVED:
            raise InvalidOperationException(
                "This mentor is not available for mentorship requests. "
                "They may be pending approval or have been rejected.",
            )

        existing = await self.requests_repository.find_active_request(student.user_id, mentor.id)
        if existing is not None:
            if existing.status == RequestStatusEnum.ACCEPTED:
                raise ConflictException(ALREADY_MENTORED_MESSAGE)
            raise ConflictException(ALREADY_PENDING_MESSAGE)

        try:
            request = await self.requests_repository.create_request(student.user_id, mentor.id)
        except IntegrityError as exc:
            # A concurrent create won the race for the active-pair index.
            raise ConflictException(ALREADY_PENDING_MESSAGE) from exc

        record_request_event(str(RequestStatusEnum.PENDING))
        logger.info("Student %s requested mentor %s (request %s)", student.user_id, mentor.id, request.id)
        return request

    async def list_for_mentor(
        self,
        mentor: Principal,
        status: RequestStatusEnum | None = None,
    ) -> list[MentorshipRequest]:
        """List requests addressed to the mentor, newest first."""
        return await self.requests_repository.list_requests(mentor_id=mentor.user_id, status=status)

    async def list_for_student(
        self,
        student: Principal,
        status: RequestStatusEnum | None = None,
    ) -> list[MentorshipRequest]:
        """List requests sent by the student, newest first."""
        return await self.requests_repository.list_requests(student_id=student.user_id, status=status)

    async def transition(
        self,
        request_id: UUID,
        mentor: Principal,
        new_status: RequestStatusEnum | str,
    ) -> MentorshipRequest:
        """Accept or reject a pending request addressed to the acting mentor."""
        if new_status not in DECISION_STATUSES:
            raise ValidationException('Status must be either "accepted" or "rejected"')
        new_status = RequestStatusEnum(new_status)

        request = await self.requests_repository.get_request_by_id(request_id)
        if request is None:
            raise NotFoundException("Mentorship request not found")
        if request.mentor_id != mentor.user_id:
            raise ForbiddenException("You are not authorized to update this request")
        if request.status != RequestStatusEnum.PENDING:
            raise InvalidOperationException(f"Cannot update {request.status} request")

        await self.requests_repository.set_status(request, new_status)
        record_request_event(str(new_status))
        logger.info("Mentor %s %s request %s", mentor.user_id, new_status, request.id)
        return request


async def get_requests_service(session: AsyncSession = Depends(get_db_session)) -> RequestsService:
    """Dependency provider for mentorship requests service."""
    return RequestsService(
        requests_repository=RequestsRepository(session),
        identity_repository=IdentityRepository(session),
    )

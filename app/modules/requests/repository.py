"""Mentorship requests repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.enums import ACTIVE_REQUEST_STATUSES, RequestStatusEnum
from app.modules.requests.models import MentorshipRequest


def _with_parties() -> Select[tuple[MentorshipRequest]]:
    return select(MentorshipRequest).options(
        selectinload(MentorshipRequest.student),
        selectinload(MentorshipRequest.mentor),
        selectinload(MentorshipRequest.messages),
    )


class RequestsRepository:
    """DB operations for mentorship requests."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_active_request(self, student_id: UUID, mentor_id: UUID) -> MentorshipRequest | None:
        stmt = select(MentorshipRequest).where(
            MentorshipRequest.student_id == student_id,
            MentorshipRequest.mentor_id == mentor_id,
            MentorshipRequest.status.in_(ACTIVE_REQUEST_STATUSES),
        )
        return await self.session.scalar(stmt)

    async def create_request(self, student_id: UUID, mentor_id: UUID) -> MentorshipRequest:
        request = MentorshipRequest(
            student_id=student_id,
            mentor_id=mentor_id,
            status=RequestStatusEnum.PENDING,
        )
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request, attribute_names=["student", "mentor", "messages"])
        return request

    async def get_request_by_id(self, request_id: UUID) -> MentorshipRequest | None:
        stmt = _with_parties().where(MentorshipRequest.id == request_id)
        return await self.session.scalar(stmt)

    async def list_requests(
        self,
        *,
        student_id: UUID | None = None,
        mentor_id: UUID | None = None,
        status: RequestStatusEnum | None = None,
    ) -> list[MentorshipRequest]:
        stmt = _with_parties()
        if student_id is not None:
            stmt = stmt.where(MentorshipRequest.student_id == student_id)
        if mentor_id is not None:
            stmt = stmt.where(MentorshipRequest.mentor_id == mentor_id)
        if status is not None:
            stmt = stmt.where(MentorshipRequest.status == status)

        stmt = stmt.order_by(MentorshipRequest.created_at.desc())
        return list((await self.session.scalars(stmt)).all())

    async def set_status(self, request: MentorshipRequest, status: RequestStatusEnum) -> MentorshipRequest:
        request.status = status
        await self.session.flush()
        return request

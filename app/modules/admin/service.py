"""Admin business logic layer: mentor approval workflow."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db_session
from app.core.enums import MentorStatusEnum, RoleEnum
from app.core.metrics import record_mentor_decision
from app.modules.admin.models import AdminAction
from app.modules.admin.repository import AdminRepository
from app.modules.identity.models import User
from app.modules.identity.schemas import Principal
from app.shared.exceptions import InvalidOperationException, NotFoundException, ValidationException

logger = logging.getLogger(__name__)

DECISION_STATUSES = (MentorStatusEnum.APPROVED, MentorStatusEnum.REJECTED)


class AdminService:
    """Mentor approval workflow and admin journal."""

    def __init__(self, repository: AdminRepository) -> None:
        self.repository = repository

    async def list_mentors_by_status(self, mentor_status: MentorStatusEnum) -> list[User]:
        """List mentors currently in the given approval state."""
        return await self.repository.list_mentors_by_status(mentor_status)

    async def set_mentor_status(
        self,
        mentor_id: UUID,
        new_status: MentorStatusEnum | str,
        actor: Principal,
    ) -> User:
        """Resolve a pending mentor application.

        Approval and rejection are terminal: a mentor whose status is no
        longer pending cannot be decided again, even with the same status.
        """
        if new_status not in DECISION_STATUSES:
            raise ValidationException('Status must be "approved" or "rejected"')
        new_status = MentorStatusEnum(new_status)

        mentor = await self.repository.get_user_by_id(mentor_id)
        if mentor is None:
            raise NotFoundException("Mentor not found")
        if mentor.role != RoleEnum.MENTOR:
            raise InvalidOperationException("User is not a mentor")
        if mentor.mentor_status != MentorStatusEnum.PENDING:
            raise InvalidOperationException(f"Mentor is already {mentor.mentor_status}")

        await self.repository.set_mentor_status(mentor, new_status)
        await self.repository.create_action(
            admin_id=actor.user_id,
            action=f"mentor.{new_status}",
            target_type="user",
            target_id=str(mentor.id),
            payload={"previous_status": str(MentorStatusEnum.PENDING), "status": str(new_status)},
        )
        record_mentor_decision(str(new_status))
        logger.info("Admin %s set mentor %s to %s", actor.user_id, mentor.id, new_status)
        return mentor

    async def list_actions(self, limit: int, offset: int) -> tuple[list[AdminAction], int]:
        """List admin journal entries, newest first."""
        return await self.repository.list_actions(limit=limit, offset=offset)


async def get_admin_service(session: AsyncSession = Depends(get_db_session)) -> AdminService:
    """Dependency provider for admin service."""
    return AdminService(AdminRepository(session))

"""Admin repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import MentorStatusEnum, RoleEnum
from app.modules.admin.models import AdminAction
from app.modules.identity.models import User


class AdminRepository:
    """DB operations for mentor approval and the admin journal."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_user_by_id(self, user_id: UUID) -> User | None:
        return await self.session.get(User, user_id)

    async def list_mentors_by_status(self, mentor_status: MentorStatusEnum) -> list[User]:
        stmt = (
            select(User)
            .where(User.role == RoleEnum.MENTOR, User.mentor_status == mentor_status)
            .order_by(User.created_at.desc())
        )
        return list((await self.session.scalars(stmt)).all())

    async def set_mentor_status(self, user: User, mentor_status: MentorStatusEnum) -> User:
        user.mentor_status = mentor_status
        await self.session.flush()
        return user

    async def create_action(
        self,
        admin_id: UUID,
        action: str,
        target_type: str,
        target_id: str | None,
        payload: dict,
    ) -> AdminAction:
        action_obj = AdminAction(
            admin_id=admin_id,
            action=action,
            target_type=target_type,
            target_id=target_id,
            payload=payload,
        )
        self.session.add(action_obj)
        await self.session.flush()
        return action_obj

    async def list_actions(self, limit: int, offset: int) -> tuple[list[AdminAction], int]:
        base_stmt: Select[tuple[AdminAction]] = select(AdminAction)
        count_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = int((await self.session.scalar(count_stmt)) or 0)

        stmt = base_stmt.order_by(AdminAction.created_at.desc()).limit(limit).offset(offset)
        items = list((await self.session.scalars(stmt)).all())
        return items, total

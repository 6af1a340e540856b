"""Users directory repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import MentorStatusEnum, RoleEnum
from app.modules.identity.models import User


class UsersRepository:
    """Read-side queries and profile updates over users."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_user_by_id(self, user_id: UUID) -> User | None:
        return await self.session.get(User, user_id)

    async def list_mentors(self, mentor_status: MentorStatusEnum) -> list[User]:
        stmt = (
            select(User)
            .where(User.role == RoleEnum.MENTOR, User.mentor_status == mentor_status)
            .order_by(User.created_at.desc())
        )
        return list((await self.session.scalars(stmt)).all())

    async def update_user(self, user: User, **changes) -> User:
        for key, value in changes.items():
            setattr(user, key, value)
        await self.session.flush()
        await self.session.refresh(user)
        return user

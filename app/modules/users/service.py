"""Users directory business logic layer."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db_session
from app.core.enums import MentorStatusEnum
from app.modules.identity.models import User
from app.modules.identity.schemas import Principal
from app.modules.users.repository import UsersRepository
from app.modules.users.schemas import ProfileUpdate
from app.shared.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)

FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 50
_TRIMMED_PROFILE_FIELDS = ("bio", "location", "current_role", "skills", "goals")


def _validate_full_name(value: str) -> str:
    full_name = value.strip()
    if not full_name:
        raise ValidationException("Full name is required")
    if len(full_name) < FULL_NAME_MIN_LENGTH:
        raise ValidationException("Full name must be at least 2 characters")
    if len(full_name) > FULL_NAME_MAX_LENGTH:
        raise ValidationException("Full name must be less than 50 characters")
    return full_name


class UsersService:
    """Mentor directory and profile service."""

    def __init__(self, repository: UsersRepository) -> None:
        self.repository = repository

    async def list_approved_mentors(self) -> list[User]:
        """List mentors visible to students."""
        return await self.repository.list_mentors(MentorStatusEnum.APPROVED)

    async def get_user(self, user_id: UUID) -> User:
        """Fetch any user profile by id."""
        user = await self.repository.get_user_by_id(user_id)
        if user is None:
            raise NotFoundException("User not found")
        return user

    async def update_profile(self, principal: Principal, payload: ProfileUpdate) -> User:
        """Apply provided profile fields to the caller's own account."""
        provided = payload.model_dump(exclude_unset=True)
        changes: dict[str, object] = {}

        # Empty full name is ignored rather than rejected.
        if provided.get("full_name"):
            changes["full_name"] = _validate_full_name(provided["full_name"])
        for field_name in _TRIMMED_PROFILE_FIELDS:
            value = provided.get(field_name)
            if value is not None:
                changes[field_name] = value.strip()
        if "date_of_birth" in provided:
            changes["date_of_birth"] = provided["date_of_birth"]

        if not changes:
            raise ValidationException("No fields to update")

        user = await self.repository.get_user_by_id(principal.user_id)
        if user is None:
            raise NotFoundException("User not found")

        updated = await self.repository.update_user(user, **changes)
        logger.info("Profile updated for user %s: %s", user.id, sorted(changes))
        return updated


async def get_users_service(session: AsyncSession = Depends(get_db_session)) -> UsersService:
    """Dependency provider for users service."""
    return UsersService(UsersRepository(session))

"""Identity business logic and authorization dependencies."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db_session
from app.core.enums import MentorStatusEnum, RoleEnum
from app.core.security import create_access_token, decode_token, hash_password, verify_password
from app.modules.identity.models import User
from app.modules.identity.repository import IdentityRepository
from app.modules.identity.schemas import (
    AuthSession,
    LoginRequest,
    PasswordChangeRequest,
    Principal,
    UserCreate,
)
from app.shared.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UnauthenticatedException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Lower-case and trim email so uniqueness is case-insensitive."""
    return email.strip().lower()


def _initial_role(role_preference: RoleEnum | None) -> tuple[RoleEnum, MentorStatusEnum]:
    if role_preference == RoleEnum.MENTOR:
        return RoleEnum.MENTOR, MentorStatusEnum.PENDING
    if role_preference == RoleEnum.ADMIN:
        return RoleEnum.ADMIN, MentorStatusEnum.APPROVED
    return RoleEnum.STUDENT, MentorStatusEnum.PENDING


class IdentityService:
    """Identity domain service."""

    def __init__(self, repository: IdentityRepository) -> None:
        self.repository = repository

    def _issue_session(self, user: User) -> AuthSession:
        token = create_access_token(subject=str(user.id), role=str(user.role))
        return AuthSession(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            role=user.role,
            mentor_status=user.mentor_status,
            token=token,
        )

    async def register(self, payload: UserCreate) -> AuthSession:
        """Register new account and sign it in."""
        email = normalize_email(payload.email)
        existing_user = await self.repository.get_user_by_email(email)
        if existing_user is not None:
            raise ConflictException("Email already registered")

        role, mentor_status = _initial_role(payload.role_preference)
        try:
            user = await self.repository.create_user(
                full_name=payload.full_name,
                email=email,
                password_hash=hash_password(payload.password),
                role=role,
                mentor_status=mentor_status,
            )
        except IntegrityError as exc:
            # A concurrent registration took the email first.
            raise ConflictException("Email already registered") from exc
        logger.info("Registered user %s with role %s", user.id, role)
        return self._issue_session(user)

    async def login(self, payload: LoginRequest) -> AuthSession:
        """Authenticate user and issue access token."""
        user = await self.repository.get_user_by_email(normalize_email(payload.email))
        if user is None or not verify_password(payload.password, user.password_hash):
            raise ValidationException("Invalid credentials")
        return self._issue_session(user)

    async def change_password(self, principal: Principal, payload: PasswordChangeRequest) -> None:
        """Replace password after verifying the current one."""
        if payload.current_password == payload.new_password:
            raise ValidationException("New password must be different from current password")

        user = await self.repository.get_user_by_id(principal.user_id)
        if user is None:
            raise NotFoundException("User not found")
        if not verify_password(payload.current_password, user.password_hash):
            raise ValidationException("Current password is incorrect")

        await self.repository.set_password_hash(user, hash_password(payload.new_password))
        logger.info("Password changed for user %s", user.id)


async def get_identity_service(session: AsyncSession = Depends(get_db_session)) -> IdentityService:
    """Dependency to provide identity service."""
    return IdentityService(IdentityRepository(session))


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Extract token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise UnauthenticatedException("Authorization header missing")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthenticatedException("Invalid authorization header format")
    return parts[1]


def principal_from_claims(claims: dict) -> Principal:
    """Build principal from verified token claims."""
    if claims.get("type") != "access":
        raise UnauthenticatedException("Invalid token")
    try:
        return Principal(user_id=UUID(str(claims["sub"])), role=RoleEnum(claims["role"]))
    except (KeyError, ValueError) as exc:
        raise UnauthenticatedException("Invalid token") from exc


async def get_current_principal(token: str = Depends(get_bearer_token)) -> Principal:
    """Resolve authenticated principal from bearer token."""
    return principal_from_claims(decode_token(token))


def ensure_role(principal: Principal, roles: tuple[RoleEnum, ...]) -> Principal:
    """Reject principal whose role is outside a non-empty role set."""
    if roles and principal.role not in roles:
        required = [str(role) for role in roles]
        raise ForbiddenException(
            f"Access denied. Required role(s): {', '.join(required)}",
            requiredRoles=required,
            userRole=str(principal.role),
        )
    return principal


def require_roles(*roles: RoleEnum):
    """Dependency factory for role-based access."""

    async def _checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        return ensure_role(principal, roles)

    return _checker

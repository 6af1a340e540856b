"""Identity API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.modules.identity.schemas import (
    AuthSession,
    LoginRequest,
    PasswordChangeRequest,
    Principal,
    UserCreate,
)
from app.modules.identity.service import IdentityService, get_current_principal, get_identity_service
from app.shared.responses import ApiResponse, build_response

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[AuthSession], status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[AuthSession]:
    """Register a new account."""
    session = await service.register(payload)
    return build_response("User registered successfully", session)


@router.post("/login", response_model=ApiResponse[AuthSession])
async def login(
    payload: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[AuthSession]:
    """Sign in by email/password and return access token."""
    session = await service.login(payload)
    return build_response("Login successful", session)


@router.post("/change-password", response_model=ApiResponse[None])
async def change_password(
    payload: PasswordChangeRequest,
    principal: Principal = Depends(get_current_principal),
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[None]:
    """Change password of the authenticated user."""
    await service.change_password(principal, payload)
    return build_response("Password changed successfully")

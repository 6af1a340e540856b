"""Users directory API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from app.modules.identity.schemas import Principal, UserRead
from app.modules.identity.service import get_current_principal
from app.modules.users.schemas import ProfileUpdate
from app.modules.users.service import UsersService, get_users_service
from app.shared.responses import ApiResponse, build_response

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/mentors", response_model=ApiResponse[list[UserRead]])
async def list_mentors(
    _: Principal = Depends(get_current_principal),
    service: UsersService = Depends(get_users_service),
) -> ApiResponse[list[UserRead]]:
    """List approved mentors."""
    mentors = await service.list_approved_mentors()
    return build_response(
        "Mentors fetched successfully",
        [UserRead.model_validate(mentor) for mentor in mentors],
    )


@router.put("/profile", response_model=ApiResponse[UserRead])
async def update_profile(
    payload: ProfileUpdate,
    principal: Principal = Depends(get_current_principal),
    service: UsersService = Depends(get_users_service),
) -> ApiResponse[UserRead]:
    """Update profile of the authenticated user."""
    user = await service.update_profile(principal, payload)
    return build_response("Profile updated successfully", UserRead.model_validate(user))


@router.get("/{user_id}", response_model=ApiResponse[UserRead])
async def get_user(
    user_id: UUID,
    _: Principal = Depends(get_current_principal),
    service: UsersService = Depends(get_users_service),
) -> ApiResponse[UserRead]:
    """Fetch a user profile by id."""
    user = await service.get_user(user_id)
    return build_response("User fetched successfully", UserRead.model_validate(user))

"""Admin API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.enums import MentorStatusEnum, RoleEnum
from app.modules.admin.schemas import AdminActionRead, MentorDecisionRead, MentorStatusUpdate
from app.modules.admin.service import AdminService, get_admin_service
from app.modules.identity.schemas import Principal, UserRead
from app.modules.identity.service import require_roles
from app.shared.pagination import Page, build_page, get_pagination_params
from app.shared.responses import ApiResponse, build_response

router = APIRouter(prefix="/admin", tags=["admin"])

require_admin = require_roles(RoleEnum.ADMIN)


async def _mentors_response(service: AdminService, mentor_status: MentorStatusEnum) -> ApiResponse[list[UserRead]]:
    mentors = await service.list_mentors_by_status(mentor_status)
    return build_response(
        f"{mentor_status.capitalize()} mentors fetched successfully",
        [UserRead.model_validate(mentor) for mentor in mentors],
    )


@router.get("/pending-mentors", response_model=ApiResponse[list[UserRead]])
async def list_pending_mentors(
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApiResponse[list[UserRead]]:
    """List mentors awaiting approval."""
    return await _mentors_response(service, MentorStatusEnum.PENDING)


@router.get("/approved-mentors", response_model=ApiResponse[list[UserRead]])
async def list_approved_mentors(
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApiResponse[list[UserRead]]:
    """List approved mentors."""
    return await _mentors_response(service, MentorStatusEnum.APPROVED)


@router.get("/rejected-mentors", response_model=ApiResponse[list[UserRead]])
async def list_rejected_mentors(
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApiResponse[list[UserRead]]:
    """List rejected mentors."""
    return await _mentors_response(service, MentorStatusEnum.REJECTED)


@router.patch("/mentor/{mentor_id}", response_model=ApiResponse[MentorDecisionRead])
async def update_mentor_status(
    mentor_id: UUID,
    payload: MentorStatusUpdate,
    principal: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApiResponse[MentorDecisionRead]:
    """Approve or reject a pending mentor."""
    mentor = await service.set_mentor_status(mentor_id, payload.status, principal)
    return build_response(
        f"Mentor {payload.status} successfully",
        MentorDecisionRead.model_validate(mentor),
    )


@router.get("/actions", response_model=ApiResponse[Page[AdminActionRead]])
async def list_admin_actions(
    pagination=Depends(get_pagination_params),
    _: Principal = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApiResponse[Page[AdminActionRead]]:
    """List admin journal entries."""
    items, total = await service.list_actions(pagination.limit, pagination.offset)
    serialized = [AdminActionRead.model_validate(item) for item in items]
    return build_response("Admin actions fetched successfully", build_page(serialized, total, pagination))

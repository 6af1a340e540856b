"""Mentorship requests API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.core.enums import RequestStatusEnum, RoleEnum
from app.modules.identity.schemas import Principal
from app.modules.identity.service import require_roles
from app.modules.requests.schemas import (
    MentorQueueItem,
    MentorshipRequestCreate,
    MentorshipRequestRead,
    MentorshipRequestUpdate,
    StudentRequestItem,
)
from app.modules.requests.service import RequestsService, get_requests_service
from app.shared.responses import ApiResponse, build_response

router = APIRouter(prefix="/requests", tags=["requests"])


@router.post("", response_model=ApiResponse[MentorQueueItem], status_code=status.HTTP_201_CREATED)
async def create_request(
    payload: MentorshipRequestCreate,
    principal: Principal = Depends(require_roles(RoleEnum.STUDENT)),
    service: RequestsService = Depends(get_requests_service),
) -> ApiResponse[MentorQueueItem]:
    """Send a mentorship request to an approved mentor."""
    request = await service.create_request(principal, payload.mentor_id)
    return build_response("Mentorship request created successfully", MentorQueueItem.model_validate(request))


@router.get("/my-requests", response_model=ApiResponse[list[StudentRequestItem]])
async def list_my_requests(
    status_filter: RequestStatusEnum | None = Query(default=None, alias="status"),
    principal: Principal = Depends(require_roles(RoleEnum.STUDENT)),
    service: RequestsService = Depends(get_requests_service),
) -> ApiResponse[list[StudentRequestItem]]:
    """List requests sent by the current student."""
    requests = await service.list_for_student(principal, status_filter)
    return build_response(
        "Student mentorship requests retrieved successfully",
        [StudentRequestItem.model_validate(item) for item in requests],
    )


@router.get("", response_model=ApiResponse[list[MentorQueueItem]])
async def list_mentor_requests(
    status_filter: RequestStatusEnum | None = Query(default=None, alias="status"),
    principal: Principal = Depends(require_roles(RoleEnum.MENTOR)),
    service: RequestsService = Depends(get_requests_service),
) -> ApiResponse[list[MentorQueueItem]]:
    """List requests addressed to the current mentor."""
    requests = await service.list_for_mentor(principal, status_filter)
    return build_response(
        "Mentorship requests retrieved successfully",
        [MentorQueueItem.model_validate(item) for item in requests],
    )


@router.patch("/{request_id}", response_model=ApiResponse[MentorshipRequestRead])
async def update_request(
    request_id: UUID,
    payload: MentorshipRequestUpdate,
    principal: Principal = Depends(require_roles(RoleEnum.MENTOR)),
    service: RequestsService = Depends(get_requests_service),
) -> ApiResponse[MentorshipRequestRead]:
    """Accept or reject a pending request."""
    request = await service.transition(request_id, principal, payload.status)
    return build_response(
        f"Mentorship request {payload.status} successfully",
        MentorshipRequestRead.model_validate(request),
    )

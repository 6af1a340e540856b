from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.enums import MentorStatusEnum, RequestStatusEnum, RoleEnum
from app.modules.identity.schemas import Principal
from app.modules.requests.schemas import MentorQueueItem, StudentRequestItem
from app.modules.requests.service import RequestsService
from app.shared.exceptions import (
    ConflictException,
    ForbiddenException,
    InvalidOperationException,
    NotFoundException,
    ValidationException,
)
from tests.fakes import (
    FakeIdentityRepository,
    FakeRequestsRepository,
    FakeUser,
    make_admin,
    make_mentor,
    make_student,
    user_store,
)


def principal_of(user: FakeUser) -> Principal:
    return Principal(user_id=user.id, role=user.role)


def make_service(*users: FakeUser) -> tuple[RequestsService, FakeRequestsRepository]:
    store = user_store(*users)
    requests_repo = FakeRequestsRepository(store)
    service = RequestsService(
        requests_repository=requests_repo,
        identity_repository=FakeIdentityRepository(store),
    )
    return service, requests_repo


@pytest.mark.asyncio
async def test_create_request_is_pending_and_expands_both_parties() -> None:
    student = make_student(full_name="Ada Student", bio="Learning Python", goals="Get a backend job")
    mentor = make_mentor(full_name="Grace Mentor")
    service, _ = make_service(student, mentor)

    request = await service.create_request(principal_of(student), mentor.id)

    assert request.status == RequestStatusEnum.PENDING
    item = MentorQueueItem.model_validate(request).model_dump(by_alias=True)
    assert item["status"] == "pending"
    assert item["student"]["fullName"] == "Ada Student"
    assert item["student"]["bio"] == "Learning Python"
    assert item["student"]["goals"] == "Get a backend job"
    assert item["mentor"] == {"id": mentor.id, "fullName": "Grace Mentor", "email": mentor.email}
    assert item["messages"] == []


@pytest.mark.asyncio
async def test_create_requires_mentor_id() -> None:
    student = make_student()
    service, requests_repo = make_service(student)

    with pytest.raises(ValidationException, match="Mentor ID is required"):
        await service.create_request(principal_of(student), None)
    assert requests_repo.writes == 0


@pytest.mark.asyncio
async def test_create_against_unknown_mentor_is_not_found() -> None:
    student = make_student()
    service, _ = make_service(student)

    with pytest.raises(NotFoundException, match="Mentor not found"):
        await service.create_request(principal_of(student), uuid4())


@pytest.mark.asyncio
async def test_create_against_student_is_rejected() -> None:
    student = make_student()
    other_student = make_student()
    service, requests_repo = make_service(student, other_student)

    with pytest.raises(InvalidOperationException, match="not a mentor"):
        await service.create_request(principal_of(student), other_student.id)
    assert requests_repo.writes == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("mentor_status", [MentorStatusEnum.PENDING, MentorStatusEnum.REJECTED])
async def test_create_against_unapproved_mentor_never_creates_record(
    mentor_status: MentorStatusEnum,
) -> None:
    student = make_student()
    mentor = make_mentor(status=mentor_status)
    service, requests_repo = make_service(student, mentor)

    with pytest.raises(InvalidOperationException, match="not available for mentorship requests"):
        await service.create_request(principal_of(student), mentor.id)
    assert requests_repo.requests == {}


@pytest.mark.asyncio
async def test_admin_can_be_requested_as_mentor() -> None:
    student = make_student()
    admin = make_admin()
    service, _ = make_service(student, admin)

    request = await service.create_request(principal_of(student), admin.id)

    assert request.mentor_id == admin.id
    assert request.status == RequestStatusEnum.PENDING


@pytest.mark.asyncio
async def test_second_create_conflicts_while_first_is_pending() -> None:
    student = make_student()
    mentor = make_mentor()
    service, requests_repo = make_service(student, mentor)
    await service.create_request(principal_of(student), mentor.id)

    with pytest.raises(ConflictException) as exc:
        await service.create_request(principal_of(student), mentor.id)

    assert exc.value.message == "You already have a pending request with this mentor"
    assert exc.value.status_code == 400
    assert len(requests_repo.requests) == 1


@pytest.mark.asyncio
async def test_second_create_conflicts_after_acceptance() -> None:
    student = make_student()
    mentor = make_mentor()
    service, _ = make_service(student, mentor)
    request = await service.create_request(principal_of(student), mentor.id)
    await service.transition(request.id, principal_of(mentor), RequestStatusEnum.ACCEPTED)

    with pytest.raises(ConflictException, match="You are already mentored by this mentor"):
        await service.create_request(principal_of(student), mentor.id)


@pytest.mark.asyncio
async def test_rejection_does_not_block_new_request() -> None:
    student = make_student()
    mentor = make_mentor()
    service, requests_repo = make_service(student, mentor)
    first = await service.create_request(principal_of(student), mentor.id)
    await service.transition(first.id, principal_of(mentor), RequestStatusEnum.REJECTED)

    second = await service.create_request(principal_of(student), mentor.id)

    assert second.id != first.id
    assert second.status == RequestStatusEnum.PENDING
    assert requests_repo.requests[first.id].status == RequestStatusEnum.REJECTED


@pytest.mark.asyncio
async def test_requests_to_different_mentors_are_independent() -> None:
    student = make_student()
    first_mentor = make_mentor()
    second_mentor = make_mentor()
    service, requests_repo = make_service(student, first_mentor, second_mentor)

    await service.create_request(principal_of(student), first_mentor.id)
    await service.create_request(principal_of(student), second_mentor.id)

    assert len(requests_repo.requests) == 2


@pytest.mark.asyncio
async def test_storage_uniqueness_violation_is_reported_as_conflict() -> None:
    student = make_student()
    mentor = make_mentor()
    service, requests_repo = make_service(student, mentor)

    async def _raise_integrity_error(student_id, mentor_id):
        raise IntegrityError("INSERT", {}, Exception("uq_mentorship_requests_active_pair"))

    requests_repo.create_request = _raise_integrity_error

    with pytest.raises(ConflictException, match="pending request"):
        await service.create_request(principal_of(student), mentor.id)


@pytest.mark.asyncio
async def test_mentor_accepts_pending_request() -> None:
    student = make_student()
    mentor = make_mentor()
    service, requests_repo = make_service(student, mentor)
    request = await service.create_request(principal_of(student), mentor.id)

    updated = await service.transition(request.id, principal_of(mentor), "accepted")

    assert updated.id == request.id
    assert updated.status == RequestStatusEnum.ACCEPTED
    assert len(requests_repo.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("terminal", [RequestStatusEnum.ACCEPTED, RequestStatusEnum.REJECTED])
@pytest.mark.parametrize("next_status", [RequestStatusEnum.ACCEPTED, RequestStatusEnum.REJECTED])
async def test_terminal_requests_cannot_transition(
    terminal: RequestStatusEnum,
    next_status: RequestStatusEnum,
) -> None:
    student = make_student()
    mentor = make_mentor()
    service, requests_repo = make_service(student, mentor)
    request = await service.create_request(principal_of(student), mentor.id)
    await service.transition(request.id, principal_of(mentor), terminal)
    writes_before = requests_repo.writes

    with pytest.raises(InvalidOperationException) as exc:
        await service.transition(request.id, principal_of(mentor), next_status)

    assert exc.value.message == f"Cannot update {terminal} request"
    assert requests_repo.requests[request.id].status == terminal
    assert requests_repo.writes == writes_before


@pytest.mark.asyncio
@pytest.mark.parametrize("next_status", [RequestStatusEnum.ACCEPTED, RequestStatusEnum.REJECTED])
async def test_only_addressed_mentor_can_transition(next_status: RequestStatusEnum) -> None:
    student = make_student()
    mentor = make_mentor()
    other_mentor = make_mentor()
    service, requests_repo = make_service(student, mentor, other_mentor)
    request = await service.create_request(principal_of(student), mentor.id)

    with pytest.raises(ForbiddenException, match="not authorized to update this request"):
        await service.transition(request.id, principal_of(other_mentor), next_status)

    assert requests_repo.requests[request.id].status == RequestStatusEnum.PENDING


@pytest.mark.asyncio
async def test_transition_to_pending_is_invalid_input() -> None:
    student = make_student()
    mentor = make_mentor()
    service, _ = make_service(student, mentor)
    request = await service.create_request(principal_of(student), mentor.id)

    with pytest.raises(ValidationException):
        await service.transition(request.id, principal_of(mentor), "pending")


@pytest.mark.asyncio
async def test_transition_of_unknown_request_is_not_found() -> None:
    mentor = make_mentor()
    service, _ = make_service(mentor)

    with pytest.raises(NotFoundException, match="Mentorship request not found"):
        await service.transition(uuid4(), principal_of(mentor), RequestStatusEnum.ACCEPTED)


@pytest.mark.asyncio
async def test_mentor_queue_is_scoped_filtered_and_newest_first() -> None:
    first_student = make_student()
    second_student = make_student()
    mentor = make_mentor()
    other_mentor = make_mentor()
    service, _ = make_service(first_student, second_student, mentor, other_mentor)

    older = await service.create_request(principal_of(first_student), mentor.id)
    newer = await service.create_request(principal_of(second_student), mentor.id)
    await service.create_request(principal_of(first_student), other_mentor.id)
    await service.transition(older.id, principal_of(mentor), RequestStatusEnum.ACCEPTED)

    queue = await service.list_for_mentor(principal_of(mentor))
    assert [item.id for item in queue] == [newer.id, older.id]

    pending = await service.list_for_mentor(principal_of(mentor), RequestStatusEnum.PENDING)
    assert [item.id for item in pending] == [newer.id]


@pytest.mark.asyncio
async def test_student_listing_includes_mentor_role() -> None:
    student = make_student()
    mentor = make_mentor()
    admin = make_admin()
    service, _ = make_service(student, mentor, admin)
    await service.create_request(principal_of(student), mentor.id)
    await service.create_request(principal_of(student), admin.id)

    requests = await service.list_for_student(principal_of(student))
    payload = [StudentRequestItem.model_validate(item).model_dump(by_alias=True) for item in requests]

    assert [item["mentor"]["role"] for item in payload] == [RoleEnum.ADMIN, RoleEnum.MENTOR]
    assert "bio" not in payload[0]["student"]

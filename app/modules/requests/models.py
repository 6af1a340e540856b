"""Mentorship request ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Enum as SAEnum, ForeignKey, Index, Text, text as sa_text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BaseModelMixin, enum_values
from app.core.enums import RequestStatusEnum

if TYPE_CHECKING:
    from app.modules.identity.models import User


class MentorshipRequest(BaseModelMixin, Base):
    """Student's request to be mentored by a specific mentor."""

    __tablename__ = "mentorship_requests"
    __table_args__ = (
        # At most one pending or accepted request per student/mentor pair.
        Index(
            "uq_mentorship_requests_active_pair",
            "student_id",
            "mentor_id",
            unique=True,
            postgresql_where=sa_text("status IN ('pending', 'accepted')"),
        ),
    )

    student_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    mentor_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status: Mapped[RequestStatusEnum] = mapped_column(
        SAEnum(RequestStatusEnum, name="request_status_enum", native_enum=False, values_callable=enum_values),
        default=RequestStatusEnum.PENDING,
        nullable=False,
        index=True,
    )

    student: Mapped["User"] = relationship(back_populates="requests_as_student", foreign_keys=[student_id])
    mentor: Mapped["User"] = relationship(back_populates="requests_as_mentor", foreign_keys=[mentor_id])
    messages: Mapped[list["RequestMessage"]] = relationship(
        back_populates="request",
        cascade="all, delete-orphan",
        order_by="RequestMessage.created_at",
    )


class RequestMessage(BaseModelMixin, Base):
    """Message in the thread attached to a mentorship request."""

    __tablename__ = "mentorship_request_messages"

    request_id: Mapped[UUID] = mapped_column(
        ForeignKey("mentorship_requests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender_id: Mapped[UUID | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    request: Mapped[MentorshipRequest] = relationship(back_populates="messages")

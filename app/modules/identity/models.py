"""Identity ORM models."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum as SAEnum, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BaseModelMixin, enum_values
from app.core.enums import MentorStatusEnum, RoleEnum

if TYPE_CHECKING:
    from app.modules.requests.models import MentorshipRequest


class User(BaseModelMixin, Base):
    """Platform user: student, mentor or admin."""

    __tablename__ = "users"

    full_name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[RoleEnum] = mapped_column(
        SAEnum(RoleEnum, name="role_enum", native_enum=False, values_callable=enum_values),
        default=RoleEnum.STUDENT,
        nullable=False,
        index=True,
    )
    mentor_status: Mapped[MentorStatusEnum] = mapped_column(
        SAEnum(MentorStatusEnum, name="mentor_status_enum", native_enum=False, values_callable=enum_values),
        default=MentorStatusEnum.PENDING,
        nullable=False,
        index=True,
    )

    bio: Mapped[str] = mapped_column(Text, default="", nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    location: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    current_role: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    skills: Mapped[str] = mapped_column(Text, default="", nullable=False)
    goals: Mapped[str] = mapped_column(Text, default="", nullable=False)

    requests_as_student: Mapped[list["MentorshipRequest"]] = relationship(
        back_populates="student",
        foreign_keys="MentorshipRequest.student_id",
    )
    requests_as_mentor: Mapped[list["MentorshipRequest"]] = relationship(
        back_populates="mentor",
        foreign_keys="MentorshipRequest.mentor_id",
    )

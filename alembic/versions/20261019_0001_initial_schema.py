"""Initial schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 10:00:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


role_enum = sa.Enum("student", "mentor", "admin", name="role_enum", native_enum=False)
mentor_status_enum = sa.Enum("pending", "approved", "rejected", name="mentor_status_enum", native_enum=False)
request_status_enum = sa.Enum("pending", "accepted", "rejected", name="request_status_enum", native_enum=False)


def _id_col() -> sa.Column:
    return sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False)


def _created_col() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def _updated_col() -> sa.Column:
    return sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("full_name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", role_enum, nullable=False),
        sa.Column("mentor_status", mentor_status_enum, nullable=False),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("current_role", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("skills", sa.Text(), nullable=False, server_default=""),
        sa.Column("goals", sa.Text(), nullable=False, server_default=""),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=False)
    op.create_index("ix_users_role", "users", ["role"], unique=False)
    op.create_index("ix_users_mentor_status", "users", ["mentor_status"], unique=False)
    op.create_index("ix_users_created_at", "users", ["created_at"], unique=False)

    op.create_table(
        "mentorship_requests",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("student_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("mentor_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("status", request_status_enum, nullable=False),
        sa.ForeignKeyConstraint(
            ["student_id"],
            ["users.id"],
            name="fk_mentorship_requests_student_id_users",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["mentor_id"],
            ["users.id"],
            name="fk_mentorship_requests_mentor_id_users",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_mentorship_requests_student_id", "mentorship_requests", ["student_id"], unique=False)
    op.create_index("ix_mentorship_requests_mentor_id", "mentorship_requests", ["mentor_id"], unique=False)
    op.create_index("ix_mentorship_requests_status", "mentorship_requests", ["status"], unique=False)
    op.create_index("ix_mentorship_requests_created_at", "mentorship_requests", ["created_at"], unique=False)
    op.create_index(
        "uq_mentorship_requests_active_pair",
        "mentorship_requests",
        ["student_id", "mentor_id"],
        unique=True,
        postgresql_where=sa.text("status IN ('pending', 'accepted')"),
    )

    op.create_table(
        "mentorship_request_messages",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("request_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("sender_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(
            ["request_id"],
            ["mentorship_requests.id"],
            name="fk_mentorship_request_messages_request_id_mentorship_requests",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["sender_id"],
            ["users.id"],
            name="fk_mentorship_request_messages_sender_id_users",
            ondelete="SET NULL",
        ),
    )
    op.create_index(
        "ix_mentorship_request_messages_request_id",
        "mentorship_request_messages",
        ["request_id"],
        unique=False,
    )
    op.create_index(
        "ix_mentorship_request_messages_created_at",
        "mentorship_request_messages",
        ["created_at"],
        unique=False,
    )

    op.create_table(
        "admin_actions",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("admin_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("action", sa.String(length=128), nullable=False),
        sa.Column("target_type", sa.String(length=64), nullable=False),
        sa.Column("target_id", sa.String(length=64), nullable=True),
        sa.Column("payload", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.ForeignKeyConstraint(["admin_id"], ["users.id"], name="fk_admin_actions_admin_id_users", ondelete="CASCADE"),
    )
    op.create_index("ix_admin_actions_admin_id", "admin_actions", ["admin_id"], unique=False)
    op.create_index("ix_admin_actions_target_id", "admin_actions", ["target_id"], unique=False)
    op.create_index("ix_admin_actions_created_at", "admin_actions", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_admin_actions_created_at", table_name="admin_actions")
    op.drop_index("ix_admin_actions_target_id", table_name="admin_actions")
    op.drop_index("ix_admin_actions_admin_id", table_name="admin_actions")
    op.drop_table("admin_actions")

    op.drop_index("ix_mentorship_request_messages_created_at", table_name="mentorship_request_messages")
    op.drop_index("ix_mentorship_request_messages_request_id", table_name="mentorship_request_messages")
    op.drop_table("mentorship_request_messages")

    op.drop_index("uq_mentorship_requests_active_pair", table_name="mentorship_requests")
    op.drop_index("ix_mentorship_requests_created_at", table_name="mentorship_requests")
    op.drop_index("ix_mentorship_requests_status", table_name="mentorship_requests")
    op.drop_index("ix_mentorship_requests_mentor_id", table_name="mentorship_requests")
    op.drop_index("ix_mentorship_requests_student_id", table_name="mentorship_requests")
    op.drop_table("mentorship_requests")

    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_index("ix_users_mentor_status", table_name="users")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

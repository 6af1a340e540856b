"""Seed idempotent demo accounts for local/non-production environments."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.database import close_engine, session_scope
from app.core.enums import MentorStatusEnum, RoleEnum
from app.core.security import hash_password, verify_password
from app.modules.identity.models import User

DEMO_PASSWORD = "DemoPass123!"


@dataclass(frozen=True, slots=True)
class DemoAccount:
    email: str
    full_name: str
    role: RoleEnum
    mentor_status: MentorStatusEnum
    bio: str = ""
    skills: str = ""


DEMO_ACCOUNTS = (
    DemoAccount(
        email="demo-admin@mentorshiphub.dev",
        full_name="Demo Admin",
        role=RoleEnum.ADMIN,
        mentor_status=MentorStatusEnum.APPROVED,
    ),
    DemoAccount(
        email="demo-mentor@mentorshiphub.dev",
        full_name="Demo Mentor",
        role=RoleEnum.MENTOR,
        mentor_status=MentorStatusEnum.APPROVED,
        bio="Backend engineer mentoring students on APIs and databases.",
        skills="Python, PostgreSQL, system design",
    ),
    DemoAccount(
        email="demo-applicant@mentorshiphub.dev",
        full_name="Demo Applicant",
        role=RoleEnum.MENTOR,
        mentor_status=MentorStatusEnum.PENDING,
        bio="Frontend developer waiting for admin approval.",
        skills="React, TypeScript",
    ),
    DemoAccount(
        email="demo-student@mentorshiphub.dev",
        full_name="Demo Student",
        role=RoleEnum.STUDENT,
        mentor_status=MentorStatusEnum.PENDING,
    ),
)


@dataclass(slots=True)
class SeedStats:
    users_created: int = 0
    users_updated: int = 0


async def _ensure_user(session: AsyncSession, account: DemoAccount) -> bool:
    user = await session.scalar(select(User).where(User.email == account.email))
    created = False
    if user is None:
        user = User(
            email=account.email,
            full_name=account.full_name,
            password_hash=hash_password(DEMO_PASSWORD),
            role=account.role,
            mentor_status=account.mentor_status,
            bio=account.bio,
            skills=account.skills,
        )
        session.add(user)
        created = True
    else:
        if not verify_password(DEMO_PASSWORD, user.password_hash):
            user.password_hash = hash_password(DEMO_PASSWORD)
        user.role = account.role
        user.mentor_status = account.mentor_status

    await session.flush()
    return created


async def _run_seed(*, allow_production: bool) -> SeedStats:
    settings = get_settings()
    app_env = settings.app_env.strip().lower()
    if app_env in {"production", "prod"} and not allow_production:
        raise RuntimeError(
            "Refusing to seed demo data in production. "
            "Re-run with --allow-production only if you are absolutely sure.",
        )

    stats = SeedStats()

    async with session_scope() as session:
        for account in DEMO_ACCOUNTS:
            if await _ensure_user(session, account):
                stats.users_created += 1
            else:
                stats.users_updated += 1

    return stats


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seed idempotent demo accounts (admin, mentors, student) for MentorshipHub.",
    )
    parser.add_argument(
        "--allow-production",
        action="store_true",
        help="Allow seeding even when APP_ENV is production/prod.",
    )
    return parser


def _print_summary(stats: SeedStats) -> None:
    print("Demo seed completed.")
    print(f"- Users created: {stats.users_created}")
    print(f"- Users updated: {stats.users_updated}")
    print("")
    print("Demo credentials (non-production only):")
    for account in DEMO_ACCOUNTS:
        label = f"{account.role}/{account.mentor_status}" if account.role == RoleEnum.MENTOR else account.role
        print(f"- {label}: {account.email} / {DEMO_PASSWORD}")


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        stats = asyncio.run(_run_seed(allow_production=args.allow_production))
    except Exception as exc:
        print(f"Demo seed failed: {exc}")
        return 1
    finally:
        asyncio.run(close_engine())

    _print_summary(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

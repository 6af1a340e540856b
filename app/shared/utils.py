"""Shared utility functions."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current time as an aware UTC datetime; used for row timestamps."""
    return datetime.now(UTC)

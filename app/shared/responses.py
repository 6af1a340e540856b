"""Response envelope and shared schema base."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Schema base serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope shared by all API routes."""

    success: bool = True
    message: str
    data: T | None = None
    count: int | None = None


def build_response(message: str, data: T | None = None) -> ApiResponse[T]:
    """Wrap payload into success envelope, counting list payloads."""
    count = len(data) if isinstance(data, list) else None
    return ApiResponse(message=message, data=data, count=count)

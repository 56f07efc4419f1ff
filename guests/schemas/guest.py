# guests/schemas/guest.py
"""
Guest request and response schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from guests.schemas.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "GuestBase",
    "GuestCreate",
    "GuestUpdate",
    "GuestResponse",
]


class GuestBase(BaseSchema):
    """Core guest attributes."""

    facility_id: int = Field(..., description="Facility this guest belongs to")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    comments: Optional[str] = None


class GuestCreate(GuestBase, BaseCreateSchema):
    pass


class GuestUpdate(GuestBase, BaseUpdateSchema):
    pass


class GuestResponse(GuestBase, BaseResponseSchema):
    pass

# guests/schemas/ban.py
"""
Ban request and response schemas.

Required fields are checked by the ban service so that missing values
are reported in the same ``"field: message"`` form as other ban rules.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from guests.schemas.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = [
    "BanCreate",
    "BanUpdate",
    "BanResponse",
]


class BanCreate(BaseCreateSchema):
    guest_id: Optional[int] = Field(default=None, description="Guest being banned")
    ban_from: Optional[date] = Field(default=None, description="First banned date (inclusive)")
    ban_to: Optional[date] = Field(default=None, description="Last banned date (inclusive)")
    active: bool = True
    staff: Optional[str] = Field(default=None, max_length=100)
    comments: Optional[str] = None


class BanUpdate(BaseUpdateSchema):
    """
    Ban update.

    Only ``active``, ``comments`` and ``staff`` may change. The range and
    guest must be sent back unchanged.
    """

    guest_id: Optional[int] = None
    ban_from: Optional[date] = None
    ban_to: Optional[date] = None
    active: bool = True
    staff: Optional[str] = Field(default=None, max_length=100)
    comments: Optional[str] = None


class BanResponse(BaseResponseSchema):
    guest_id: int
    ban_from: date
    ban_to: date
    active: bool
    staff: Optional[str] = None
    comments: Optional[str] = None

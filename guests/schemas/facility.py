# guests/schemas/facility.py
"""
Facility request and response schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from guests.schemas.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "FacilityBase",
    "FacilityCreate",
    "FacilityUpdate",
    "FacilityResponse",
]


class FacilityBase(BaseSchema):
    """Core facility attributes."""

    name: str = Field(..., min_length=1, max_length=255, examples=["San Francisco"])
    address1: Optional[str] = Field(default=None, max_length=255)
    address2: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=2, examples=["CA"])
    zip_code: Optional[str] = Field(default=None, max_length=10, examples=["94103"])
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)


class FacilityCreate(FacilityBase, BaseCreateSchema):
    pass


class FacilityUpdate(FacilityBase, BaseUpdateSchema):
    pass


class FacilityResponse(FacilityBase, BaseResponseSchema):
    pass

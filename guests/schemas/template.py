# guests/schemas/template.py
"""
Template request and response schemas.

Mats list fields are carried as text; their syntax and subset rules are
enforced by the template service.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from guests.schemas.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "TemplateBase",
    "TemplateCreate",
    "TemplateUpdate",
    "TemplateResponse",
]


class TemplateBase(BaseSchema):
    facility_id: int = Field(..., description="Facility this template belongs to")
    name: str = Field(..., min_length=1, max_length=100)
    comments: Optional[str] = None
    all_mats: Optional[str] = Field(default=None, examples=["1-24"])
    handicap_mats: Optional[str] = Field(default=None, examples=["1,9-10,21"])
    socket_mats: Optional[str] = Field(default=None, examples=["17-18,22-23"])


class TemplateCreate(TemplateBase, BaseCreateSchema):
    pass


class TemplateUpdate(TemplateBase, BaseUpdateSchema):
    pass


class TemplateResponse(TemplateBase, BaseResponseSchema):
    all_mats: str

# guests/schemas/imports.py
"""
Schemas for importing historical registrations.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from guests.models.enums import FeatureType
from guests.models.mats_list import MAX_MAT_NUMBER
from guests.schemas.base import BaseSchema
from guests.schemas.registration import AssignmentDetails, RegistrationResponse

__all__ = [
    "ImportRequest",
    "ImportProblem",
    "ImportResults",
]


class ImportRequest(AssignmentDetails):
    """
    One mat from a historical sign-in sheet.

    When ``first_name`` is present the named guest is looked up (or created)
    and assigned to the mat.
    """

    mat_number: int = Field(..., ge=1, le=MAX_MAT_NUMBER)
    features: Optional[List[FeatureType]] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @model_validator(mode="after")
    def validate_guest_name(self) -> "ImportRequest":
        if self.first_name is not None and not self.last_name:
            raise ValueError("lastName: Required when firstName is specified")
        return self


class ImportProblem(BaseSchema):
    message: str
    problem: ImportRequest
    resolution: Optional[str] = None


class ImportResults(BaseSchema):
    problems: List[ImportProblem] = Field(default_factory=list)
    registrations: List[RegistrationResponse] = Field(default_factory=list)

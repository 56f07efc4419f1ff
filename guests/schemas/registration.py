# guests/schemas/registration.py
"""
Registration request and response schemas.
"""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from guests.models.enums import FeatureType, PaymentType
from guests.models.mats_list import MAX_MAT_NUMBER
from guests.schemas.base import BaseCreateSchema, BaseResponseSchema, BaseSchema

__all__ = [
    "AssignmentDetails",
    "Assign",
    "RegistrationCreate",
    "RegistrationResponse",
]


class AssignmentDetails(BaseSchema):
    """Fields recorded when a guest is assigned to a mat."""

    comments: Optional[str] = None
    payment_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    payment_type: Optional[PaymentType] = None
    shower_time: Optional[time] = None
    wakeup_time: Optional[time] = None


class Assign(AssignmentDetails):
    """Request body for assigning a guest to a registration."""

    guest_id: int = Field(..., description="Guest to assign")


class RegistrationCreate(AssignmentDetails, BaseCreateSchema):
    """
    New registration.

    Only unassigned registrations may be created, so ``guest_id`` must be
    left empty; it is accepted here so the service can reject it explicitly.
    """

    facility_id: Optional[int] = None
    registration_date: Optional[date] = None
    mat_number: int = Field(..., ge=1, le=MAX_MAT_NUMBER)
    features: Optional[List[FeatureType]] = None
    guest_id: Optional[int] = None


class RegistrationResponse(AssignmentDetails, BaseResponseSchema):
    facility_id: int
    registration_date: date
    mat_number: int
    features: Optional[List[FeatureType]] = None
    guest_id: Optional[int] = None

# guests/models/registration.py
"""
Registration model.

A registration is one mat at one facility on one calendar date. It is
unassigned while ``guest_id`` is NULL; assigning a guest fills in the
guest and the assignment detail columns together.
"""

from datetime import date, time
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Date,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from guests.models.base import BaseModel
from guests.models.enums import FeatureType, PaymentType
from guests.models.types import FeatureList

__all__ = ["Registration", "ASSIGNMENT_FIELDS"]

# Columns set by assign and cleared by deassign
ASSIGNMENT_FIELDS = (
    "guest_id",
    "comments",
    "payment_amount",
    "payment_type",
    "shower_time",
    "wakeup_time",
)


class Registration(BaseModel):
    """One mat on one date at one facility."""

    __tablename__ = "registrations"

    facility_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("facilities.id", ondelete="CASCADE"),
        nullable=False,
    )
    registration_date: Mapped[date] = mapped_column(Date, nullable=False)
    mat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    features: Mapped[Optional[List[FeatureType]]] = mapped_column(
        FeatureList,
        nullable=True,
    )

    # Assignment details
    guest_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    payment_amount: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2),
        nullable=True,
    )
    payment_type: Mapped[Optional[PaymentType]] = mapped_column(
        SAEnum(
            PaymentType,
            name="payment_type",
            native_enum=False,
            length=2,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=True,
    )
    shower_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    wakeup_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)

    facility: Mapped["Facility"] = relationship(
        "Facility",
        back_populates="registrations",
    )
    guest: Mapped[Optional["Guest"]] = relationship(
        "Guest",
        back_populates="registrations",
    )

    __table_args__ = (
        UniqueConstraint(
            "facility_id",
            "registration_date",
            "mat_number",
            name="uq_registration_facility_date_mat",
        ),
        UniqueConstraint(
            "facility_id",
            "registration_date",
            "guest_id",
            name="uq_registration_facility_date_guest",
        ),
        Index("ix_registration_facility_date", "facility_id", "registration_date"),
    )

    @property
    def is_assigned(self) -> bool:
        return self.guest_id is not None

    def __repr__(self) -> str:
        return (
            f"<Registration(id={self.id}, facility_id={self.facility_id}, "
            f"registration_date={self.registration_date}, "
            f"mat_number={self.mat_number}, guest_id={self.guest_id})>"
        )

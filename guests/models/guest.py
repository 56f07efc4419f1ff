# guests/models/guest.py
"""
Guest model.

Guests belong to exactly one facility and are unique by first and
last name within it.
"""

from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from guests.models.base import BaseModel

__all__ = ["Guest"]


class Guest(BaseModel):
    """Person who may be assigned a mat."""

    __tablename__ = "guests"

    facility_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("facilities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    facility: Mapped["Facility"] = relationship(
        "Facility",
        back_populates="guests",
    )
    bans: Mapped[List["Ban"]] = relationship(
        "Ban",
        back_populates="guest",
        cascade="all, delete",
        order_by="Ban.ban_from",
    )
    registrations: Mapped[List["Registration"]] = relationship(
        "Registration",
        back_populates="guest",
        cascade="all, delete",
    )

    __table_args__ = (
        UniqueConstraint(
            "facility_id",
            "last_name",
            "first_name",
            name="uq_guest_facility_name",
        ),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return (
            f"<Guest(id={self.id}, facility_id={self.facility_id}, "
            f"name={self.full_name})>"
        )

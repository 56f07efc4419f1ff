# guests/models/facility.py
"""
Facility model.

A facility is a physical shelter location and the top level scope for
guests, templates and registrations.
"""

from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from guests.models.base import BaseModel

__all__ = ["Facility"]


class Facility(BaseModel):
    """Shelter location with contact details."""

    __tablename__ = "facilities"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    address1: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(2), nullable=True)
    zip_code: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Relationships
    guests: Mapped[List["Guest"]] = relationship(
        "Guest",
        back_populates="facility",
        cascade="all, delete",
    )
    templates: Mapped[List["Template"]] = relationship(
        "Template",
        back_populates="facility",
        cascade="all, delete",
    )
    registrations: Mapped[List["Registration"]] = relationship(
        "Registration",
        back_populates="facility",
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        return f"<Facility(id={self.id}, name={self.name})>"

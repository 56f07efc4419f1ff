# guests/models/ban.py
"""
Ban model.

A ban excludes a guest from registration for an inclusive date range.
Ranges belonging to the same guest never overlap.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from guests.models.base import BaseModel

__all__ = ["Ban"]


class Ban(BaseModel):
    """Date range during which a guest may not be registered."""

    __tablename__ = "bans"

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    ban_from: Mapped[date] = mapped_column(Date, nullable=False)
    ban_to: Mapped[date] = mapped_column(Date, nullable=False)
    staff: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    guest: Mapped["Guest"] = relationship(
        "Guest",
        back_populates="bans",
    )

    __table_args__ = (
        UniqueConstraint("guest_id", "ban_from", name="uq_ban_guest_from"),
    )

    def covers(self, when: date) -> bool:
        return self.ban_from <= when <= self.ban_to

    def __repr__(self) -> str:
        return (
            f"<Ban(id={self.id}, guest_id={self.guest_id}, "
            f"ban_from={self.ban_from}, ban_to={self.ban_to}, active={self.active})>"
        )

# guests/models/template.py
"""
Template model.

A template describes the mats available at a facility, as mats lists,
and is used to generate a day's registrations in one step.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from guests.models.base import BaseModel
from guests.models.mats_list import MatsList

__all__ = ["Template"]


class Template(BaseModel):
    """Named layout of mats for one facility."""

    __tablename__ = "templates"

    facility_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("facilities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    all_mats: Mapped[str] = mapped_column(String(1024), nullable=False)
    handicap_mats: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    socket_mats: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    facility: Mapped["Facility"] = relationship(
        "Facility",
        back_populates="templates",
    )

    __table_args__ = (
        UniqueConstraint("facility_id", "name", name="uq_template_facility_name"),
    )

    @property
    def all_mats_list(self) -> MatsList:
        return MatsList(self.all_mats)

    @property
    def handicap_mats_list(self) -> Optional[MatsList]:
        return MatsList(self.handicap_mats) if self.handicap_mats else None

    @property
    def socket_mats_list(self) -> Optional[MatsList]:
        return MatsList(self.socket_mats) if self.socket_mats else None

    def __repr__(self) -> str:
        return f"<Template(id={self.id}, facility_id={self.facility_id}, name={self.name})>"

"""
Facility repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from guests.models.facility import Facility
from guests.repositories.base_repository import BaseRepository


class FacilityRepository(BaseRepository[Facility]):
    default_order = ("name",)

    def __init__(self, db: Session):
        super().__init__(Facility, db)

    def find_by_name(self, name: str) -> List[Facility]:
        """Facilities whose name contains ``name``, ignoring case."""
        return (
            self.db.query(Facility)
            .filter(Facility.name.ilike(f"%{name}%"))
            .order_by(Facility.name)
            .all()
        )

    def find_by_name_exact(self, name: str) -> Optional[Facility]:
        return self.db.query(Facility).filter(Facility.name == name).first()

"""
Guest repository.
"""

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from guests.models.guest import Guest
from guests.repositories.base_repository import BaseRepository


class GuestRepository(BaseRepository[Guest]):
    default_order = ("facility_id", "last_name", "first_name")

    def __init__(self, db: Session):
        super().__init__(Guest, db)

    def find_by_facility_id(self, facility_id: int) -> List[Guest]:
        return self.find_by_criteria(
            {"facility_id": facility_id},
            order_by=("last_name", "first_name"),
        )

    def find_by_name(self, facility_id: int, name: str) -> List[Guest]:
        """Guests of a facility whose first or last name contains ``name``."""
        pattern = f"%{name}%"
        return (
            self.db.query(Guest)
            .filter(Guest.facility_id == facility_id)
            .filter(or_(Guest.first_name.ilike(pattern), Guest.last_name.ilike(pattern)))
            .order_by(Guest.last_name, Guest.first_name)
            .all()
        )

    def find_by_name_exact(
        self, facility_id: int, first_name: str, last_name: str
    ) -> Optional[Guest]:
        return self.find_one_by_criteria({
            "facility_id": facility_id,
            "first_name": first_name,
            "last_name": last_name,
        })

"""
Registration repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from guests.models.registration import Registration
from guests.repositories.base_repository import BaseRepository


class RegistrationRepository(BaseRepository[Registration]):
    default_order = ("facility_id", "registration_date", "mat_number")

    def __init__(self, db: Session):
        super().__init__(Registration, db)

    def find_by_facility_and_date(self, facility_id: int, registration_date: date) -> List[Registration]:
        return self.find_by_criteria(
            {"facility_id": facility_id, "registration_date": registration_date},
            order_by=("mat_number",),
        )

    def find_by_facility_and_date_and_mat(
        self, facility_id: int, registration_date: date, mat_number: int
    ) -> Optional[Registration]:
        return self.find_one_by_criteria({
            "facility_id": facility_id,
            "registration_date": registration_date,
            "mat_number": mat_number,
        })

    def find_by_guest_id(self, guest_id: int) -> List[Registration]:
        return self.find_by_criteria({"guest_id": guest_id}, order_by=("registration_date",))

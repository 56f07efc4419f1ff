"""
Guest service.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from guests.core.exceptions import BadRequestError, NotFoundError, NotUniqueError
from guests.models.guest import Guest
from guests.repositories.facility_repository import FacilityRepository
from guests.repositories.guest_repository import GuestRepository
from guests.schemas.guest import GuestCreate, GuestUpdate
from guests.services.base_service import BaseService, service_operation


class GuestService(BaseService[Guest, GuestRepository]):
    """
    CRUD and lookup operations for guests.

    Names are unique within a facility. Deleting a guest also deletes the
    guest's bans and registrations.
    """

    entity_label = "guest"
    id_field = "guestId"

    def __init__(self, db: Session):
        super().__init__(GuestRepository(db), db)
        self.facilities = FacilityRepository(db)

    @service_operation("find_by_facility_id")
    def find_by_facility_id(self, facility_id: int) -> List[Guest]:
        return self.repository.find_by_facility_id(facility_id)

    @service_operation("find_by_name")
    def find_by_name(self, facility_id: int, name: str) -> List[Guest]:
        return self.repository.find_by_name(facility_id, name)

    @service_operation("find_by_name_exact")
    def find_by_name_exact(self, facility_id: int, first_name: str, last_name: str) -> Guest:
        guest = self.repository.find_by_name_exact(facility_id, first_name, last_name)
        if guest is None:
            raise NotFoundError(
                f"firstName/lastName: Missing guest {first_name} {last_name}"
            )
        return guest

    def lookup_by_name(self, facility_id: int, first_name: str, last_name: str) -> Optional[Guest]:
        """Exact name lookup that returns None instead of raising."""
        return self.repository.find_by_name_exact(facility_id, first_name, last_name)

    @service_operation("insert")
    def insert(self, data: GuestCreate) -> Guest:
        if self.facilities.find_by_id(data.facility_id) is None:
            raise BadRequestError(f"facilityId: Missing facility {data.facility_id}")
        self._check_unique_name(data)

        guest = self.repository.create(Guest(**data.model_dump()))
        self._logger.info(
            f"Inserted guest {guest.id}",
            extra={"guest": guest.to_dict()},
        )
        return guest

    @service_operation("update")
    def update(self, guest_id: int, data: GuestUpdate) -> Guest:
        guest = self._get(guest_id)
        if data.facility_id != guest.facility_id:
            raise BadRequestError("facilityId: Cannot be changed on an update")
        self._check_unique_name(data, guest_id)

        guest = self.repository.update(guest, data.model_dump())
        self._logger.info(f"Updated guest {guest_id}")
        return guest

    def _check_unique_name(self, data: GuestCreate, guest_id: Optional[int] = None) -> None:
        duplicate = self.repository.find_by_name_exact(
            data.facility_id, data.first_name, data.last_name
        )
        if duplicate is not None and duplicate.id != guest_id:
            raise NotUniqueError(
                f"name: Name '{data.first_name} {data.last_name}' "
                f"is already in use within this facility"
            )

"""
Facility service.
"""

from typing import List

from sqlalchemy.orm import Session

from guests.core.exceptions import NotFoundError, NotUniqueError
from guests.models.facility import Facility
from guests.repositories.facility_repository import FacilityRepository
from guests.schemas.facility import FacilityCreate, FacilityUpdate
from guests.services.base_service import BaseService, service_operation


class FacilityService(BaseService[Facility, FacilityRepository]):
    """
    CRUD and lookup operations for facilities.

    Deleting a facility also deletes its guests, templates and registrations.
    """

    entity_label = "facility"
    id_field = "facilityId"

    def __init__(self, db: Session):
        super().__init__(FacilityRepository(db), db)

    @service_operation("find_by_name")
    def find_by_name(self, name: str) -> List[Facility]:
        return self.repository.find_by_name(name)

    @service_operation("find_by_name_exact")
    def find_by_name_exact(self, name: str) -> Facility:
        facility = self.repository.find_by_name_exact(name)
        if facility is None:
            raise NotFoundError(f"name: Missing facility '{name}'")
        return facility

    @service_operation("insert")
    def insert(self, data: FacilityCreate) -> Facility:
        if self.repository.find_by_name_exact(data.name) is not None:
            raise NotUniqueError(f"name: Name '{data.name}' is already in use")

        facility = self.repository.create(Facility(**data.model_dump()))
        self._logger.info(
            f"Inserted facility {facility.id}",
            extra={"facility": facility.to_dict()},
        )
        return facility

    @service_operation("update")
    def update(self, facility_id: int, data: FacilityUpdate) -> Facility:
        facility = self._get(facility_id)

        duplicate = self.repository.find_by_name_exact(data.name)
        if duplicate is not None and duplicate.id != facility.id:
            raise NotUniqueError(f"name: Name '{data.name}' is already in use")

        facility = self.repository.update(facility, data.model_dump())
        self._logger.info(f"Updated facility {facility_id}")
        return facility

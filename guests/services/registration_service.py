"""
Registration service.

A registration is created unassigned and then moves between the
unassigned and assigned states only through ``assign`` and ``deassign``:

- assign sets the guest and every assignment detail, replacing earlier
  values. Reassigning the guest who already holds the mat is how those
  details are edited; a different guest must wait for a deassign.
- deassign clears the guest and every assignment detail.

A guest can hold at most one mat per facility and date.
"""

from datetime import date
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from guests.core.exceptions import (
    BadRequestError,
    GuestAlreadyAssignedError,
    InternalServerError,
    NotFoundError,
    NotUniqueError,
)
from guests.models.registration import ASSIGNMENT_FIELDS, Registration
from guests.repositories.facility_repository import FacilityRepository
from guests.repositories.guest_repository import GuestRepository
from guests.repositories.registration_repository import RegistrationRepository
from guests.schemas.guest import GuestCreate
from guests.schemas.imports import ImportProblem, ImportRequest, ImportResults
from guests.schemas.registration import Assign, RegistrationCreate
from guests.services.base_service import BaseService, service_operation
from guests.services.guest_service import GuestService


class RegistrationService(BaseService[Registration, RegistrationRepository]):

    entity_label = "registration"
    id_field = "registrationId"

    def __init__(self, db: Session):
        super().__init__(RegistrationRepository(db), db)
        self.facilities = FacilityRepository(db)
        self.guests = GuestRepository(db)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @service_operation("find_by_facility_and_date")
    def find_by_facility_and_date(self, facility_id: int, registration_date: date) -> List[Registration]:
        return self.repository.find_by_facility_and_date(facility_id, registration_date)

    @service_operation("find_by_guest_id")
    def find_by_guest_id(self, guest_id: int) -> List[Registration]:
        return self.repository.find_by_guest_id(guest_id)

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    @service_operation("assign")
    def assign(self, registration_id: int, assign: Assign) -> Registration:
        """
        Assign a guest to a registration, or update the assignment details
        of the guest already holding it.

        Raises:
            NotFoundError: registration or guest does not exist
            BadRequestError: registration held by someone else, guest from
                another facility, or guest already on another mat that date
        """
        registration = self._get(registration_id)

        if registration.is_assigned and registration.guest_id != assign.guest_id:
            raise BadRequestError(
                f"registrationId: Registration {registration_id} is assigned to someone else"
            )

        if not registration.is_assigned:
            guest = self.guests.find_by_id(assign.guest_id)
            if guest is None:
                raise NotFoundError(f"guestId: Missing guest {assign.guest_id}")
            if guest.facility_id != registration.facility_id:
                raise BadRequestError(
                    f"guestId: Guest {guest.id} does not belong to facility "
                    f"{registration.facility_id}"
                )

        holding = self._holding(
            registration.facility_id, registration.registration_date, assign.guest_id
        )
        if holding is not None and holding.id != registration.id:
            raise GuestAlreadyAssignedError(assign.guest_id, holding.mat_number)

        registration = self.repository.update(registration, {
            "guest_id": assign.guest_id,
            "comments": assign.comments,
            "payment_amount": assign.payment_amount,
            "payment_type": assign.payment_type,
            "shower_time": assign.shower_time,
            "wakeup_time": assign.wakeup_time,
        })
        self._logger.info(
            f"Assigned guest {assign.guest_id} to registration {registration_id}",
            extra={
                "registration_id": registration_id,
                "guest_id": assign.guest_id,
                "mat_number": registration.mat_number,
            },
        )
        return registration

    @service_operation("deassign")
    def deassign(self, registration_id: int) -> Registration:
        registration = self._get(registration_id)
        if not registration.is_assigned:
            raise BadRequestError(
                f"registrationId: Registration {registration_id} is not currently assigned"
            )

        previous_guest_id = registration.guest_id
        registration = self.repository.update(
            registration, {field: None for field in ASSIGNMENT_FIELDS}
        )
        self._logger.info(
            f"Deassigned guest {previous_guest_id} from registration {registration_id}",
            extra={"registration_id": registration_id, "guest_id": previous_guest_id},
        )
        return registration

    # -------------------------------------------------------------------------
    # Creation and removal
    # -------------------------------------------------------------------------

    @service_operation("insert")
    def insert(self, data: RegistrationCreate) -> Registration:
        """Create an unassigned registration."""
        if data.guest_id is not None:
            raise BadRequestError("guestId: Can only insert unassigned registrations")
        if data.facility_id is None:
            raise BadRequestError("facilityId: Cannot be null")
        if data.registration_date is None:
            raise BadRequestError("registrationDate: Cannot be null")
        if self.facilities.find_by_id(data.facility_id) is None:
            raise BadRequestError("facilityId: Must specify valid facility")

        existing = self.repository.find_by_facility_and_date_and_mat(
            data.facility_id, data.registration_date, data.mat_number
        )
        if existing is not None:
            raise NotUniqueError(
                "facilityId/registrationDate/matNumber: Registration already exists for this combo"
            )

        registration = self.repository.create(Registration(
            facility_id=data.facility_id,
            registration_date=data.registration_date,
            mat_number=data.mat_number,
            features=data.features,
        ))
        self._logger.debug(
            f"Inserted registration {registration.id}",
            extra={"registration": registration.to_dict()},
        )
        return registration

    def update(self, registration_id: int, data: Any) -> Registration:
        message = (
            "Cannot update() Registrations directly after insertion - "
            "use assign() or deassign()."
        )
        self._logger.error(
            f"update({registration_id}, {data!r}): {message}",
            extra={
                "operation": "update",
                "arguments": [repr(registration_id), repr(data)],
            },
        )
        raise InternalServerError(message, details={"operation": "update"})

    @service_operation("delete_by_facility_and_date")
    def delete_by_facility_and_date(self, facility_id: int, registration_date: date) -> List[Registration]:
        """
        Delete every registration of a facility on one date.

        Refused when any of them is assigned; returns the deleted rows.
        """
        registrations = self.repository.find_by_facility_and_date(facility_id, registration_date)
        if not registrations:
            raise NotFoundError(
                "registrationDate: No registrations exist for the specified facility and date"
            )
        if any(registration.is_assigned for registration in registrations):
            raise BadRequestError(
                "registrationDate: At least one registration has already been assigned"
            )

        for registration in registrations:
            self.repository.delete(registration)
        self._logger.info(
            f"Deleted {len(registrations)} registrations for facility {facility_id} "
            f"on {registration_date.isoformat()}"
        )
        return registrations

    # -------------------------------------------------------------------------
    # Historical import
    # -------------------------------------------------------------------------

    @service_operation("import_by_facility_and_date")
    def import_by_facility_and_date(
        self,
        facility_id: int,
        registration_date: date,
        import_requests: List[ImportRequest],
    ) -> ImportResults:
        """
        Create a day's registrations from historical sign-in data.

        Each request becomes an unassigned registration; requests naming a
        guest are then assigned to that guest, creating the guest first if
        needed. A guest already holding another mat that day is reported as
        a problem and the mat is left unassigned.
        """
        if self.facilities.find_by_id(facility_id) is None:
            raise NotFoundError(f"facilityId: Missing facility {facility_id}")

        guest_service = GuestService(self.db)
        problems: List[ImportProblem] = []
        registrations: List[Registration] = []

        for request in import_requests:
            registration = self.insert(RegistrationCreate(
                facility_id=facility_id,
                registration_date=registration_date,
                mat_number=request.mat_number,
                features=request.features,
            ))

            if request.first_name is not None:
                guest = guest_service.lookup_by_name(
                    facility_id, request.first_name, request.last_name
                )
                if guest is None:
                    guest = guest_service.insert(GuestCreate(
                        facility_id=facility_id,
                        first_name=request.first_name,
                        last_name=request.last_name,
                    ))

                try:
                    registration = self.assign(registration.id, Assign(
                        guest_id=guest.id,
                        comments=request.comments,
                        payment_amount=request.payment_amount,
                        payment_type=request.payment_type,
                        shower_time=request.shower_time,
                        wakeup_time=request.wakeup_time,
                    ))
                except GuestAlreadyAssignedError as e:
                    problems.append(ImportProblem(
                        message=e.message,
                        problem=request,
                        resolution="Left unassigned",
                    ))

            registrations.append(registration)

        self._logger.info(
            f"Imported {len(registrations)} registrations for facility {facility_id} "
            f"on {registration_date.isoformat()} with {len(problems)} problems"
        )
        return ImportResults.model_validate(
            {"problems": problems, "registrations": registrations},
            from_attributes=True,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _holding(self, facility_id: int, registration_date: date, guest_id: int) -> Optional[Registration]:
        """The registration this guest holds at a facility on a date, if any."""
        return self.repository.find_one_by_criteria({
            "facility_id": facility_id,
            "registration_date": registration_date,
            "guest_id": guest_id,
        })

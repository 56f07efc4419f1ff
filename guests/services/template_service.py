"""
Template service.

Templates hold three mats lists for a facility. ``all_mats`` is required;
``handicap_mats`` and ``socket_mats`` are optional and must be subsets of
``all_mats``. Generating a template creates one unassigned registration
per mat for a date.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from guests.core.exceptions import BadRequestError, MatsListError, NotFoundError, NotUniqueError
from guests.models.enums import FeatureType
from guests.models.mats_list import MatsList
from guests.models.registration import Registration
from guests.models.template import Template
from guests.repositories.facility_repository import FacilityRepository
from guests.repositories.registration_repository import RegistrationRepository
from guests.repositories.template_repository import TemplateRepository
from guests.schemas.registration import RegistrationCreate
from guests.schemas.template import TemplateCreate, TemplateUpdate
from guests.services.base_service import BaseService, service_operation
from guests.services.registration_service import RegistrationService


def check_mat_lists(all_mats: Optional[str], handicap_mats: Optional[str], socket_mats: Optional[str]) -> None:
    """
    Validate a template's mats lists, reporting every problem at once.

    Raises:
        BadRequestError: with the individual messages joined by commas
    """
    messages: List[str] = []
    parsed_all: Optional[MatsList] = None

    if all_mats is None:
        messages.append("allMats: Cannot be null")
    else:
        try:
            parsed_all = MatsList(all_mats)
        except MatsListError:
            messages.append("allMats: Invalid mats list syntax")

    if parsed_all is not None and handicap_mats is not None:
        try:
            if not MatsList(handicap_mats).is_subset_of(parsed_all):
                messages.append(
                    "handicapMats: contains at least one mat number that is not part of allMats"
                )
        except MatsListError:
            messages.append("handicapMats: Invalid mats list syntax")

    if parsed_all is not None and socket_mats is not None:
        try:
            if not MatsList(socket_mats).is_subset_of(parsed_all):
                messages.append(
                    "socketMats: Contains at least one mat number that is not part of allMats"
                )
        except MatsListError:
            messages.append("socketMats: Invalid mats list syntax")

    if messages:
        raise BadRequestError(",".join(messages), details={"messages": messages})


class TemplateService(BaseService[Template, TemplateRepository]):

    entity_label = "template"
    id_field = "templateId"

    def __init__(self, db: Session):
        super().__init__(TemplateRepository(db), db)
        self.facilities = FacilityRepository(db)
        self.registrations = RegistrationRepository(db)

    @service_operation("find_by_facility_id")
    def find_by_facility_id(self, facility_id: int) -> List[Template]:
        return self.repository.find_by_facility_id(facility_id)

    @service_operation("find_by_name")
    def find_by_name(self, facility_id: int, name: str) -> List[Template]:
        return self.repository.find_by_name(facility_id, name)

    @service_operation("find_by_name_exact")
    def find_by_name_exact(self, facility_id: int, name: str) -> Template:
        template = self.repository.find_by_name_exact(facility_id, name)
        if template is None:
            raise NotFoundError(f"name: Missing template '{name}'")
        return template

    @service_operation("insert")
    def insert(self, data: TemplateCreate) -> Template:
        check_mat_lists(data.all_mats, data.handicap_mats, data.socket_mats)
        if self.facilities.find_by_id(data.facility_id) is None:
            raise BadRequestError(f"facilityId: Missing facility {data.facility_id}")
        self._check_unique_name(data)

        template = self.repository.create(Template(**data.model_dump()))
        self._logger.info(
            f"Inserted template {template.id}",
            extra={"template": template.to_dict()},
        )
        return template

    @service_operation("update")
    def update(self, template_id: int, data: TemplateUpdate) -> Template:
        template = self._get(template_id)
        check_mat_lists(data.all_mats, data.handicap_mats, data.socket_mats)
        if data.facility_id != template.facility_id:
            raise BadRequestError("facilityId: Cannot be changed on an update")
        self._check_unique_name(data, template_id)

        template = self.repository.update(template, data.model_dump())
        self._logger.info(f"Updated template {template_id}")
        return template

    @service_operation("generate")
    def generate(self, template_id: int, registration_date: date) -> List[Registration]:
        """
        Create the unassigned registrations described by a template.

        Each mat gets feature ``H`` when listed in handicap_mats and ``S``
        when listed in socket_mats.

        Raises:
            NotFoundError: template does not exist
            BadRequestError: the facility already has registrations that day
        """
        template = self._get(template_id)
        if self.registrations.find_by_facility_and_date(template.facility_id, registration_date):
            raise BadRequestError(
                "registrationDate: At least one registration for this date already exists"
            )

        handicap_mats = template.handicap_mats_list
        socket_mats = template.socket_mats_list
        registration_service = RegistrationService(self.db)
        registrations: List[Registration] = []

        for mat_number in template.all_mats_list:
            features = []
            if handicap_mats is not None and handicap_mats.is_member_of(mat_number):
                features.append(FeatureType.H)
            if socket_mats is not None and socket_mats.is_member_of(mat_number):
                features.append(FeatureType.S)
            registrations.append(registration_service.insert(RegistrationCreate(
                facility_id=template.facility_id,
                registration_date=registration_date,
                mat_number=mat_number,
                features=features or None,
            )))

        self._logger.info(
            f"Generated {len(registrations)} registrations from template {template_id} "
            f"for {registration_date.isoformat()}"
        )
        return registrations

    def _check_unique_name(self, data: TemplateCreate, template_id: Optional[int] = None) -> None:
        duplicate = self.repository.find_by_name_exact(data.facility_id, data.name)
        if duplicate is not None and duplicate.id != template_id:
            raise NotUniqueError(
                f"name: Name '{data.name}' is already in use within this facility"
            )

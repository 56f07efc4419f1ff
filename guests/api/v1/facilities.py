"""
Facility endpoints, including the per-facility views of guests,
templates and registrations.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Body, Depends, Path, status

from guests.api import deps
from guests.schemas.facility import FacilityCreate, FacilityResponse, FacilityUpdate
from guests.schemas.guest import GuestResponse
from guests.schemas.imports import ImportRequest, ImportResults
from guests.schemas.registration import RegistrationResponse
from guests.schemas.template import TemplateResponse
from guests.services.facility_service import FacilityService
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService
from guests.services.template_service import TemplateService

router = APIRouter(prefix="/facilities")


@router.get("", response_model=List[FacilityResponse], summary="List facilities")
def list_facilities(service: FacilityService = Depends(deps.get_facility_service)):
    return service.find_all()


@router.post(
    "",
    response_model=FacilityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create facility",
)
def create_facility(
    payload: FacilityCreate,
    service: FacilityService = Depends(deps.get_facility_service),
):
    return service.insert(payload)


@router.get("/name/{name}", response_model=List[FacilityResponse], summary="Search facilities by name")
def search_facilities(name: str, service: FacilityService = Depends(deps.get_facility_service)):
    return service.find_by_name(name)


@router.get("/name-exact/{name}", response_model=FacilityResponse, summary="Get facility by exact name")
def get_facility_by_name(name: str, service: FacilityService = Depends(deps.get_facility_service)):
    return service.find_by_name_exact(name)


@router.get("/{facility_id}", response_model=FacilityResponse, summary="Get facility")
def get_facility(
    facility_id: int = Path(..., description="Facility ID"),
    service: FacilityService = Depends(deps.get_facility_service),
):
    return service.find(facility_id)


@router.put("/{facility_id}", response_model=FacilityResponse, summary="Update facility")
def update_facility(
    payload: FacilityUpdate,
    facility_id: int = Path(..., description="Facility ID"),
    service: FacilityService = Depends(deps.get_facility_service),
):
    return service.update(facility_id, payload)


@router.delete(
    "/{facility_id}",
    response_model=FacilityResponse,
    summary="Delete facility",
    description="Deletes the facility together with its guests, templates and registrations.",
)
def delete_facility(
    facility_id: int = Path(..., description="Facility ID"),
    service: FacilityService = Depends(deps.get_facility_service),
):
    return service.delete(facility_id)


# --- Guests ----------------------------------------------------------------------

@router.get("/{facility_id}/guests", response_model=List[GuestResponse], summary="List facility guests")
def list_facility_guests(
    facility_id: int = Path(..., description="Facility ID"),
    service: GuestService = Depends(deps.get_guest_service),
):
    return service.find_by_facility_id(facility_id)


@router.get(
    "/{facility_id}/guests/name/{name}",
    response_model=List[GuestResponse],
    summary="Search facility guests by name",
)
def search_facility_guests(
    name: str,
    facility_id: int = Path(..., description="Facility ID"),
    service: GuestService = Depends(deps.get_guest_service),
):
    return service.find_by_name(facility_id, name)


@router.get(
    "/{facility_id}/guests/name-exact/{first_name}/{last_name}",
    response_model=GuestResponse,
    summary="Get facility guest by exact name",
)
def get_facility_guest_by_name(
    first_name: str,
    last_name: str,
    facility_id: int = Path(..., description="Facility ID"),
    service: GuestService = Depends(deps.get_guest_service),
):
    return service.find_by_name_exact(facility_id, first_name, last_name)


# --- Templates -------------------------------------------------------------------

@router.get(
    "/{facility_id}/templates",
    response_model=List[TemplateResponse],
    summary="List facility templates",
)
def list_facility_templates(
    facility_id: int = Path(..., description="Facility ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.find_by_facility_id(facility_id)


@router.get(
    "/{facility_id}/templates/name/{name}",
    response_model=List[TemplateResponse],
    summary="Search facility templates by name",
)
def search_facility_templates(
    name: str,
    facility_id: int = Path(..., description="Facility ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.find_by_name(facility_id, name)


@router.get(
    "/{facility_id}/templates/name-exact/{name}",
    response_model=TemplateResponse,
    summary="Get facility template by exact name",
)
def get_facility_template_by_name(
    name: str,
    facility_id: int = Path(..., description="Facility ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.find_by_name_exact(facility_id, name)


# --- Registrations ---------------------------------------------------------------

@router.get(
    "/{facility_id}/registrations/{registration_date}",
    response_model=List[RegistrationResponse],
    summary="List registrations for a date",
)
def list_facility_registrations(
    registration_date: date,
    facility_id: int = Path(..., description="Facility ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.find_by_facility_and_date(facility_id, registration_date)


@router.post(
    "/{facility_id}/registrations/{registration_date}",
    response_model=ImportResults,
    status_code=status.HTTP_201_CREATED,
    summary="Import registrations for a date",
    description="Creates a day's registrations from historical sign-in data.",
)
def import_facility_registrations(
    registration_date: date,
    facility_id: int = Path(..., description="Facility ID"),
    payload: List[ImportRequest] = Body(...),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.import_by_facility_and_date(facility_id, registration_date, payload)


@router.delete(
    "/{facility_id}/registrations/{registration_date}",
    response_model=List[RegistrationResponse],
    summary="Delete registrations for a date",
    description="Refused when any registration for the date is assigned.",
)
def delete_facility_registrations(
    registration_date: date,
    facility_id: int = Path(..., description="Facility ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.delete_by_facility_and_date(facility_id, registration_date)

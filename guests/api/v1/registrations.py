"""
Registration endpoints.

Registrations are never edited in place: use assign and deassign.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, status

from guests.api import deps
from guests.schemas.registration import Assign, RegistrationCreate, RegistrationResponse
from guests.services.registration_service import RegistrationService

router = APIRouter(prefix="/registrations")


@router.get("", response_model=List[RegistrationResponse], summary="List registrations")
def list_registrations(service: RegistrationService = Depends(deps.get_registration_service)):
    return service.find_all()


@router.post(
    "",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create unassigned registration",
)
def create_registration(
    payload: RegistrationCreate,
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.insert(payload)


@router.get("/{registration_id}", response_model=RegistrationResponse, summary="Get registration")
def get_registration(
    registration_id: int = Path(..., description="Registration ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.find(registration_id)


@router.put(
    "/{registration_id}",
    response_model=RegistrationResponse,
    summary="Update registration (not supported)",
    description="Always fails; use assign or deassign instead.",
)
def update_registration(
    payload: Any = Body(None),
    registration_id: int = Path(..., description="Registration ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.update(registration_id, payload)


@router.delete("/{registration_id}", response_model=RegistrationResponse, summary="Delete registration")
def delete_registration(
    registration_id: int = Path(..., description="Registration ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.delete(registration_id)


@router.post(
    "/{registration_id}/assign",
    response_model=RegistrationResponse,
    summary="Assign guest to registration",
)
def assign_registration(
    payload: Assign,
    registration_id: int = Path(..., description="Registration ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.assign(registration_id, payload)


@router.post(
    "/{registration_id}/deassign",
    response_model=RegistrationResponse,
    summary="Remove guest from registration",
)
def deassign_registration(
    registration_id: int = Path(..., description="Registration ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.deassign(registration_id)

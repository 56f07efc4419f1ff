"""
Guest endpoints.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, status

from guests.api import deps
from guests.schemas.ban import BanResponse
from guests.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from guests.schemas.registration import RegistrationResponse
from guests.services.ban_service import BanService
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService

router = APIRouter(prefix="/guests")


@router.get("", response_model=List[GuestResponse], summary="List guests")
def list_guests(service: GuestService = Depends(deps.get_guest_service)):
    return service.find_all()


@router.post(
    "",
    response_model=GuestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create guest",
)
def create_guest(payload: GuestCreate, service: GuestService = Depends(deps.get_guest_service)):
    return service.insert(payload)


@router.get("/{guest_id}", response_model=GuestResponse, summary="Get guest")
def get_guest(
    guest_id: int = Path(..., description="Guest ID"),
    service: GuestService = Depends(deps.get_guest_service),
):
    return service.find(guest_id)


@router.put("/{guest_id}", response_model=GuestResponse, summary="Update guest")
def update_guest(
    payload: GuestUpdate,
    guest_id: int = Path(..., description="Guest ID"),
    service: GuestService = Depends(deps.get_guest_service),
):
    return service.update(guest_id, payload)


@router.delete(
    "/{guest_id}",
    response_model=GuestResponse,
    summary="Delete guest",
    description="Deletes the guest together with the guest's bans and registrations.",
)
def delete_guest(
    guest_id: int = Path(..., description="Guest ID"),
    service: GuestService = Depends(deps.get_guest_service),
):
    return service.delete(guest_id)


@router.get("/{guest_id}/bans", response_model=List[BanResponse], summary="List guest bans")
def list_guest_bans(
    guest_id: int = Path(..., description="Guest ID"),
    service: BanService = Depends(deps.get_ban_service),
):
    return service.find_by_guest_id(guest_id)


@router.get(
    "/{guest_id}/bans/{registration_date}",
    response_model=BanResponse,
    summary="Get the guest's ban covering a date",
)
def get_guest_ban_for_date(
    registration_date: date,
    guest_id: int = Path(..., description="Guest ID"),
    service: BanService = Depends(deps.get_ban_service),
):
    return service.find_by_guest_id_and_date(guest_id, registration_date)


@router.get(
    "/{guest_id}/registrations",
    response_model=List[RegistrationResponse],
    summary="List guest registrations",
)
def list_guest_registrations(
    guest_id: int = Path(..., description="Guest ID"),
    service: RegistrationService = Depends(deps.get_registration_service),
):
    return service.find_by_guest_id(guest_id)

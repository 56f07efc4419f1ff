"""
Ban endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from guests.api import deps
from guests.schemas.ban import BanCreate, BanResponse, BanUpdate
from guests.services.ban_service import BanService

router = APIRouter(prefix="/bans")


@router.get("", response_model=List[BanResponse], summary="List bans")
def list_bans(service: BanService = Depends(deps.get_ban_service)):
    return service.find_all()


@router.post(
    "",
    response_model=BanResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create ban",
)
def create_ban(payload: BanCreate, service: BanService = Depends(deps.get_ban_service)):
    return service.insert(payload)


@router.get("/{ban_id}", response_model=BanResponse, summary="Get ban")
def get_ban(
    ban_id: int = Path(..., description="Ban ID"),
    service: BanService = Depends(deps.get_ban_service),
):
    return service.find(ban_id)


@router.put(
    "/{ban_id}",
    response_model=BanResponse,
    summary="Update ban",
    description="Only active, comments and staff may change.",
)
def update_ban(
    payload: BanUpdate,
    ban_id: int = Path(..., description="Ban ID"),
    service: BanService = Depends(deps.get_ban_service),
):
    return service.update(ban_id, payload)


@router.delete("/{ban_id}", response_model=BanResponse, summary="Delete ban")
def delete_ban(
    ban_id: int = Path(..., description="Ban ID"),
    service: BanService = Depends(deps.get_ban_service),
):
    return service.delete(ban_id)

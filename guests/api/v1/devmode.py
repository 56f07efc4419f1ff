"""
Development data endpoints.

Both are refused with 403 unless enabled in settings.
"""

from fastapi import APIRouter, Depends, Response, status

from guests.api import deps
from guests.services.devmode_service import DevModeService

router = APIRouter(prefix="/devmode")


@router.post("/populate", status_code=status.HTTP_204_NO_CONTENT, summary="Load development data")
def populate(service: DevModeService = Depends(deps.get_devmode_service)):
    service.populate()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/depopulate", status_code=status.HTTP_204_NO_CONTENT, summary="Delete all data")
def depopulate(service: DevModeService = Depends(deps.get_devmode_service)):
    service.depopulate()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

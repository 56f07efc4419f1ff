"""
Dependency providers for route functions.

Each service is built on the request's database session:

    @router.get("/facilities")
    def list_facilities(service: FacilityService = Depends(deps.get_facility_service)):
        return service.find_all()
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from guests.db.session import get_db
from guests.services.ban_service import BanService
from guests.services.devmode_service import DevModeService
from guests.services.facility_service import FacilityService
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService
from guests.services.template_service import TemplateService

__all__ = [
    "get_db",
    "get_ban_service",
    "get_devmode_service",
    "get_facility_service",
    "get_guest_service",
    "get_registration_service",
    "get_template_service",
]


def get_facility_service(db: Session = Depends(get_db)) -> FacilityService:
    return FacilityService(db)


def get_guest_service(db: Session = Depends(get_db)) -> GuestService:
    return GuestService(db)


def get_ban_service(db: Session = Depends(get_db)) -> BanService:
    return BanService(db)


def get_template_service(db: Session = Depends(get_db)) -> TemplateService:
    return TemplateService(db)


def get_registration_service(db: Session = Depends(get_db)) -> RegistrationService:
    return RegistrationService(db)


def get_devmode_service(db: Session = Depends(get_db)) -> DevModeService:
    return DevModeService(db)

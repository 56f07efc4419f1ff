from guests.services.ban_service import BanService
from guests.services.base_service import BaseService, service_operation
from guests.services.devmode_service import DevModeService
from guests.services.facility_service import FacilityService
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService
from guests.services.template_service import TemplateService, check_mat_lists

__all__ = [
    "BanService",
    "BaseService",
    "DevModeService",
    "FacilityService",
    "GuestService",
    "RegistrationService",
    "TemplateService",
    "check_mat_lists",
    "service_operation",
]

from guests.repositories.ban_repository import BanRepository
from guests.repositories.base_repository import BaseRepository
from guests.repositories.facility_repository import FacilityRepository
from guests.repositories.guest_repository import GuestRepository
from guests.repositories.registration_repository import RegistrationRepository
from guests.repositories.template_repository import TemplateRepository

__all__ = [
    "BanRepository",
    "BaseRepository",
    "FacilityRepository",
    "GuestRepository",
    "RegistrationRepository",
    "TemplateRepository",
]

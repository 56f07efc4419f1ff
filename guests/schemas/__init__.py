from guests.schemas.ban import BanCreate, BanResponse, BanUpdate
from guests.schemas.facility import FacilityCreate, FacilityResponse, FacilityUpdate
from guests.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from guests.schemas.imports import ImportProblem, ImportRequest, ImportResults
from guests.schemas.registration import Assign, RegistrationCreate, RegistrationResponse
from guests.schemas.template import TemplateCreate, TemplateResponse, TemplateUpdate

__all__ = [
    "Assign",
    "BanCreate",
    "BanResponse",
    "BanUpdate",
    "FacilityCreate",
    "FacilityResponse",
    "FacilityUpdate",
    "GuestCreate",
    "GuestResponse",
    "GuestUpdate",
    "ImportProblem",
    "ImportRequest",
    "ImportResults",
    "RegistrationCreate",
    "RegistrationResponse",
    "TemplateCreate",
    "TemplateResponse",
    "TemplateUpdate",
]

"""
ORM models and value types.

Importing this package registers every table on ``Base.metadata``.
"""

from guests.models.ban import Ban
from guests.models.enums import FeatureType, PaymentType
from guests.models.facility import Facility
from guests.models.guest import Guest
from guests.models.mats_list import MatsList
from guests.models.registration import ASSIGNMENT_FIELDS, Registration
from guests.models.template import Template

__all__ = [
    "ASSIGNMENT_FIELDS",
    "Ban",
    "FeatureType",
    "Facility",
    "Guest",
    "MatsList",
    "PaymentType",
    "Registration",
    "Template",
]

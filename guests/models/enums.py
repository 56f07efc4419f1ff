# guests/models/enums.py
"""
Enumerations shared by models and schemas.
"""

from enum import Enum

__all__ = ["FeatureType", "PaymentType"]


class FeatureType(str, Enum):
    """Physical features of a mat."""

    H = "H"  # Handicap accessible
    S = "S"  # Electric socket nearby

    @property
    def description(self) -> str:
        return _FEATURE_DESCRIPTIONS[self]


class PaymentType(str, Enum):
    """How the guest paid for a mat."""

    CASH = "$$"
    AGENCY_VOUCHER = "AG"
    CITYTEAM_DECISION = "CT"
    FREE_MAT = "FM"
    MEDICAL_MAT = "MM"
    SEVERE_WEATHER = "SW"
    UNKNOWN = "UK"

    @property
    def description(self) -> str:
        return _PAYMENT_DESCRIPTIONS[self]


_FEATURE_DESCRIPTIONS = {
    FeatureType.H: "Handicap",
    FeatureType.S: "Socket",
}

_PAYMENT_DESCRIPTIONS = {
    PaymentType.CASH: "Paid Cash",
    PaymentType.AGENCY_VOUCHER: "Agency Voucher",
    PaymentType.CITYTEAM_DECISION: "CityTeam Decision",
    PaymentType.FREE_MAT: "Free Mat",
    PaymentType.MEDICAL_MAT: "Medical Mat",
    PaymentType.SEVERE_WEATHER: "Severe Weather",
    PaymentType.UNKNOWN: "Unknown",
}

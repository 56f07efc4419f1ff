"""
Development mode data service.

Loads a fixed set of facilities, guests, bans, templates and registrations
for local work, and wipes every table. Both operations are refused unless
enabled in settings (``DEV_MODE_POPULATE`` / ``DEV_MODE_DEPOPULATE``).
"""

import logging
from datetime import date, time
from decimal import Decimal
from typing import Dict, Tuple

from sqlalchemy.orm import Session

from guests.config.settings import get_settings
from guests.core.exceptions import ForbiddenError
from guests.models.enums import FeatureType, PaymentType
from guests.models.facility import Facility
from guests.models.guest import Guest
from guests.repositories.ban_repository import BanRepository
from guests.repositories.facility_repository import FacilityRepository
from guests.repositories.guest_repository import GuestRepository
from guests.repositories.registration_repository import RegistrationRepository
from guests.repositories.template_repository import TemplateRepository
from guests.schemas.ban import BanCreate
from guests.schemas.facility import FacilityCreate
from guests.schemas.guest import GuestCreate
from guests.schemas.registration import Assign, RegistrationCreate
from guests.schemas.template import TemplateCreate
from guests.services.ban_service import BanService
from guests.services.facility_service import FacilityService
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService
from guests.services.template_service import TemplateService

logger = logging.getLogger(__name__)

# name, address1, city, state, zip_code, phone
FACILITIES = (
    ("Chester", "634 Sproul Street", "Chester", "PA", "19013", "610-872-6865"),
    ("Oakland", "722 Washington St.", "Oakland", "CA", "94607", "510-452-3758"),
    ("Portland", "526 SE Grand Ave.", "Portland", "OR", "97214", "503-231-9334"),
    ("San Francisco", "164 6th Street", "San Francisco", "CA", "94103", "415-861-8688"),
    ("San Jose", "2306 Zanker Road", "San Jose", "CA", "95131", "408-232-5600"),
)

# first_name, last_name
GUEST_NAMES = (
    ("Fred", "Flintstone"),
    ("Barney", "Rubble"),
    ("Bam Bam", "Rubble"),
)

# Portland is deliberately left empty
GUEST_FACILITIES = ("Chester", "Oakland", "San Francisco", "San Jose")

# facility, first_name, ban_from, ban_to, active, label
BANS = (
    ("San Francisco", "Fred", date(2020, 8, 1), date(2020, 8, 31), True, "August"),
    ("San Francisco", "Fred", date(2020, 10, 1), date(2020, 10, 31), False, "October"),
    ("San Francisco", "Barney", date(2020, 9, 1), date(2020, 9, 30), True, "September"),
    ("San Francisco", "Barney", date(2020, 11, 1), date(2020, 11, 30), False, "November"),
)

# facility, kind, all_mats, handicap_mats, socket_mats
TEMPLATES = (
    ("Chester", "COVID", "1-6", "1,3", "3,5"),
    ("Chester", "Standard", "1-58", "1,3", "3,5"),
    ("Oakland", "COVID", "1-3,4-6", "1-3", "3-5"),
    ("Oakland", "Standard", "1-58", "1-10,12", "6-15"),
    ("San Francisco", "COVID", "1-12", "1,3", "3,5"),
    ("San Francisco", "Standard", "1-58", "1,3", "3,5"),
    ("San Jose", "COVID", "1-24", "1,9-10,21", "17-18,22-23"),
    (
        "San Jose",
        "Standard",
        "1-58",
        "1,9-10,21,30-31,34-35,43,54-55,58",
        "17-18,22-23,30-31,36-37,42,53-54,57-58",
    ),
)

REGISTRATION_DATE = date(2020, 7, 4)
SHOWER_TIME = time(3, 30)
WAKEUP_TIME = time(4, 0)

# Unassigned mats, the same at every seeded facility
OPEN_MATS = (
    (1, [FeatureType.H]),
    (2, [FeatureType.S]),
    (3, [FeatureType.H, FeatureType.S]),
    (4, None),
)

# facility -> (mat_number, first_name, payment_type, payment_amount, shower_time, wakeup_time)
ASSIGNED_MATS = {
    "Chester": (
        (5, "Bam Bam", PaymentType.AGENCY_VOUCHER, None, SHOWER_TIME, WAKEUP_TIME),
        (6, "Barney", PaymentType.SEVERE_WEATHER, None, SHOWER_TIME, None),
        (7, "Fred", PaymentType.CASH, Decimal("5.00"), None, WAKEUP_TIME),
    ),
    "Oakland": (
        (5, "Bam Bam", PaymentType.MEDICAL_MAT, None, SHOWER_TIME, None),
        (6, "Barney", PaymentType.CITYTEAM_DECISION, None, SHOWER_TIME, None),
        (7, "Fred", PaymentType.CASH, Decimal("4.00"), SHOWER_TIME, None),
    ),
}


class DevModeService:
    """
    Seeds and clears development data.

    Seeding goes through the regular services, so every record is checked
    by the same rules as API traffic.
    """

    def __init__(self, db: Session):
        self.db = db
        self.facility_service = FacilityService(db)
        self.guest_service = GuestService(db)
        self.ban_service = BanService(db)
        self.template_service = TemplateService(db)
        self.registration_service = RegistrationService(db)

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def populate(self) -> None:
        if not get_settings().DEV_MODE_POPULATE:
            raise ForbiddenError("devMode: population is disabled")
        with self.facility_service.transaction():
            self._populate()

    def depopulate(self) -> None:
        if not get_settings().DEV_MODE_DEPOPULATE:
            raise ForbiddenError("devMode: depopulation is disabled")
        with self.facility_service.transaction():
            self._depopulate()

    def startup(self) -> None:
        """Apply the configured dev mode actions when the application boots."""
        settings = get_settings()
        if settings.DEV_MODE_DEPOPULATE and settings.DEV_MODE_POPULATE:
            self.depopulate()
        if settings.DEV_MODE_POPULATE:
            self.populate()

    # -------------------------------------------------------------------------
    # Depopulate
    # -------------------------------------------------------------------------

    def _depopulate(self) -> None:
        logger.info("----- Depopulate Development Test Data Begin -----")
        # Children before parents
        for label, repository in (
            ("registrations", RegistrationRepository(self.db)),
            ("bans", BanRepository(self.db)),
            ("guests", GuestRepository(self.db)),
            ("templates", TemplateRepository(self.db)),
            ("facilities", FacilityRepository(self.db)),
        ):
            count = repository.delete_all()
            logger.info(f"Deleted {count} {label}")
        logger.info("------ Depopulate Development Test Data End ------")

    # -------------------------------------------------------------------------
    # Populate
    # -------------------------------------------------------------------------

    def _populate(self) -> None:
        logger.info("----- Populate Development Test Data Begin -----")
        facilities = self._populate_facilities()
        guests = self._populate_guests(facilities)
        self._populate_bans(facilities, guests)
        self._populate_templates(facilities)
        self._populate_registrations(facilities, guests)
        logger.info("------ Populate Development Test Data End ------")

    def _populate_facilities(self) -> Dict[str, Facility]:
        facilities: Dict[str, Facility] = {}
        for name, address1, city, state, zip_code, phone in FACILITIES:
            facilities[name] = self.facility_service.insert(FacilityCreate(
                name=name,
                address1=address1,
                city=city,
                state=state,
                zip_code=zip_code,
                email=f"{name.lower().replace(' ', '')}@cityteam.org",
                phone=phone,
            ))
        logger.info(f"Populated {len(facilities)} facilities")
        return facilities

    def _populate_guests(self, facilities: Dict[str, Facility]) -> Dict[Tuple[str, str], Guest]:
        # Keyed by (facility name, first name)
        guests: Dict[Tuple[str, str], Guest] = {}
        for facility_name in GUEST_FACILITIES:
            for first_name, last_name in GUEST_NAMES:
                guests[(facility_name, first_name)] = self.guest_service.insert(GuestCreate(
                    facility_id=facilities[facility_name].id,
                    first_name=first_name,
                    last_name=last_name,
                    comments=f"{facility_name} {first_name} Comment",
                ))
        logger.info(f"Populated {len(guests)} guests")
        return guests

    def _populate_bans(self, facilities: Dict[str, Facility], guests: Dict[Tuple[str, str], Guest]) -> None:
        for facility_name, first_name, ban_from, ban_to, active, label in BANS:
            self.ban_service.insert(BanCreate(
                guest_id=guests[(facility_name, first_name)].id,
                ban_from=ban_from,
                ban_to=ban_to,
                active=active,
                staff="Manager",
                comments=f"{facility_name} {first_name} {label} Ban",
            ))
        logger.info(f"Populated {len(BANS)} bans")

    def _populate_templates(self, facilities: Dict[str, Facility]) -> None:
        for facility_name, kind, all_mats, handicap_mats, socket_mats in TEMPLATES:
            self.template_service.insert(TemplateCreate(
                facility_id=facilities[facility_name].id,
                name=f"{facility_name} {kind}",
                comments=f"{facility_name} {kind} Template",
                all_mats=all_mats,
                handicap_mats=handicap_mats,
                socket_mats=socket_mats,
            ))
        logger.info(f"Populated {len(TEMPLATES)} templates")

    def _populate_registrations(self, facilities: Dict[str, Facility], guests: Dict[Tuple[str, str], Guest]) -> None:
        count = 0
        for facility_name, assigned in ASSIGNED_MATS.items():
            facility_id = facilities[facility_name].id

            for mat_number, features in OPEN_MATS:
                self.registration_service.insert(RegistrationCreate(
                    facility_id=facility_id,
                    registration_date=REGISTRATION_DATE,
                    mat_number=mat_number,
                    features=features,
                ))
                count += 1

            for mat_number, first_name, payment_type, payment_amount, shower_time, wakeup_time in assigned:
                registration = self.registration_service.insert(RegistrationCreate(
                    facility_id=facility_id,
                    registration_date=REGISTRATION_DATE,
                    mat_number=mat_number,
                    features=[FeatureType.H],
                ))
                self.registration_service.assign(registration.id, Assign(
                    guest_id=guests[(facility_name, first_name)].id,
                    comments=f"{first_name} in {facility_name}",
                    payment_amount=payment_amount,
                    payment_type=payment_type,
                    shower_time=shower_time,
                    wakeup_time=wakeup_time,
                ))
                count += 1

        logger.info(f"Populated {count} registrations")

from datetime import date

import pytest

from guests.core.exceptions import BadRequestError, NotFoundError, NotUniqueError
from guests.schemas.ban import BanCreate
from guests.schemas.guest import GuestCreate, GuestUpdate
from guests.schemas.registration import Assign
from guests.services.ban_service import BanService
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService


@pytest.fixture
def service(db):
    return GuestService(db)


def test_insert(fred, facility):
    assert fred.id is not None
    assert fred.facility_id == facility.id
    assert fred.full_name == "Fred Flintstone"


def test_insert_missing_facility(service):
    with pytest.raises(BadRequestError, match="facilityId: Missing facility 5$"):
        service.insert(GuestCreate(facility_id=5, first_name="Fred", last_name="Flintstone"))


def test_insert_duplicate_name_in_facility(service, fred, facility):
    with pytest.raises(
        NotUniqueError,
        match="name: Name 'Fred Flintstone' is already in use within this facility$",
    ):
        service.insert(GuestCreate(facility_id=facility.id, first_name="Fred", last_name="Flintstone"))


def test_same_name_in_other_facility(service, fred, other_facility):
    other = service.insert(
        GuestCreate(facility_id=other_facility.id, first_name="Fred", last_name="Flintstone")
    )
    assert other.id != fred.id


def test_find_by_facility_id_orders_by_last_then_first(service, facility, fred, barney):
    bam_bam = service.insert(GuestCreate(facility_id=facility.id, first_name="Bam Bam", last_name="Rubble"))
    found = service.find_by_facility_id(facility.id)
    assert [guest.id for guest in found] == [fred.id, bam_bam.id, barney.id]


def test_find_by_name_matches_first_or_last(service, facility, fred, barney):
    assert [guest.id for guest in service.find_by_name(facility.id, "rub")] == [barney.id]
    assert [guest.id for guest in service.find_by_name(facility.id, "FRED")] == [fred.id]


def test_find_by_name_exact(service, facility, fred):
    assert service.find_by_name_exact(facility.id, "Fred", "Flintstone").id == fred.id
    with pytest.raises(NotFoundError, match="firstName/lastName: Missing guest Wilma Flintstone$"):
        service.find_by_name_exact(facility.id, "Wilma", "Flintstone")


def test_lookup_by_name_returns_none(service, facility):
    assert service.lookup_by_name(facility.id, "Wilma", "Flintstone") is None


def test_update(service, fred, facility):
    updated = service.update(fred.id, GuestUpdate(
        facility_id=facility.id, first_name="Fred", last_name="Flintstone", comments="Regular",
    ))
    assert updated.comments == "Regular"
    assert updated.version == 1


def test_update_cannot_change_facility(service, fred, other_facility):
    with pytest.raises(BadRequestError, match="facilityId: Cannot be changed on an update$"):
        service.update(fred.id, GuestUpdate(
            facility_id=other_facility.id, first_name="Fred", last_name="Flintstone",
        ))


def test_update_to_taken_name(service, fred, barney, facility):
    with pytest.raises(NotUniqueError):
        service.update(barney.id, GuestUpdate(
            facility_id=facility.id, first_name="Fred", last_name="Flintstone",
        ))


def test_delete_removes_bans_and_registrations(db, service, fred, make_registration):
    BanService(db).insert(BanCreate(guest_id=fred.id, ban_from=date(2020, 8, 1), ban_to=date(2020, 8, 2)))
    registration = make_registration(1)
    RegistrationService(db).assign(registration.id, Assign(guest_id=fred.id))

    service.delete(fred.id)

    assert BanService(db).find_all() == []
    assert RegistrationService(db).find_all() == []

from datetime import date, time
from decimal import Decimal

import pytest
from pydantic import ValidationError

from guests.core.exceptions import (
    BadRequestError,
    GuestAlreadyAssignedError,
    InternalServerError,
    NotFoundError,
    NotUniqueError,
)
from guests.models.enums import FeatureType, PaymentType
from guests.models.mats_list import MAX_MAT_NUMBER
from guests.schemas.guest import GuestCreate
from guests.schemas.imports import ImportRequest
from guests.schemas.registration import Assign, RegistrationCreate
from guests.services.guest_service import GuestService
from guests.services.registration_service import RegistrationService

REGISTRATION_DATE = date(2020, 7, 4)


@pytest.fixture
def service(db):
    return RegistrationService(db)


# --- insert ----------------------------------------------------------------------

def test_insert_creates_unassigned_registration(service, facility):
    registration = service.insert(RegistrationCreate(
        facility_id=facility.id,
        registration_date=REGISTRATION_DATE,
        mat_number=1,
        features=[FeatureType.H, FeatureType.S],
    ))
    assert registration.id is not None
    assert registration.version == 0
    assert registration.guest_id is None
    assert not registration.is_assigned
    assert registration.features == [FeatureType.H, FeatureType.S]


def test_insert_duplicate_mat_is_not_unique(service, make_registration, facility):
    make_registration(1)
    with pytest.raises(NotUniqueError) as excinfo:
        make_registration(1)
    assert excinfo.value.message == (
        "facilityId/registrationDate/matNumber: Registration already exists for this combo"
    )


def test_insert_same_mat_other_date_is_allowed(make_registration):
    make_registration(1)
    registration = make_registration(1, registration_date=date(2020, 7, 5))
    assert registration.mat_number == 1


def test_insert_with_guest_is_bad_request(service, facility, fred):
    with pytest.raises(BadRequestError, match="Can only insert unassigned registrations"):
        service.insert(RegistrationCreate(
            facility_id=facility.id,
            registration_date=REGISTRATION_DATE,
            mat_number=1,
            guest_id=fred.id,
        ))


def test_insert_requires_facility_and_date(service, facility):
    with pytest.raises(BadRequestError, match="facilityId: Cannot be null$"):
        service.insert(RegistrationCreate(registration_date=REGISTRATION_DATE, mat_number=1))
    with pytest.raises(BadRequestError, match="registrationDate: Cannot be null$"):
        service.insert(RegistrationCreate(facility_id=facility.id, mat_number=1))


def test_insert_unknown_facility_is_bad_request(service):
    with pytest.raises(BadRequestError, match="Must specify valid facility"):
        service.insert(RegistrationCreate(facility_id=999, registration_date=REGISTRATION_DATE, mat_number=1))


@pytest.mark.parametrize("mat_number", [0, MAX_MAT_NUMBER + 1, 2 ** 63])
def test_mat_number_outside_integer_range_is_rejected(facility, mat_number):
    with pytest.raises(ValidationError):
        RegistrationCreate(facility_id=facility.id, registration_date=REGISTRATION_DATE, mat_number=mat_number)
    with pytest.raises(ValidationError):
        ImportRequest(mat_number=mat_number)


def test_update_is_never_supported(service, make_registration, guests_caplog):
    registration = make_registration(1)
    with pytest.raises(InternalServerError, match="use assign\\(\\) or deassign\\(\\)"):
        service.update(registration.id, RegistrationCreate(mat_number=2))

    records = [record for record in guests_caplog.records if getattr(record, "operation", None) == "update"]
    assert len(records) == 1
    assert records[0].levelname == "ERROR"
    assert records[0].getMessage().startswith(f"update({registration.id}, ")
    assert records[0].arguments[0] == repr(registration.id)


def test_delete_missing_is_not_found(service):
    with pytest.raises(NotFoundError, match="registrationId: Missing registration 42$"):
        service.delete(42)


# --- assign ----------------------------------------------------------------------

def test_assign_sets_every_detail(service, make_registration, fred):
    registration = make_registration(1)
    assigned = service.assign(registration.id, Assign(
        guest_id=fred.id,
        comments="First night",
        payment_amount=Decimal("5.00"),
        payment_type=PaymentType.CASH,
        shower_time=time(3, 30),
        wakeup_time=time(4, 0),
    ))
    assert assigned.guest_id == fred.id
    assert assigned.comments == "First night"
    assert assigned.payment_amount == Decimal("5.00")
    assert assigned.payment_type == PaymentType.CASH
    assert assigned.shower_time == time(3, 30)
    assert assigned.wakeup_time == time(4, 0)
    assert assigned.version == 1


def test_reassign_same_guest_replaces_details(service, make_registration, fred):
    registration = make_registration(1)
    service.assign(registration.id, Assign(
        guest_id=fred.id, comments="Original", payment_type=PaymentType.CASH,
    ))
    updated = service.assign(registration.id, Assign(guest_id=fred.id, comments="Updated"))
    assert updated.guest_id == fred.id
    assert updated.comments == "Updated"
    assert updated.payment_type is None


def test_assign_to_different_guest_while_held_is_bad_request(service, make_registration, fred, barney):
    registration = make_registration(1)
    service.assign(registration.id, Assign(guest_id=fred.id))
    with pytest.raises(BadRequestError, match="is assigned to someone else"):
        service.assign(registration.id, Assign(guest_id=barney.id))


def test_assign_missing_registration_is_not_found(service, fred):
    with pytest.raises(NotFoundError, match="registrationId: Missing registration 99$"):
        service.assign(99, Assign(guest_id=fred.id))


def test_assign_missing_guest_is_not_found(service, make_registration):
    registration = make_registration(1)
    with pytest.raises(NotFoundError, match="guestId: Missing guest 99$"):
        service.assign(registration.id, Assign(guest_id=99))


def test_assign_guest_from_other_facility_is_bad_request(db, service, make_registration, other_facility):
    wilma = GuestService(db).insert(
        GuestCreate(facility_id=other_facility.id, first_name="Wilma", last_name="Flintstone")
    )
    registration = make_registration(1)
    with pytest.raises(BadRequestError, match="does not belong to facility"):
        service.assign(registration.id, Assign(guest_id=wilma.id))


def test_guest_cannot_hold_two_mats_on_one_date(service, make_registration, fred):
    first = make_registration(1)
    second = make_registration(2)
    service.assign(first.id, Assign(guest_id=fred.id))

    with pytest.raises(GuestAlreadyAssignedError) as excinfo:
        service.assign(second.id, Assign(guest_id=fred.id))
    assert isinstance(excinfo.value, BadRequestError)
    assert excinfo.value.status_code == 400
    assert excinfo.value.mat_number == 1
    assert excinfo.value.message == f"guestId: Guest {fred.id} is already assigned to mat 1"


def test_guest_can_hold_mats_on_different_dates(service, make_registration, fred):
    first = make_registration(1)
    next_night = make_registration(2, registration_date=date(2020, 7, 5))
    service.assign(first.id, Assign(guest_id=fred.id))
    assigned = service.assign(next_night.id, Assign(guest_id=fred.id))
    assert assigned.guest_id == fred.id


def test_failed_assign_leaves_registration_unchanged(db, service, make_registration, fred):
    first = make_registration(1)
    second = make_registration(2)
    service.assign(first.id, Assign(guest_id=fred.id))
    with pytest.raises(GuestAlreadyAssignedError):
        service.assign(second.id, Assign(guest_id=fred.id, comments="nope"))

    reloaded = service.find(second.id)
    assert reloaded.guest_id is None
    assert reloaded.comments is None
    assert reloaded.version == 0


# --- deassign --------------------------------------------------------------------

def test_deassign_clears_every_detail(service, make_registration, fred):
    registration = make_registration(1, features=[FeatureType.H])
    service.assign(registration.id, Assign(
        guest_id=fred.id,
        comments="Leaving early",
        payment_amount=Decimal("5.00"),
        payment_type=PaymentType.CASH,
        shower_time=time(3, 30),
        wakeup_time=time(4, 0),
    ))
    cleared = service.deassign(registration.id)
    assert cleared.guest_id is None
    assert cleared.comments is None
    assert cleared.payment_amount is None
    assert cleared.payment_type is None
    assert cleared.shower_time is None
    assert cleared.wakeup_time is None
    assert cleared.mat_number == 1
    assert cleared.features == [FeatureType.H]


def test_deassign_unassigned_is_bad_request(service, make_registration):
    registration = make_registration(1)
    with pytest.raises(BadRequestError, match="is not currently assigned"):
        service.deassign(registration.id)


def test_deassign_missing_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.deassign(12345)


def test_deassigned_mat_can_go_to_another_guest(service, make_registration, fred, barney):
    registration = make_registration(1)
    service.assign(registration.id, Assign(guest_id=fred.id))
    service.deassign(registration.id)
    assigned = service.assign(registration.id, Assign(guest_id=barney.id))
    assert assigned.guest_id == barney.id


# --- queries ---------------------------------------------------------------------

def test_find_by_facility_and_date_orders_by_mat(service, make_registration, facility):
    make_registration(3)
    make_registration(1)
    make_registration(2)
    make_registration(1, registration_date=date(2020, 7, 5))
    found = service.find_by_facility_and_date(facility.id, REGISTRATION_DATE)
    assert [registration.mat_number for registration in found] == [1, 2, 3]


def test_find_by_guest_id(service, make_registration, fred):
    first = make_registration(1)
    second = make_registration(1, registration_date=date(2020, 7, 5))
    service.assign(second.id, Assign(guest_id=fred.id))
    service.assign(first.id, Assign(guest_id=fred.id))
    found = service.find_by_guest_id(fred.id)
    assert [registration.registration_date for registration in found] == [
        REGISTRATION_DATE, date(2020, 7, 5),
    ]


# --- delete by facility and date -------------------------------------------------

def test_delete_by_facility_and_date(service, make_registration, facility):
    make_registration(1)
    make_registration(2)
    deleted = service.delete_by_facility_and_date(facility.id, REGISTRATION_DATE)
    assert len(deleted) == 2
    assert service.find_by_facility_and_date(facility.id, REGISTRATION_DATE) == []


def test_delete_by_facility_and_date_refuses_assigned(service, make_registration, facility, fred):
    make_registration(1)
    registration = make_registration(2)
    service.assign(registration.id, Assign(guest_id=fred.id))
    with pytest.raises(BadRequestError, match="already been assigned"):
        service.delete_by_facility_and_date(facility.id, REGISTRATION_DATE)
    assert len(service.find_by_facility_and_date(facility.id, REGISTRATION_DATE)) == 2


def test_delete_by_facility_and_date_with_nothing_is_not_found(service, facility):
    with pytest.raises(NotFoundError, match="No registrations exist"):
        service.delete_by_facility_and_date(facility.id, REGISTRATION_DATE)


# --- import ----------------------------------------------------------------------

def test_import_creates_guests_and_assignments(db, service, facility, fred):
    results = service.import_by_facility_and_date(facility.id, REGISTRATION_DATE, [
        ImportRequest(mat_number=1, features=[FeatureType.H]),
        ImportRequest(mat_number=2, first_name="Fred", last_name="Flintstone",
                      payment_type=PaymentType.CASH, payment_amount=Decimal("5.00")),
        ImportRequest(mat_number=3, first_name="Betty", last_name="Rubble"),
    ])

    assert results.problems == []
    assert [registration.mat_number for registration in results.registrations] == [1, 2, 3]
    assert results.registrations[0].guest_id is None
    assert results.registrations[1].guest_id == fred.id
    assert results.registrations[1].payment_type == PaymentType.CASH

    betty = GuestService(db).find_by_name_exact(facility.id, "Betty", "Rubble")
    assert results.registrations[2].guest_id == betty.id


def test_import_reports_guest_on_two_mats(service, facility, fred):
    results = service.import_by_facility_and_date(facility.id, REGISTRATION_DATE, [
        ImportRequest(mat_number=1, first_name="Fred", last_name="Flintstone"),
        ImportRequest(mat_number=2, first_name="Fred", last_name="Flintstone", comments="again"),
    ])

    assert len(results.registrations) == 2
    assert results.registrations[1].guest_id is None
    assert len(results.problems) == 1
    problem = results.problems[0]
    assert problem.message == f"guestId: Guest {fred.id} is already assigned to mat 1"
    assert problem.resolution == "Left unassigned"
    assert problem.problem.mat_number == 2
    assert problem.problem.comments == "again"


def test_import_missing_facility_is_not_found(service):
    with pytest.raises(NotFoundError, match="facilityId: Missing facility 77$"):
        service.import_by_facility_and_date(77, REGISTRATION_DATE, [ImportRequest(mat_number=1)])


def test_import_is_all_or_nothing(service, make_registration, facility):
    make_registration(2)
    with pytest.raises(NotUniqueError):
        service.import_by_facility_and_date(facility.id, REGISTRATION_DATE, [
            ImportRequest(mat_number=1),
            ImportRequest(mat_number=2),
        ])
    found = service.find_by_facility_and_date(facility.id, REGISTRATION_DATE)
    assert [registration.mat_number for registration in found] == [2]

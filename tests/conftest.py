"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database with all tables created.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["DEV_MODE_POPULATE"] = "false"
os.environ["DEV_MODE_DEPOPULATE"] = "false"

import logging  # noqa: E402
from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from guests.db.base import Base, import_models  # noqa: E402
from guests.db.session import build_engine, get_db  # noqa: E402
from guests.main import app  # noqa: E402
from guests.schemas.facility import FacilityCreate  # noqa: E402
from guests.schemas.guest import GuestCreate  # noqa: E402
from guests.schemas.registration import RegistrationCreate  # noqa: E402
from guests.services.facility_service import FacilityService  # noqa: E402
from guests.services.guest_service import GuestService  # noqa: E402
from guests.services.registration_service import RegistrationService  # noqa: E402

REGISTRATION_DATE = date(2020, 7, 4)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    import_models()
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def guests_caplog(caplog, monkeypatch):
    """caplog that also receives records from the non-propagating ``guests`` logger."""
    monkeypatch.setattr(logging.getLogger("guests"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="guests")
    return caplog


# --- Sample data -----------------------------------------------------------------

@pytest.fixture
def facility(db):
    return FacilityService(db).insert(FacilityCreate(name="San Francisco", city="San Francisco", state="CA"))


@pytest.fixture
def other_facility(db):
    return FacilityService(db).insert(FacilityCreate(name="Oakland", city="Oakland", state="CA"))


@pytest.fixture
def fred(db, facility):
    return GuestService(db).insert(
        GuestCreate(facility_id=facility.id, first_name="Fred", last_name="Flintstone")
    )


@pytest.fixture
def barney(db, facility):
    return GuestService(db).insert(
        GuestCreate(facility_id=facility.id, first_name="Barney", last_name="Rubble")
    )


@pytest.fixture
def make_registration(db, facility):
    """Create an unassigned registration at ``facility``."""
    service = RegistrationService(db)

    def _make(mat_number, registration_date=REGISTRATION_DATE, facility_id=None, features=None):
        return service.insert(RegistrationCreate(
            facility_id=facility_id or facility.id,
            registration_date=registration_date,
            mat_number=mat_number,
            features=features,
        ))

    return _make

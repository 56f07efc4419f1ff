import uvicorn
from sqlalchemy import inspect

from guests.__main__ import main
from guests.config.settings import Settings, get_settings
from guests.db.init_db import drop_db, init_db, reset_db
from guests.models.enums import FeatureType, PaymentType
from guests.repositories.facility_repository import FacilityRepository
from guests.schemas.facility import FacilityCreate
from guests.services.facility_service import FacilityService

TABLES = {"bans", "facilities", "guests", "registrations", "templates"}


def test_test_environment_settings():
    settings = get_settings()
    assert settings.get_database_url() == "sqlite://"
    assert settings.is_sqlite()
    assert not settings.is_production()
    assert not settings.is_development()


def test_database_url_built_from_parts():
    settings = Settings(DATABASE_URL=None, DB_USER="shelter", DB_PASSWORD="secret", DB_HOST="db", DB_NAME="guests")
    assert settings.get_database_url() == "postgresql+psycopg2://shelter:secret@db:5432/guests"
    assert not settings.is_sqlite()


def test_cors_origins_and_aliases():
    settings = Settings(BACKEND_CORS_ORIGINS="http://a.example, http://b.example", PROJECT_NAME="Guests")
    assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]
    assert settings.APP_NAME == "Guests"
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
    assert Settings(ENVIRONMENT="Production").is_production()


def test_drop_and_reset(engine, db):
    FacilityService(db).insert(FacilityCreate(name="Chester"))
    assert FacilityRepository(db).count() == 1
    db.close()

    reset_db(engine)
    assert TABLES <= set(inspect(engine).get_table_names())
    assert FacilityRepository(db).count() == 0

    drop_db(engine)
    assert not TABLES & set(inspect(engine).get_table_names())
    init_db(engine)
    assert TABLES <= set(inspect(engine).get_table_names())


def test_enum_descriptions():
    assert FeatureType.H.description == "Handicap"
    assert PaymentType("$$") is PaymentType.CASH
    assert PaymentType.CASH.description == "Paid Cash"
    assert PaymentType.SEVERE_WEATHER.description == "Severe Weather"


def test_main_serves_on_configured_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **options: calls.append((app, options)))
    settings = get_settings()
    monkeypatch.setattr(settings, "HOST", "127.0.0.1")
    monkeypatch.setattr(settings, "PORT", 9090)

    main()

    assert calls == [("guests.main:app", {
        "host": "127.0.0.1", "port": 9090, "reload": False, "log_config": None,
    })]

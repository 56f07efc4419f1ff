"""SQLAlchemy declarative base shared by all models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def import_models() -> None:
    """Import all models so they are registered on Base.metadata."""
    import guests.models  # noqa: F401

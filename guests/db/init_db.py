# guests/db/init_db.py
"""Database initialization utilities."""
import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from guests.db.base import Base, import_models
from guests.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """
    Create any missing tables.

    Suitable for development and testing; existing tables are left alone.
    """
    import_models()
    existing_tables = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = sorted(set(Base.metadata.tables) - existing_tables)
    if created:
        logger.info(f"Created database tables: {', '.join(created)}")
    else:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")


def drop_db(engine: Engine = default_engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data!
    """
    import_models()
    Base.metadata.drop_all(bind=engine)
    logger.warning("All database tables dropped")


def reset_db(engine: Engine = default_engine) -> None:
    """Drop and recreate all tables."""
    logger.warning("Resetting database...")
    drop_db(engine)
    init_db(engine)
    logger.info("Database reset complete")

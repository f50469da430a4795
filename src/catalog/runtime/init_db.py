"""Database initialization script."""

from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.runtime.context import get_config


def init_db() -> DbSessionService:
    """Create all database tables for the configured SQL database."""
    db_service = DbSessionService(get_config().database)
    db_service.create_all()
    return db_service


if __name__ == "__main__":
    init_db().dispose()

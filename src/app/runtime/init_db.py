"""Database initialization script."""

from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.context import get_config


def init_db() -> None:
    """Create all database tables in the configured SQLite file."""
    database_service = DbSessionService(get_config().database)
    try:
        DbManageService(database_service).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()

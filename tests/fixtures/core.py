from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.config.config_data import DatabaseConfig

# Models will be imported within fixtures to control timing


@pytest.fixture
def database_config() -> DatabaseConfig:
    return DatabaseConfig(path=":memory:")


@pytest.fixture
def database_service(database_config: DatabaseConfig) -> Generator[DbSessionService]:
    """A fresh in-memory database with the catalogue tables created."""
    service = DbSessionService(database_config)
    DbManageService(service).create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def manage_service(database_service: DbSessionService) -> DbManageService:
    return DbManageService(database_service)


@pytest.fixture
def session(database_service: DbSessionService) -> Generator[Session]:
    """Create a fresh database session for testing."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        # Explicit cleanup
        session.rollback()
        session.close()


@pytest.fixture
def client(
    database_service: DbSessionService, manage_service: DbManageService
) -> Generator[TestClient]:
    """Test client wired to the in-memory database.

    The lifespan is not run; dependencies are installed on app.state directly.
    """
    from src.app.api.http.app import app
    from src.app.api.http.app_data import ApplicationDependencies

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        database_manage_service=manage_service,
    )
    try:
        yield TestClient(app)
    finally:
        del app.state.app_dependencies

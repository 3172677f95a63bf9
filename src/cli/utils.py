"""Shared utilities for CLI commands."""

from rich.console import Console

from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()


def open_database() -> tuple[DbSessionService, DbManageService]:
    """Open the configured database and its management service."""
    database_service = DbSessionService(get_config().database)
    return database_service, DbManageService(database_service)

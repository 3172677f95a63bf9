from dataclasses import dataclass

from src.app.core.services import DbManageService, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    database_manage_service: DbManageService

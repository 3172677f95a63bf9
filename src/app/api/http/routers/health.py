"""Liveness and readiness probes."""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from src.app.api.http.deps import get_database_service
from src.app.core.services import DbSessionService
from src.app.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: answers as long as the process serves requests."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
def readiness(
    database_service: DbSessionService = Depends(get_database_service),
) -> JSONResponse:
    """Readiness probe: 200 when the catalogue database answers, 503 otherwise."""
    config = get_config()

    try:
        database_ok = database_service.health_check()
        database_check = {
            "status": "healthy" if database_ok else "unhealthy",
            "type": "sqlite",
            "path": config.database.path,
        }
    except SQLAlchemyError as e:
        logger.warning("Readiness probe could not reach the database: {}", e)
        database_ok = False
        database_check = {"status": "unhealthy", "error": str(e)}

    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={
            "status": "ready" if database_ok else "not_ready",
            "environment": config.app.environment,
            "checks": {"database": database_check},
        },
    )

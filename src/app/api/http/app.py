"""FastAPI application for the products catalogue."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.app.api.http.app_data import ApplicationDependencies
from src.app.api.http.middleware.request_context import log_requests
from src.app.api.http.routers import health
from src.app.api.http.routers.service import product, product_option
from src.app.api.utils.app_startup import configure_logging
from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.context import get_config

configure_logging()

__all__ = ["app", "startup", "shutdown"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


_app_config = get_config().app
_show_docs = _app_config.environment != "production"

app = FastAPI(
    title="Products API",
    description="CRUD service for products and their options",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if _show_docs else None,
    redoc_url="/redoc" if _show_docs else None,
)

if _app_config.environment == "production" and "*" in _app_config.cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=_app_config.cors.origins,
    allow_credentials=_app_config.cors.allow_credentials,
    allow_methods=_app_config.cors.allow_methods,
    allow_headers=_app_config.cors.allow_headers,
)
app.middleware("http")(log_requests)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 with the validation errors, minus the rejected input values.

    Rejected input may not be JSON encodable (e.g. an Infinity price).
    """
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    logger.info("Request validation failed: {} error(s)", len(errors))
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


app.include_router(health.router)
app.include_router(product.router, prefix="/api/products")
app.include_router(product_option.router, prefix="/api/products/{product_id}/options")


def build_dependencies() -> ApplicationDependencies:
    """Create the process-wide services from the current configuration."""
    database_service = DbSessionService(get_config().database)
    return ApplicationDependencies(
        database_service=database_service,
        database_manage_service=DbManageService(database_service),
    )


async def startup() -> None:
    config = get_config()
    logger.info(
        "Starting up in {} environment, database at {}",
        config.app.environment,
        config.database.path,
    )

    deps = build_dependencies()
    deps.database_manage_service.create_all()
    app.state.app_dependencies = deps


async def shutdown() -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        deps.database_service.dispose()

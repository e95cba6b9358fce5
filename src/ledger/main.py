from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from http import HTTPStatus

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.ledger.api.middlewares import setup_middlewares
from src.ledger.api.v1.router import api_router
from src.ledger.core.config import Settings, get_settings
from src.ledger.core.db import Database, run_migrations_async
from src.ledger.core.errors import LedgerError, PersistenceError, classify_db_error
from src.ledger.core.health import setup_health_endpoint, setup_metrics
from src.ledger.core.logging import get_logger, setup_logging
from src.ledger.core.shutdown import request_tracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown.

    Uses the Database already on ``app.state`` when one was injected, and
    disposes only a handle it created itself.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.debug)
    logger.info("app_starting", app_name=settings.app_name, app_env=settings.app_env)

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database.from_settings(settings)
    database: Database = app.state.database

    if settings.database_migrate_on_startup:
        logger.info("migrations_running")
        await run_migrations_async(database_url=settings.database_url)

    try:
        capabilities = await database.inspect_capabilities()
        capabilities.ensure_current()
    except LedgerError as e:
        logger.error("schema_out_of_date", detail=e.detail)
        if owns_database:
            await database.dispose()
            app.state.database = None
        raise
    app.state.schema_capabilities = capabilities

    yield

    # Graceful shutdown with request draining
    await request_tracker.start_shutdown()
    await request_tracker.wait_for_drain(timeout=settings.shutdown_grace_period)

    if owns_database:
        await database.dispose()
        app.state.database = None
    logger.info("app_stopped")


OPENAPI_TAGS = [
    {"name": "clients", "description": "Client records and their projects"},
    {"name": "project-types", "description": "Project categories"},
    {"name": "projects", "description": "Projects with billing terms"},
    {"name": "milestones", "description": "Billable milestones and payment status"},
    {"name": "payments", "description": "Payments against milestones"},
    {"name": "assignees", "description": "People who log time"},
    {"name": "time-entries", "description": "Logged hours"},
    {"name": "dashboard", "description": "Overdue milestones and time summaries"},
    {"name": "health", "description": "Liveness and dependency checks"},
]


def _error_response(status_code: int, error: str, detail: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "detail": detail,
            "request_id": correlation_id.get(),
        },
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Clients, projects, milestones, payments and time tracking",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )
    app.state.settings = settings
    app.state.database = database

    # Exception handlers render {"error", "detail", "request_id"}
    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        if isinstance(exc, PersistenceError):
            logger.warning(
                "persistence_error",
                path=request.url.path,
                error_type=type(exc).__name__,
                detail=exc.detail,
            )
        return _error_response(exc.status_code, exc.category, exc.detail)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        # Failures outside a service commit, e.g. while reading
        error = classify_db_error(exc, "read data")
        logger.warning(
            "database_error",
            path=request.url.path,
            error_type=type(exc).__name__,
            classified_as=type(error).__name__,
        )
        return _error_response(error.status_code, error.category, error.detail)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, HTTPStatus(exc.status_code).phrase, exc.detail)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            path=request.url.path,
            exc_info=exc,
        )
        return _error_response(500, "Internal server error", "Internal server error")

    setup_middlewares(app, settings)

    app.include_router(api_router)

    setup_health_endpoint(app, settings)
    setup_metrics(app, settings)

    return app


app = create_app()

"""Health check endpoint and Prometheus metrics."""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import SQLAlchemyError

from src.ledger.core.config import Settings
from src.ledger.core.db import Database
from src.ledger.core.logging import get_logger
from src.ledger.core.shutdown import request_tracker

logger = get_logger(__name__)


class HealthCache:
    """Last health result, reused for ``ttl`` seconds."""

    def __init__(self, ttl: float):
        self.ttl = ttl
        self.result: dict[str, Any] | None = None
        self.checked_at: float = 0

    def get(self, now: float) -> dict[str, Any] | None:
        if self.result is None or now - self.checked_at >= self.ttl:
            return None
        cached = dict(self.result)
        cached["cached"] = True
        cached["cache_age_seconds"] = round(now - self.checked_at, 1)
        return cached

    def put(self, result: dict[str, Any], now: float) -> None:
        self.result = result
        self.checked_at = now

    def reset(self) -> None:
        self.result = None
        self.checked_at = 0


async def check_database(database: Database) -> dict[str, Any]:
    """Ping the database; never raises."""
    result: dict[str, Any] = {"status": "healthy", "database": "healthy"}
    try:
        await database.ping()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("health_database_unreachable", error_type=type(e).__name__, error=str(e))
        result["status"] = "unhealthy"
        result["database"] = f"unhealthy: {type(e).__name__}"
    return result


def setup_health_endpoint(app: FastAPI, settings: Settings) -> None:
    """Configure GET /health (database connectivity, cached briefly)."""
    app.state.health_cache = HealthCache(settings.health_cache_ttl)

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> JSONResponse:
        """Database connectivity check; 503 while unhealthy or draining."""
        if request_tracker.is_shutting_down:
            return JSONResponse(
                content={
                    "status": "draining",
                    "in_flight_requests": request_tracker.in_flight_count,
                },
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        cache: HealthCache = request.app.state.health_cache
        now = time.time()
        result = cache.get(now)
        if result is None:
            result = await check_database(request.app.state.database)
            result["cached"] = False
            result["timestamp"] = now
            cache.put(result, now)

        status_code = (
            status.HTTP_200_OK
            if result["status"] == "healthy"
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return JSONResponse(content=result, status_code=status_code)


def setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Configure Prometheus metrics with optional API key protection."""
    instrumentator = Instrumentator().instrument(app)

    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(
            api_key: str | None = Depends(api_key_header),
        ) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")

"""Health check and metrics endpoints."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.ledger.core.config import Settings
from src.ledger.core.db import Database
from src.ledger.core.shutdown import request_tracker
from src.ledger.main import create_app

pytestmark = pytest.mark.integration


async def test_healthy(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "healthy"
    assert body["cached"] is False


async def test_draining_returns_503(client: AsyncClient) -> None:
    await request_tracker.start_shutdown()

    response = await client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "draining", "in_flight_requests": 0}


async def test_result_is_cached_within_ttl(test_settings: Settings, database: Database) -> None:
    settings = test_settings.model_copy(update={"health_cache_ttl": 60})
    app = create_app(settings=settings, database=database)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        first = (await client.get("/health")).json()
        second = (await client.get("/health")).json()

    assert first["cached"] is False
    assert second["cached"] is True
    assert second["timestamp"] == first["timestamp"]


async def test_unreachable_database_is_unhealthy(
    test_settings: Settings, tmp_path: Path
) -> None:
    settings = test_settings.model_copy(
        update={"database_url": f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'ledger.db'}"}
    )
    database = Database.from_settings(settings)
    app = create_app(settings=settings, database=database)

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get("/health")
    finally:
        await database.dispose()

    assert response.status_code == 503
    assert response.json()["database"] == "unhealthy: OperationalError"


async def test_metrics_exposed(client: AsyncClient) -> None:
    await client.get("/health")

    response = await client.get("/metrics")

    assert response.status_code == 200
    assert "text/plain" in response.headers["content-type"]


async def test_metrics_key_required_when_configured(
    test_settings: Settings, database: Database
) -> None:
    settings = test_settings.model_copy(update={"metrics_api_key": "s3cret"})
    app = create_app(settings=settings, database=database)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        missing = await client.get("/metrics")
        wrong = await client.get("/metrics", headers={"X-Metrics-Key": "nope"})
        right = await client.get("/metrics", headers={"X-Metrics-Key": "s3cret"})

    assert missing.status_code == 401
    assert missing.json()["detail"] == "Invalid or missing metrics API key"
    assert wrong.status_code == 401
    assert right.status_code == 200

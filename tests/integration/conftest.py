"""Integration test fixtures: a real database and an HTTP client.

Each test gets a fresh SQLite file database with foreign keys enforced, so
cascades and RESTRICT behave as they do on PostgreSQL.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

import src.ledger.models  # noqa: F401 - registers tables
from src.ledger.core.config import Settings
from src.ledger.core.db import Database, create_engine_from_settings
from src.ledger.core.shutdown import request_tracker
from src.ledger.main import create_app


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "ledger.db"


@pytest.fixture
def test_settings(database_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{database_path}",
        app_env="testing",
        health_cache_ttl=0,
    )


@pytest.fixture
async def engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Engine with every table created from the model metadata."""
    test_engine = create_engine_from_settings(test_settings)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def database(engine: AsyncEngine) -> Database:
    return Database(engine)


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Session for arranging data; tests must commit what they add."""
    async with database.session() as session:
        yield session


@pytest.fixture
def app(test_settings: Settings, database: Database) -> FastAPI:
    return create_app(settings=test_settings, database=database)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app; the lifespan is not run."""
    request_tracker.reset()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    request_tracker.reset()

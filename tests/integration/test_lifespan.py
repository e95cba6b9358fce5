"""Application startup and shutdown."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from sqlalchemy import text

from src.ledger.core.config import Settings
from src.ledger.core.db import Database, run_migrations_sync
from src.ledger.core.errors import ColumnMissingError
from src.ledger.core.shutdown import request_tracker
from src.ledger.main import create_app, lifespan

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def quiet_startup(monkeypatch: pytest.MonkeyPatch):
    """Keep the lifespan from reconfiguring structlog for the whole session."""
    monkeypatch.setattr("src.ledger.main.setup_logging", lambda debug=False: None)
    request_tracker.reset()
    yield
    request_tracker.reset()


@pytest.fixture
def legacy_settings(test_settings: Settings, tmp_path: Path) -> Settings:
    return test_settings.model_copy(
        update={"database_url": f"sqlite+aiosqlite:///{tmp_path / 'legacy.db'}"}
    )


async def _create_legacy_time_entries(settings: Settings) -> None:
    """A time_entries table as created before the hour/minute columns existed."""
    database = Database.from_settings(settings)
    async with database.engine.begin() as conn:
        await conn.execute(
            text(
                "CREATE TABLE time_entries ("
                "id CHAR(32) PRIMARY KEY, project_id CHAR(32), assignee_id CHAR(32), "
                "date DATETIME, hours NUMERIC(8, 4), description VARCHAR(2000), "
                "created_at DATETIME, updated_at DATETIME)"
            )
        )
    await database.dispose()


async def test_current_schema_starts(app: FastAPI, database: Database) -> None:
    async with lifespan(app):
        assert app.state.schema_capabilities.is_current
        assert app.state.database is database

    # Injected handles belong to the caller
    assert app.state.database is database
    assert request_tracker.is_shutting_down


async def test_owned_database_is_created_and_released(test_settings: Settings) -> None:
    app = create_app(settings=test_settings)

    async with lifespan(app):
        assert isinstance(app.state.database, Database)

    assert app.state.database is None


async def test_unmigrated_schema_refuses_to_start(legacy_settings: Settings) -> None:
    await _create_legacy_time_entries(legacy_settings)
    app = create_app(settings=legacy_settings)

    with pytest.raises(ColumnMissingError) as exc_info:
        async with lifespan(app):
            pass

    assert exc_info.value.table == "time_entries"
    assert exc_info.value.column == "entry_hour"
    assert "alembic upgrade head" in exc_info.value.detail
    assert app.state.database is None


async def test_migrate_on_startup_brings_schema_current(
    test_settings: Settings, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(Path(__file__).parents[2])
    settings = test_settings.model_copy(
        update={
            "database_url": f"sqlite+aiosqlite:///{tmp_path / 'outdated.db'}",
            "database_migrate_on_startup": True,
        }
    )
    run_migrations_sync("001", database_url=settings.database_url)
    app = create_app(settings=settings)

    async with lifespan(app):
        assert app.state.schema_capabilities.is_current

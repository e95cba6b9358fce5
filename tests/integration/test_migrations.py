"""Alembic migrations against a SQLite file."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine

from src.ledger.core.db import inspect_capabilities, run_migrations_sync
from src.ledger.core.db.schema import SchemaCapabilities

pytestmark = pytest.mark.integration


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    # alembic.ini is resolved from the working directory
    monkeypatch.chdir(Path(__file__).parents[2])
    return f"sqlite+aiosqlite:///{tmp_path / 'migrated.db'}"


def _capabilities(database_url: str) -> SchemaCapabilities:
    engine = create_engine(database_url.replace("+aiosqlite", ""))
    try:
        with engine.connect() as connection:
            return inspect_capabilities(connection)
    finally:
        engine.dispose()


def test_initial_revision_lacks_hour_minute(database_url: str) -> None:
    run_migrations_sync("001", database_url=database_url)

    capabilities = _capabilities(database_url)

    assert capabilities.missing == (
        ("time_entries", "entry_hour"),
        ("time_entries", "entry_minute"),
    )


def test_head_is_current(database_url: str) -> None:
    run_migrations_sync("001", database_url=database_url)
    run_migrations_sync("head", database_url=database_url)

    assert _capabilities(database_url).is_current

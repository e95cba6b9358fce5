"""Reusable migration runner for both production and tests."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from alembic.config import Config

from alembic import command
from src.ledger.core.db.engine import sync_database_url


def alembic_config(database_url: str | None = None) -> Config:
    """Load alembic.ini, optionally pointing it at a specific database."""
    config = Config("alembic.ini")
    if database_url:
        config.set_main_option("sqlalchemy.url", sync_database_url(database_url))
    return config


def run_migrations_sync(revision: str = "head", database_url: str | None = None) -> None:
    """Run Alembic migrations synchronously up to ``revision``."""
    command.upgrade(alembic_config(database_url), revision)


async def run_migrations_async(revision: str = "head", database_url: str | None = None) -> None:
    """Run Alembic migrations from async context.

    Uses ThreadPoolExecutor to avoid event loop conflicts with Alembic.
    """
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as pool:
        await loop.run_in_executor(pool, run_migrations_sync, revision, database_url)

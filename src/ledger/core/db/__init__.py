"""Database utilities - engine, session, schema inspection, migrations."""

from src.ledger.core.db.engine import create_engine_from_settings, sync_database_url
from src.ledger.core.db.migrations import run_migrations_async, run_migrations_sync
from src.ledger.core.db.schema import SchemaCapabilities, inspect_capabilities
from src.ledger.core.db.session import Database

__all__ = [
    # Engine
    "create_engine_from_settings",
    "sync_database_url",
    # Handle
    "Database",
    # Schema
    "SchemaCapabilities",
    "inspect_capabilities",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]

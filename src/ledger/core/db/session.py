"""Database handle and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.ledger.core.config import Settings
from src.ledger.core.db.engine import create_engine_from_settings
from src.ledger.core.db.schema import SchemaCapabilities, inspect_capabilities


class Database:
    """Explicitly constructed database handle.

    Created by the application lifespan (or a test fixture) and stored on
    ``app.state``; request handlers receive sessions from it through
    dependencies instead of reaching for a module-level client.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_engine_from_settings(settings))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Open a session; rolls back anything left uncommitted on exit."""
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        """Run a trivial query to verify connectivity."""
        async with self.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))

    async def inspect_capabilities(self) -> SchemaCapabilities:
        """Inspect the connected schema once for late-added columns."""
        async with self.engine.connect() as connection:
            return await connection.run_sync(inspect_capabilities)

    async def dispose(self) -> None:
        """Dispose the engine. Call during shutdown."""
        await self.engine.dispose()

"""Graceful shutdown: refuse new work, wait for running requests."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.ledger.core.logging import get_logger

logger = get_logger(__name__)


class RequestTracker:
    """In-flight request counter with an idle signal.

    ``_idle`` is set exactly when no request is running. Counter updates
    happen between awaits on the event loop thread, so no lock is needed.
    """

    def __init__(self) -> None:
        self._in_flight = 0
        self._shutting_down = False
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def is_shutting_down(self) -> bool:
        return self._shutting_down

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    @asynccontextmanager
    async def track_request(self) -> AsyncGenerator[None]:
        self._in_flight += 1
        self._idle.clear()
        try:
            yield
        finally:
            self._in_flight -= 1
            if not self._in_flight:
                self._idle.set()

    async def start_shutdown(self) -> None:
        """Flag shutdown; /health answers "draining" from here on."""
        self._shutting_down = True
        logger.info("shutdown_started", in_flight=self._in_flight)

    async def wait_for_drain(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds for running requests to finish.

        Returns:
            Whether the tracker went idle in time.
        """
        try:
            async with asyncio.timeout(timeout):
                await self._idle.wait()
        except TimeoutError:
            logger.warning("shutdown_drain_timeout", timeout=timeout, in_flight=self._in_flight)
            return False
        logger.info("shutdown_drained")
        return True

    def reset(self) -> None:
        """Back to a fresh, idle tracker (tests reuse the module instance)."""
        self._in_flight = 0
        self._shutting_down = False
        self._idle = asyncio.Event()
        self._idle.set()


request_tracker = RequestTracker()

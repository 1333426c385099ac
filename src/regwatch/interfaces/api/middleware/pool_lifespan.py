"""Connection pool lifecycle bound to ASGI lifespan events."""

from typing import Any

import structlog
from psycopg_pool import AsyncConnectionPool

logger = structlog.get_logger()


class PoolLifespanMiddleware:
    """Open the change store pool on startup, close it on shutdown."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._opened = False

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open()
        self._opened = True
        logger.info(
            "Change store pool opened",
            min_size=self._pool.min_size,
            max_size=self._pool.max_size,
        )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        if not self._opened:
            return
        stats = self._pool.get_stats()
        await self._pool.close()
        self._opened = False
        logger.info(
            "Change store pool closed",
            requests=stats.get("requests_num", 0),
            errors=stats.get("connections_errors", 0),
        )

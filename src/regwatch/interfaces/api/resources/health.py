"""Health check endpoints."""

import falcon.asgi
import psycopg
import structlog
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from regwatch.infrastructure.persistence.postgres.connection import check_connection

logger = structlog.get_logger()


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (change store reachable)."""
        if self._pool is not None:
            try:
                await check_connection(self._pool)
            except (psycopg.Error, PoolTimeout) as e:
                logger.warning("Readiness check failed", error=str(e))
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200

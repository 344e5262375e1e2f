"""ASGI lifespan hook for the database pool."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from docdedup.infrastructure.persistence.postgres.connection import check_database

logger = logging.getLogger(__name__)


class DatabaseLifespanMiddleware:
    """Opens the pool and probes the database at startup; closes the pool at shutdown.

    A failed probe is logged but does not abort startup: the readiness
    endpoint keeps reporting 503 until the database answers.
    """

    def __init__(self, pool: AsyncConnectionPool, open_timeout: float = 30.0) -> None:
        self._pool = pool
        self._open_timeout = open_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=False)
        try:
            await self._pool.wait(timeout=self._open_timeout)
            await check_database(self._pool)
        except Exception as e:
            logger.warning("Database not reachable at startup: %s", e)
            return
        logger.info(
            "Database pool %s ready (%s..%s connections)",
            self._pool.name,
            self._pool.min_size,
            self._pool.max_size,
        )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Database pool %s closed", self._pool.name)

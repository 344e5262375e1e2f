"""Health check endpoints."""

import logging
from collections.abc import Awaitable, Callable

import falcon.asgi

logger = logging.getLogger(__name__)


class HealthResource:
    """Health and readiness endpoints.

    ready_check is awaited on readiness probes; any exception it raises
    marks the service unavailable.
    """

    def __init__(self, ready_check: Callable[[], Awaitable[None]] | None = None) -> None:
        self._ready_check = ready_check

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database reachable)."""
        if self._ready_check is not None:
            try:
                await self._ready_check()
            except Exception as e:
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200

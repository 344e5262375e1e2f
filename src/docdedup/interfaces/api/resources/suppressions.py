"""Suppression ledger API resources (read-only)."""

import falcon.asgi

from docdedup.application.use_cases.suppression.suppression_ledger import (
    SuppressionLedger,
)
from docdedup.interfaces.api.resources.serializers import suppression_to_dict


class SuppressionsResource:
    """GET /v1/suppressions and GET /v1/suppressions/count."""

    def __init__(self, ledger: SuppressionLedger) -> None:
        self._ledger = ledger

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        owner = getattr(req.context, "owner", None)
        if not owner:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        entries = await self._ledger.entries(owner.owner_id)
        resp.media = {"items": [suppression_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200

    async def on_get_count(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        owner = getattr(req.context, "owner", None)
        if not owner:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        resp.media = {"count": await self._ledger.count(owner.owner_id)}
        resp.status = falcon.HTTP_200

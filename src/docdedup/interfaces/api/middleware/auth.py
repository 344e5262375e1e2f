"""Owner middleware - reads the owner scope set by the upstream auth gateway."""

from dataclasses import dataclass

import falcon.asgi

OWNER_HEADER = "X-Owner-Id"


@dataclass
class RequestOwner:
    """Owner scope from request context."""

    owner_id: str


class OwnerMiddleware:
    """Middleware that sets req.context.owner from the owner header."""

    def __init__(self, header: str = OWNER_HEADER) -> None:
        self._header = header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract owner id; None when the header is missing or blank."""
        owner_id = (req.get_header(self._header) or "").strip()
        req.context.owner = RequestOwner(owner_id=owner_id) if owner_id else None

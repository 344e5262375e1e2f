"""Duplicate relationship API resources."""

from uuid import UUID

import falcon.asgi

from docdedup.application.use_cases.registry.duplicate_registry import DuplicateRegistry
from docdedup.domain.exceptions import InvalidInput, InvalidStatusTransition, NotFound
from docdedup.domain.value_objects import DuplicateStatus
from docdedup.interfaces.api.resources.serializers import relationship_to_dict


class DuplicatesResource:
    """GET /v1/duplicates - list owner's duplicate relationships."""

    def __init__(self, registry: DuplicateRegistry) -> None:
        self._registry = registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Optional ?status=exact|similar|reviewed|dismissed filter."""
        owner = getattr(req.context, "owner", None)
        if not owner:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        status_param = req.get_param("status")
        try:
            status = DuplicateStatus(status_param) if status_param else None
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown status: {status_param}"}
            return

        items = await self._registry.list_relationships(owner.owner_id, status=status)
        resp.media = {"items": [relationship_to_dict(r) for r in items]}
        resp.status = falcon.HTTP_200


class DuplicateResource:
    """GET/PATCH /v1/duplicates/{relationship_id}."""

    def __init__(self, registry: DuplicateRegistry) -> None:
        self._registry = registry

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, relationship_id: str
    ) -> None:
        owner = getattr(req.context, "owner", None)
        if not owner:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        try:
            rel_id = UUID(relationship_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return
        try:
            relationship = await self._registry.get_relationship(rel_id, owner.owner_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Duplicate not found"}
            return
        resp.media = relationship_to_dict(relationship)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, relationship_id: str
    ) -> None:
        """Body: {"status": "reviewed" | "dismissed"}."""
        owner = getattr(req.context, "owner", None)
        if not owner:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        try:
            rel_id = UUID(relationship_id)
            body = await req.get_media()
            new_status = body["status"]
        except (KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid request: {e}"}
            return

        try:
            relationship = await self._registry.transition_status(
                rel_id, new_status, owner.owner_id, owner_id=owner.owner_id
            )
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Duplicate not found"}
            return
        except InvalidStatusTransition as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        except InvalidInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = relationship_to_dict(relationship)
        resp.status = falcon.HTTP_200

"""Document API resources."""

from uuid import UUID

import falcon.asgi

from docdedup.application.dto.document_dto import DocumentRegisterInput
from docdedup.application.use_cases.detection.scan_document import ScanDocumentUseCase
from docdedup.application.use_cases.document.register_document import (
    RegisterDocumentUseCase,
)
from docdedup.application.use_cases.document.update_document_hash import (
    UpdateDocumentHashUseCase,
)
from docdedup.application.use_cases.registry.duplicate_registry import DuplicateRegistry
from docdedup.domain.exceptions import InvalidInput, NotFound
from docdedup.interfaces.api.resources.serializers import (
    deletion_to_dict,
    document_to_dict,
    relationship_to_dict,
    result_to_dict,
)


def _unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


class DocumentsResource:
    """POST /v1/documents - register an ingested document."""

    def __init__(self, register_document: RegisterDocumentUseCase) -> None:
        self._register_document = register_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Register document metadata. Hash is attached later via PUT .../content."""
        owner = getattr(req.context, "owner", None)
        if not owner:
            _unauthorized(resp)
            return

        try:
            body = await req.get_media()
            input_data = DocumentRegisterInput(
                name=str(body["name"]),
                size=int(body["size"]),
                file_type=str(body.get("file_type", "")),
            )
        except (KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid body: {e}"}
            return

        try:
            document = await self._register_document.execute(owner.owner_id, input_data)
        except InvalidInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_201


class DocumentContentResource:
    """PUT /v1/documents/{id}/content - fingerprint raw bytes and attach the hash."""

    def __init__(self, update_hash: UpdateDocumentHashUseCase) -> None:
        self._update_hash = update_hash

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        owner = getattr(req.context, "owner", None)
        if not owner:
            _unauthorized(resp)
            return
        try:
            doc_id = UUID(document_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return

        content = await req.stream.read()
        try:
            content_hash = await self._update_hash.execute(owner.owner_id, doc_id, content)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.media = {"id": str(doc_id), "content_hash": content_hash}
        resp.status = falcon.HTTP_200


class DocumentScanResource:
    """POST /v1/documents/{id}/scan - run duplicate detection for a document."""

    def __init__(self, scan_document: ScanDocumentUseCase) -> None:
        self._scan_document = scan_document

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Body (optional): {"content_hash": str, "record": bool}."""
        owner = getattr(req.context, "owner", None)
        if not owner:
            _unauthorized(resp)
            return
        try:
            doc_id = UUID(document_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return

        body = await req.get_media(default_when_empty={}) or {}
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Body must be a JSON object"}
            return

        try:
            out = await self._scan_document.execute(
                owner.owner_id,
                doc_id,
                content_hash=body.get("content_hash"),
                record=bool(body.get("record", False)),
            )
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except InvalidInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        media = result_to_dict(out.result)
        media["recorded"] = [relationship_to_dict(r) for r in out.recorded]
        resp.media = media
        resp.status = falcon.HTTP_200


class DocumentDuplicateResource:
    """DELETE /v1/documents/{document_id}/duplicates/{duplicate_id} - delete a duplicate of document_id."""

    def __init__(self, registry: DuplicateRegistry) -> None:
        self._registry = registry

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
        duplicate_id: str,
    ) -> None:
        """Delete duplicate document; its hash pair with the source is suppressed."""
        owner = getattr(req.context, "owner", None)
        if not owner:
            _unauthorized(resp)
            return
        try:
            src_id = UUID(document_id)
            dup_id = UUID(duplicate_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return

        try:
            outcome = await self._registry.delete_duplicate(src_id, dup_id, owner.owner_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.media = deletion_to_dict(outcome)
        resp.status = falcon.HTTP_200

"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from docdedup.domain.exceptions import StorageError
from docdedup.interfaces.api.resources.documents import (
    DocumentContentResource,
    DocumentDuplicateResource,
    DocumentScanResource,
    DocumentsResource,
)
from docdedup.interfaces.api.resources.duplicates import DuplicateResource, DuplicatesResource
from docdedup.interfaces.api.resources.health import HealthResource
from docdedup.interfaces.api.resources.suppressions import SuppressionsResource

logger = logging.getLogger(__name__)


async def _handle_storage_error(req, resp, ex, params) -> None:
    logger.error("Storage error on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Storage unavailable"}


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    documents_resource: DocumentsResource,
    document_content_resource: DocumentContentResource,
    document_scan_resource: DocumentScanResource,
    document_duplicate_resource: DocumentDuplicateResource,
    duplicates_resource: DuplicatesResource,
    duplicate_resource: DuplicateResource,
    suppressions_resource: SuppressionsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_error_handler(StorageError, _handle_storage_error)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id}/content", document_content_resource)
    app.add_route("/v1/documents/{document_id}/scan", document_scan_resource)
    app.add_route(
        "/v1/documents/{document_id}/duplicates/{duplicate_id}",
        document_duplicate_resource,
    )
    app.add_route("/v1/duplicates", duplicates_resource)
    app.add_route("/v1/duplicates/{relationship_id}", duplicate_resource)
    app.add_route("/v1/suppressions", suppressions_resource)
    app.add_route("/v1/suppressions/count", suppressions_resource, suffix="count")
    return app

"""Fixtures for API tests."""

import pytest

from docdedup.application.use_cases.detection.scan_document import ScanDocumentUseCase
from docdedup.application.use_cases.document.register_document import (
    RegisterDocumentUseCase,
)
from docdedup.application.use_cases.document.update_document_hash import (
    UpdateDocumentHashUseCase,
)
from docdedup.interfaces.api.app import create_app
from docdedup.interfaces.api.middleware.auth import OWNER_HEADER, OwnerMiddleware
from docdedup.interfaces.api.resources.documents import (
    DocumentContentResource,
    DocumentDuplicateResource,
    DocumentScanResource,
    DocumentsResource,
)
from docdedup.interfaces.api.resources.duplicates import DuplicateResource, DuplicatesResource
from docdedup.interfaces.api.resources.health import HealthResource
from docdedup.interfaces.api.resources.suppressions import SuppressionsResource

from tests.conftest import OWNER


@pytest.fixture
def app(uow_factory, fingerprinter, event_sink, detector, registry, ledger):
    """Falcon ASGI app wired to the in-memory unit of work."""
    register_document = RegisterDocumentUseCase(
        unit_of_work_factory=uow_factory,
        fingerprinter=fingerprinter,
        event_sink=event_sink,
    )
    update_hash = UpdateDocumentHashUseCase(
        unit_of_work_factory=uow_factory,
        fingerprinter=fingerprinter,
        event_sink=event_sink,
    )
    scan_document = ScanDocumentUseCase(
        unit_of_work_factory=uow_factory,
        detector=detector,
        registry=registry,
    )
    return create_app(
        documents_resource=DocumentsResource(register_document),
        document_content_resource=DocumentContentResource(update_hash),
        document_scan_resource=DocumentScanResource(scan_document),
        document_duplicate_resource=DocumentDuplicateResource(registry),
        duplicates_resource=DuplicatesResource(registry),
        duplicate_resource=DuplicateResource(registry),
        suppressions_resource=SuppressionsResource(ledger),
        health_resource=HealthResource(),
        middleware=[OwnerMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return {OWNER_HEADER: OWNER}

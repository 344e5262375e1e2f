"""Application entry point and composition root."""

import logging

from docdedup import __version__
from docdedup.application.dto.detection_config import DetectionConfig
from docdedup.application.use_cases.corpus.corpus_index import CorpusIndex
from docdedup.application.use_cases.detection.duplicate_detector import DuplicateDetector
from docdedup.application.use_cases.detection.scan_document import ScanDocumentUseCase
from docdedup.application.use_cases.document.register_document import (
    RegisterDocumentUseCase,
)
from docdedup.application.use_cases.document.update_document_hash import (
    UpdateDocumentHashUseCase,
)
from docdedup.application.use_cases.registry.duplicate_registry import DuplicateRegistry
from docdedup.application.use_cases.suppression.suppression_ledger import (
    SuppressionLedger,
)
from docdedup.config import Settings, get_settings
from docdedup.infrastructure.events.activity_log_sink import ActivityLogSink, LoggingEventSink
from docdedup.infrastructure.fingerprinting.md5_fingerprinter import Md5Fingerprinter
from docdedup.infrastructure.persistence.postgres.connection import (
    check_database,
    create_pool,
)
from docdedup.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from docdedup.interfaces.api.app import create_app
from docdedup.interfaces.api.middleware.auth import OwnerMiddleware
from docdedup.interfaces.api.middleware.lifespan import DatabaseLifespanMiddleware
from docdedup.interfaces.api.resources.documents import (
    DocumentContentResource,
    DocumentDuplicateResource,
    DocumentScanResource,
    DocumentsResource,
)
from docdedup.interfaces.api.resources.duplicates import DuplicateResource, DuplicatesResource
from docdedup.interfaces.api.resources.health import HealthResource
from docdedup.interfaces.api.resources.suppressions import SuppressionsResource
from docdedup.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)
    logger.info("docdedup v%s", __version__)
    run_server(settings)


def create_docdedup_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout,
    )
    uow_factory = create_uow_factory(pool)

    fingerprinter = Md5Fingerprinter(settings.fingerprint_mode)
    event_sink = (
        ActivityLogSink(uow_factory) if settings.event_sink == "database" else LoggingEventSink()
    )
    detection_config = DetectionConfig(
        candidate_limit=settings.candidate_limit,
        similarity_threshold=settings.similarity_threshold,
        similar_limit=settings.similar_limit,
    )

    corpus_index = CorpusIndex(uow_factory, candidate_limit=detection_config.candidate_limit)
    suppression_ledger = SuppressionLedger(uow_factory)
    detector = DuplicateDetector(
        corpus_index=corpus_index,
        suppression_ledger=suppression_ledger,
        fingerprinter=fingerprinter,
        event_sink=event_sink,
        config=detection_config,
    )
    registry = DuplicateRegistry(unit_of_work_factory=uow_factory, event_sink=event_sink)

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
        suppressions_resource=SuppressionsResource(suppression_ledger),
        health_resource=HealthResource(ready_check=lambda: check_database(pool)),
        middleware=[DatabaseLifespanMiddleware(pool), OwnerMiddleware()],
    )


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    app = create_docdedup_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()

"""Pytest fixtures for docdedup tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from docdedup.application.dto.detection_config import DetectionConfig
from docdedup.application.use_cases.corpus.corpus_index import CorpusIndex
from docdedup.application.use_cases.detection.duplicate_detector import DuplicateDetector
from docdedup.application.use_cases.registry.duplicate_registry import DuplicateRegistry
from docdedup.application.use_cases.suppression.suppression_ledger import (
    SuppressionLedger,
)
from docdedup.domain.entities import (
    ActivityEvent,
    DocumentRecord,
    DuplicateRelationship,
    SuppressionEntry,
)
from docdedup.domain.value_objects import DuplicateStatus, FingerprintMode
from docdedup.infrastructure.fingerprinting.md5_fingerprinter import Md5Fingerprinter

OWNER = "owner-1"
OTHER_OWNER = "owner-2"

_BASE_TIME = datetime(2025, 1, 1, tzinfo=UTC)


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, DocumentRecord] = {}

    async def get_by_id(self, document_id: UUID) -> DocumentRecord | None:
        return self._by_id.get(document_id)

    async def list_hashed(
        self, owner_id: str, *, exclude_id: UUID | None = None, limit: int = 100
    ) -> list[DocumentRecord]:
        items = [
            d
            for d in self._by_id.values()
            if d.owner_id == owner_id and d.content_hash is not None and d.id != exclude_id
        ]
        items.sort(key=lambda d: (-d.created_at.timestamp(), str(d.id)))
        return items[:limit]

    async def create(self, document: DocumentRecord) -> DocumentRecord:
        self._by_id[document.id] = document
        return document

    async def set_content_hash(
        self, document_id: UUID, owner_id: str, content_hash: str
    ) -> bool:
        doc = self._by_id.get(document_id)
        if not doc or doc.owner_id != owner_id:
            return False
        doc.content_hash = content_hash
        return True

    async def delete(self, document_id: UUID) -> None:
        self._by_id.pop(document_id, None)

    def add(
        self,
        content_hash: str | None,
        *,
        owner_id: str = OWNER,
        name: str | None = None,
        age_minutes: int = 0,
    ) -> DocumentRecord:
        """Helper to seed a document (for tests). Larger age_minutes means older."""
        doc_id = uuid4()
        doc = DocumentRecord(
            id=doc_id,
            owner_id=owner_id,
            name=name or f"doc-{str(doc_id)[:8]}.pdf",
            size=1024,
            created_at=_BASE_TIME - timedelta(minutes=age_minutes),
            file_type="application/pdf",
            content_hash=content_hash,
        )
        self._by_id[doc_id] = doc
        return doc


class FakeSuppressionRepository:
    """In-memory suppression ledger."""

    def __init__(self) -> None:
        self._store: list[SuppressionEntry] = []

    async def create(self, entry: SuppressionEntry) -> SuppressionEntry:
        self._store.append(entry)
        return entry

    async def exists_for_pair(self, owner_id: str, hash_a: str, hash_b: str) -> bool:
        return any(e.owner_id == owner_id and e.matches(hash_a, hash_b) for e in self._store)

    async def list_by_owner(self, owner_id: str) -> list[SuppressionEntry]:
        return [e for e in self._store if e.owner_id == owner_id]

    async def count_by_owner(self, owner_id: str) -> int:
        return len(await self.list_by_owner(owner_id))


class FakeDuplicateRepository:
    """In-memory duplicate relationship repository."""

    def __init__(self, documents_repo: FakeDocumentRepository) -> None:
        self._by_id: dict[UUID, DuplicateRelationship] = {}
        self._documents_repo = documents_repo

    async def get_by_id(self, relationship_id: UUID) -> DuplicateRelationship | None:
        return self._by_id.get(relationship_id)

    async def get_by_pair(
        self, source_document_id: UUID, duplicate_document_id: UUID
    ) -> DuplicateRelationship | None:
        for r in self._by_id.values():
            if (
                r.source_document_id == source_document_id
                and r.duplicate_document_id == duplicate_document_id
            ):
                return r
        return None

    async def list_by_owner(
        self, owner_id: str, *, status: DuplicateStatus | None = None
    ) -> list[DuplicateRelationship]:
        owned = {
            d.id for d in self._documents_repo._by_id.values() if d.owner_id == owner_id
        }
        items = [
            r
            for r in self._by_id.values()
            if (r.source_document_id in owned or r.duplicate_document_id in owned)
            and (status is None or r.status == status)
        ]
        items.sort(key=lambda r: r.created_at, reverse=True)
        return items

    async def create(self, relationship: DuplicateRelationship) -> DuplicateRelationship:
        self._by_id[relationship.id] = relationship
        return relationship

    async def update(self, relationship: DuplicateRelationship) -> None:
        self._by_id[relationship.id] = relationship

    async def delete_for_document(self, document_id: UUID) -> int:
        doomed = [
            r.id
            for r in self._by_id.values()
            if document_id in (r.source_document_id, r.duplicate_document_id)
        ]
        for rid in doomed:
            del self._by_id[rid]
        return len(doomed)


class FakeActivityRepository:
    """In-memory activity log."""

    def __init__(self) -> None:
        self.events: list[ActivityEvent] = []

    async def append(self, event: ActivityEvent) -> None:
        self.events.append(event)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.suppressions = FakeSuppressionRepository()
        self.duplicates = FakeDuplicateRepository(self.documents)
        self.activity = FakeActivityRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


class RecordingEventSink:
    """Event sink that keeps emitted events in memory."""

    def __init__(self) -> None:
        self.events: list[ActivityEvent] = []

    async def emit(self, event: ActivityEvent) -> None:
        self.events.append(event)

    def actions(self) -> list[str]:
        return [str(e.action) for e in self.events]


class FailingEventSink:
    """Event sink whose emit always raises."""

    async def emit(self, event: ActivityEvent) -> None:
        raise RuntimeError("activity log unavailable")


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager around fake_uow (shared state)."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def event_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def fingerprinter() -> Md5Fingerprinter:
    return Md5Fingerprinter(FingerprintMode.TEXT)


@pytest.fixture
def ledger(uow_factory) -> SuppressionLedger:
    return SuppressionLedger(uow_factory)


@pytest.fixture
def corpus_index(uow_factory) -> CorpusIndex:
    return CorpusIndex(uow_factory, candidate_limit=100)


@pytest.fixture
def detector(corpus_index, ledger, fingerprinter, event_sink) -> DuplicateDetector:
    return DuplicateDetector(
        corpus_index=corpus_index,
        suppression_ledger=ledger,
        fingerprinter=fingerprinter,
        event_sink=event_sink,
        config=DetectionConfig(),
    )


@pytest.fixture
def registry(uow_factory, event_sink) -> DuplicateRegistry:
    return DuplicateRegistry(unit_of_work_factory=uow_factory, event_sink=event_sink)

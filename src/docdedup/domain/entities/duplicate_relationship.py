"""Duplicate relationship entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docdedup.domain.value_objects import DuplicateStatus


@dataclass
class DuplicateRelationship:
    """Detected relationship between two specific documents."""

    id: UUID
    source_document_id: UUID
    duplicate_document_id: UUID
    similarity_percentage: int
    status: DuplicateStatus
    created_at: datetime
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    notes: str | None = None

"""Duplicate detection DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CorpusCandidate:
    """A previously ingested, hashed document eligible for comparison."""

    document_id: UUID
    content_hash: str | None
    name: str
    size: int
    created_at: datetime


@dataclass
class ExactMatch:
    """Candidate whose content hash equals the new document's hash."""

    document_id: UUID
    name: str
    size: int
    created_at: datetime
    match_percentage: int = 100


@dataclass
class SimilarMatch:
    """Candidate scoring at or above the similarity threshold."""

    document_id: UUID
    name: str
    size: int
    created_at: datetime
    similarity_score: int


@dataclass
class DuplicateResult:
    """Outcome of one detection scan."""

    exact: list[ExactMatch] = field(default_factory=list)
    similar: list[SimilarMatch] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.exact and not self.similar


@dataclass
class DeletionOutcome:
    """Result of deleting a duplicate document."""

    source_document_id: UUID
    duplicate_document_id: UUID
    suppression_recorded: bool
    relationships_removed: int

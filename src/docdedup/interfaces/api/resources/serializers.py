"""JSON shapes for API responses."""

from docdedup.application.dto.duplicate_dto import (
    DeletionOutcome,
    DuplicateResult,
    ExactMatch,
    SimilarMatch,
)
from docdedup.domain.entities import DocumentRecord, DuplicateRelationship, SuppressionEntry


def document_to_dict(d: DocumentRecord) -> dict:
    return {
        "id": str(d.id),
        "owner_id": d.owner_id,
        "name": d.name,
        "size": d.size,
        "file_type": d.file_type,
        "content_hash": d.content_hash,
        "created_at": d.created_at.isoformat(),
    }


def _exact_to_dict(m: ExactMatch) -> dict:
    return {
        "id": str(m.document_id),
        "file_name": m.name,
        "file_size": m.size,
        "created_at": m.created_at.isoformat(),
        "match_percentage": m.match_percentage,
    }


def _similar_to_dict(m: SimilarMatch) -> dict:
    return {
        "id": str(m.document_id),
        "file_name": m.name,
        "file_size": m.size,
        "created_at": m.created_at.isoformat(),
        "similarity_score": m.similarity_score,
    }


def result_to_dict(r: DuplicateResult) -> dict:
    return {
        "exact": [_exact_to_dict(m) for m in r.exact],
        "similar": [_similar_to_dict(m) for m in r.similar],
    }


def relationship_to_dict(r: DuplicateRelationship) -> dict:
    return {
        "id": str(r.id),
        "source_document_id": str(r.source_document_id),
        "duplicate_document_id": str(r.duplicate_document_id),
        "similarity_percentage": r.similarity_percentage,
        "status": r.status.value,
        "created_at": r.created_at.isoformat(),
        "reviewed_by": r.reviewed_by,
        "reviewed_at": r.reviewed_at.isoformat() if r.reviewed_at else None,
        "notes": r.notes,
    }


def suppression_to_dict(e: SuppressionEntry) -> dict:
    return {
        "id": str(e.id),
        "hash_a": e.hash_a,
        "hash_b": e.hash_b,
        "label_a": e.label_a,
        "label_b": e.label_b,
        "created_at": e.created_at.isoformat(),
        "notes": e.notes,
    }


def deletion_to_dict(o: DeletionOutcome) -> dict:
    return {
        "source_document_id": str(o.source_document_id),
        "duplicate_document_id": str(o.duplicate_document_id),
        "suppression_recorded": o.suppression_recorded,
        "relationships_removed": o.relationships_removed,
    }

"""Duplicate registry - persisted relationships and their review lifecycle."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from docdedup.application.dto.duplicate_dto import DeletionOutcome, DuplicateResult
from docdedup.application.events import emit_quietly
from docdedup.application.ports import EventSink
from docdedup.domain.entities import ActivityEvent, DuplicateRelationship, SuppressionEntry
from docdedup.domain.exceptions import (
    InvalidInput,
    InvalidStatusTransition,
    NotFound,
)
from docdedup.domain.value_objects import ActivityAction, DuplicateStatus

logger = logging.getLogger(__name__)


def _validate_similarity(similarity: object) -> int:
    if isinstance(similarity, bool) or not isinstance(similarity, int):
        raise InvalidInput(f"Similarity must be an integer, got {similarity!r}")
    if not 0 <= similarity <= 100:
        raise InvalidInput(f"Similarity must be within 0..100, got {similarity}")
    return similarity


async def _owned_relationship(
    uow, relationship_id: UUID, owner_id: str
) -> DuplicateRelationship:
    relationship = await uow.duplicates.get_by_id(relationship_id)
    if relationship:
        for document_id in (
            relationship.source_document_id,
            relationship.duplicate_document_id,
        ):
            document = await uow.documents.get_by_id(document_id)
            if document and document.owner_id == owner_id:
                return relationship
    raise NotFound("Duplicate", str(relationship_id))


class DuplicateRegistry:
    """Stores detected duplicate relationships and applies user decisions.

    Deleting a duplicate writes a suppression entry for the two content
    hashes in the same transaction as the document delete, and before it.
    Dismissing only marks the relationship; it does not suppress the hashes.
    """

    def __init__(self, unit_of_work_factory: type, event_sink: EventSink) -> None:
        self._uow_factory = unit_of_work_factory
        self._events = event_sink

    async def record_relationship(
        self,
        source_id: UUID,
        duplicate_id: UUID,
        similarity: int,
        status: DuplicateStatus | str,
    ) -> DuplicateRelationship:
        """Register a detected relationship. Returns the existing one if already known."""
        similarity = _validate_similarity(similarity)
        try:
            status = DuplicateStatus(status)
        except ValueError as e:
            raise InvalidInput(f"Unknown duplicate status: {status!r}") from e
        if not status.is_initial:
            raise InvalidInput(f"Relationships are recorded as exact or similar, not {status}")
        if source_id == duplicate_id:
            raise InvalidInput("A document cannot duplicate itself")

        async with self._uow_factory() as uow:
            existing = await uow.duplicates.get_by_pair(source_id, duplicate_id)
            if existing:
                return existing
            source = await uow.documents.get_by_id(source_id)
            if not source:
                raise NotFound("Document", str(source_id))
            duplicate = await uow.documents.get_by_id(duplicate_id)
            # a relationship never crosses owners
            if not duplicate or duplicate.owner_id != source.owner_id:
                raise NotFound("Document", str(duplicate_id))
            relationship = DuplicateRelationship(
                id=uuid4(),
                source_document_id=source_id,
                duplicate_document_id=duplicate_id,
                similarity_percentage=similarity,
                status=status,
                created_at=datetime.now(UTC),
            )
            await uow.duplicates.create(relationship)
        return relationship

    async def record_result(
        self, source_id: UUID, result: DuplicateResult
    ) -> list[DuplicateRelationship]:
        """Persist a detection result; a document found as exact is not re-recorded as similar."""
        recorded: list[DuplicateRelationship] = []
        seen: set[UUID] = set()
        for match in result.exact:
            recorded.append(
                await self.record_relationship(
                    source_id, match.document_id, match.match_percentage, DuplicateStatus.EXACT
                )
            )
            seen.add(match.document_id)
        for match in result.similar:
            if match.document_id in seen:
                continue
            recorded.append(
                await self.record_relationship(
                    source_id, match.document_id, match.similarity_score, DuplicateStatus.SIMILAR
                )
            )
            seen.add(match.document_id)
        return recorded

    async def get_relationship(
        self, relationship_id: UUID, owner_id: str
    ) -> DuplicateRelationship:
        """Relationship touching one of owner's documents; NotFound otherwise."""
        async with self._uow_factory() as uow:
            return await _owned_relationship(uow, relationship_id, owner_id)

    async def list_relationships(
        self, owner_id: str, status: DuplicateStatus | None = None
    ) -> list[DuplicateRelationship]:
        """Relationships touching any of owner's documents, newest first."""
        async with self._uow_factory() as uow:
            return await uow.duplicates.list_by_owner(owner_id, status=status)

    async def transition_status(
        self,
        relationship_id: UUID,
        new_status: DuplicateStatus | str,
        reviewer_id: str,
        owner_id: str | None = None,
    ) -> DuplicateRelationship:
        """Move a relationship from exact/similar to reviewed or dismissed.

        The relationship must touch one of owner_id's documents; owner_id
        defaults to reviewer_id.
        """
        owner_id = owner_id or reviewer_id
        try:
            relationship = await self._transition(
                relationship_id, new_status, reviewer_id, owner_id
            )
        except Exception as e:
            await emit_quietly(
                self._events,
                ActivityEvent(
                    owner_id=owner_id,
                    action=ActivityAction.STATUS_UPDATE_FAILED,
                    subject_id=relationship_id,
                    entity_type="duplicate",
                    payload={"status": str(new_status), "error": str(e)},
                ),
            )
            raise
        await emit_quietly(
            self._events,
            ActivityEvent(
                owner_id=owner_id,
                action=ActivityAction.STATUS_UPDATED,
                subject_id=relationship_id,
                entity_type="duplicate",
                payload={"status": str(relationship.status)},
            ),
        )
        return relationship

    async def _transition(
        self,
        relationship_id: UUID,
        new_status: DuplicateStatus | str,
        reviewer_id: str,
        owner_id: str,
    ) -> DuplicateRelationship:
        try:
            new_status = DuplicateStatus(new_status)
        except ValueError as e:
            raise InvalidInput(f"Unknown duplicate status: {new_status!r}") from e

        async with self._uow_factory() as uow:
            relationship = await _owned_relationship(uow, relationship_id, owner_id)
            if not relationship.status.can_transition_to(new_status):
                raise InvalidStatusTransition(
                    f"Cannot move duplicate {relationship_id} from {relationship.status} to {new_status}"
                )
            relationship.status = new_status
            relationship.reviewed_by = reviewer_id
            relationship.reviewed_at = datetime.now(UTC)
            await uow.duplicates.update(relationship)
        return relationship

    async def delete_duplicate(
        self, source_id: UUID, duplicate_id: UUID, owner_id: str
    ) -> DeletionOutcome:
        """Delete the duplicate document and remember its hash pair.

        Runs as one transaction: suppression entry first, then every
        relationship referencing the duplicate, then the document itself.
        Errors propagate.
        """
        try:
            outcome = await self._delete(source_id, duplicate_id, owner_id)
        except Exception as e:
            logger.error(
                "Deleting duplicate %s of %s failed: %s", duplicate_id, source_id, e
            )
            await emit_quietly(
                self._events,
                ActivityEvent(
                    owner_id=owner_id,
                    action=ActivityAction.DUPLICATE_DELETION_FAILED,
                    subject_id=duplicate_id,
                    payload={"source_document_id": str(source_id), "error": str(e)},
                ),
            )
            raise
        await emit_quietly(
            self._events,
            ActivityEvent(
                owner_id=owner_id,
                action=ActivityAction.DUPLICATE_DELETED,
                subject_id=duplicate_id,
                payload={
                    "source_document_id": str(source_id),
                    "suppression_recorded": outcome.suppression_recorded,
                },
            ),
        )
        return outcome

    async def _delete(
        self, source_id: UUID, duplicate_id: UUID, owner_id: str
    ) -> DeletionOutcome:
        async with self._uow_factory() as uow:
            duplicate = await uow.documents.get_by_id(duplicate_id)
            if not duplicate or duplicate.owner_id != owner_id:
                raise NotFound("Document", str(duplicate_id))
            source = await uow.documents.get_by_id(source_id)
            if not source or source.owner_id != owner_id:
                raise NotFound("Document", str(source_id))

            suppression_recorded = False
            if source.content_hash and duplicate.content_hash:
                await uow.suppressions.create(
                    SuppressionEntry(
                        id=uuid4(),
                        owner_id=owner_id,
                        hash_a=source.content_hash,
                        hash_b=duplicate.content_hash,
                        label_a=source.name,
                        label_b=duplicate.name,
                        created_at=datetime.now(UTC),
                    )
                )
                suppression_recorded = True
            else:
                logger.info(
                    "No suppression recorded for %s/%s: content hash missing",
                    source_id,
                    duplicate_id,
                )

            removed = await uow.duplicates.delete_for_document(duplicate_id)
            await uow.documents.delete(duplicate_id)

        return DeletionOutcome(
            source_document_id=source_id,
            duplicate_document_id=duplicate_id,
            suppression_recorded=suppression_recorded,
            relationships_removed=removed,
        )

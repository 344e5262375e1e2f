"""Scan document use case."""

from dataclasses import dataclass, field
from uuid import UUID

from docdedup.application.dto.duplicate_dto import DuplicateResult
from docdedup.application.use_cases.detection.duplicate_detector import DuplicateDetector
from docdedup.application.use_cases.registry.duplicate_registry import DuplicateRegistry
from docdedup.domain.entities import DuplicateRelationship
from docdedup.domain.exceptions import InvalidInput, NotFound
from docdedup.domain.value_objects import ContentHash


@dataclass
class ScanOutput:
    """Detection result plus any relationships persisted from it."""

    result: DuplicateResult
    recorded: list[DuplicateRelationship] = field(default_factory=list)


class ScanDocumentUseCase:
    """Run duplicate detection for one of owner's documents.

    Uses the supplied hash, or the document's stored hash. With record=True
    the matches are persisted into the duplicate registry.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        detector: DuplicateDetector,
        registry: DuplicateRegistry,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._detector = detector
        self._registry = registry

    async def execute(
        self,
        owner_id: str,
        document_id: UUID,
        content_hash: str | None = None,
        record: bool = False,
    ) -> ScanOutput:
        """Scan document for duplicates."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
        if not document or document.owner_id != owner_id:
            raise NotFound("Document", str(document_id))

        new_hash = content_hash or document.content_hash
        if not new_hash:
            raise InvalidInput(f"Document {document_id} has no content hash yet")
        try:
            ContentHash(new_hash)
        except ValueError as e:
            raise InvalidInput(str(e)) from e

        result = await self._detector.detect(owner_id, new_hash, document_id)
        recorded: list[DuplicateRelationship] = []
        if record and not result.is_empty:
            recorded = await self._registry.record_result(document_id, result)
        return ScanOutput(result=result, recorded=recorded)

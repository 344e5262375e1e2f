"""Corpus index - owner-scoped comparison candidates."""

from uuid import UUID

from docdedup.application.dto.duplicate_dto import CorpusCandidate


class CorpusIndex:
    """Supplies hashed documents of an owner for duplicate comparison.

    Documents still waiting for their hash are not candidates. Results are
    capped at candidate_limit, newest first.
    """

    def __init__(self, unit_of_work_factory: type, candidate_limit: int = 100) -> None:
        self._uow_factory = unit_of_work_factory
        self._limit = candidate_limit

    async def candidates(
        self, owner_id: str, exclude_document_id: UUID | None
    ) -> list[CorpusCandidate]:
        async with self._uow_factory() as uow:
            documents = await uow.documents.list_hashed(
                owner_id, exclude_id=exclude_document_id, limit=self._limit
            )
        return [
            CorpusCandidate(
                document_id=d.id,
                content_hash=d.content_hash,
                name=d.name,
                size=d.size,
                created_at=d.created_at,
            )
            for d in documents
        ]

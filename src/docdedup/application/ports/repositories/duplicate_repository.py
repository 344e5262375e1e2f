"""Duplicate relationship repository port."""

from typing import Protocol
from uuid import UUID

from docdedup.domain.entities import DuplicateRelationship
from docdedup.domain.value_objects import DuplicateStatus


class DuplicateRepository(Protocol):
    """Port for duplicate relationship persistence."""

    async def get_by_id(self, relationship_id: UUID) -> DuplicateRelationship | None: ...

    async def get_by_pair(
        self, source_document_id: UUID, duplicate_document_id: UUID
    ) -> DuplicateRelationship | None: ...

    async def list_by_owner(
        self, owner_id: str, *, status: DuplicateStatus | None = None
    ) -> list[DuplicateRelationship]: ...

    async def create(self, relationship: DuplicateRelationship) -> DuplicateRelationship: ...

    async def update(self, relationship: DuplicateRelationship) -> None: ...

    async def delete_for_document(self, document_id: UUID) -> int: ...

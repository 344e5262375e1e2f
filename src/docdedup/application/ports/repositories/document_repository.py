"""Document repository port."""

from typing import Protocol
from uuid import UUID

from docdedup.domain.entities import DocumentRecord


class DocumentRepository(Protocol):
    """Port for document record persistence."""

    async def get_by_id(self, document_id: UUID) -> DocumentRecord | None: ...

    async def list_hashed(
        self, owner_id: str, *, exclude_id: UUID | None = None, limit: int = 100
    ) -> list[DocumentRecord]: ...

    async def create(self, document: DocumentRecord) -> DocumentRecord: ...

    async def set_content_hash(
        self, document_id: UUID, owner_id: str, content_hash: str
    ) -> bool: ...

    async def delete(self, document_id: UUID) -> None: ...

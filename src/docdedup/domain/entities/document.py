"""Document record entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class DocumentRecord:
    """Ingested document. content_hash stays None until hashing completes."""

    id: UUID
    owner_id: str
    name: str
    size: int
    created_at: datetime
    file_type: str = ""
    content_hash: str | None = None

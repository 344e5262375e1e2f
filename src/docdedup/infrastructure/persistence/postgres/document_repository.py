"""PostgreSQL document repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from docdedup.domain.entities import DocumentRecord

_COLUMNS = "id, owner_id, name, size, file_type, created_at, content_hash"


def _row_to_document(r: tuple) -> DocumentRecord:
    return DocumentRecord(
        id=r[0],
        owner_id=r[1],
        name=r[2],
        size=r[3],
        file_type=r[4],
        created_at=r[5],
        content_hash=r[6],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> DocumentRecord | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def list_hashed(
        self, owner_id: str, *, exclude_id: UUID | None = None, limit: int = 100
    ) -> list[DocumentRecord]:
        """Owner's documents that already carry a content hash, newest first."""
        conditions = ["owner_id = %s", "content_hash IS NOT NULL"]
        params: list[object] = [owner_id]
        if exclude_id is not None:
            conditions.append("id <> %s")
            params.append(exclude_id)
        params.append(limit)
        q = (
            f"SELECT {_COLUMNS} FROM document WHERE {' AND '.join(conditions)} "
            "ORDER BY created_at DESC, id LIMIT %s"
        )
        cur = await self._conn.execute(q, tuple(params))
        rows = await cur.fetchall()
        return [_row_to_document(r) for r in rows]

    async def create(self, document: DocumentRecord) -> DocumentRecord:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.owner_id,
                document.name,
                document.size,
                document.file_type,
                document.created_at,
                document.content_hash,
            ),
        )
        return document

    async def set_content_hash(
        self, document_id: UUID, owner_id: str, content_hash: str
    ) -> bool:
        """Attach content hash. Returns False when no such document for owner."""
        cur = await self._conn.execute(
            "UPDATE document SET content_hash = %s WHERE id = %s AND owner_id = %s",
            (content_hash, document_id, owner_id),
        )
        return cur.rowcount > 0

    async def delete(self, document_id: UUID) -> None:
        """Delete document. Relationships cascade."""
        await self._conn.execute("DELETE FROM document WHERE id = %s", (document_id,))

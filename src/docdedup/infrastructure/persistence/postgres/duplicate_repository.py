"""PostgreSQL duplicate relationship repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from docdedup.domain.entities import DuplicateRelationship
from docdedup.domain.value_objects import DuplicateStatus

_COLUMNS = (
    "r.id, r.source_document_id, r.duplicate_document_id, r.similarity_percentage, "
    "r.status, r.created_at, r.reviewed_by, r.reviewed_at, r.notes"
)


def _row_to_relationship(r: tuple) -> DuplicateRelationship:
    return DuplicateRelationship(
        id=r[0],
        source_document_id=r[1],
        duplicate_document_id=r[2],
        similarity_percentage=r[3],
        status=DuplicateStatus(r[4]),
        created_at=r[5],
        reviewed_by=r[6],
        reviewed_at=r[7],
        notes=r[8],
    )


class PostgresDuplicateRepository:
    """Duplicate relationship repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, relationship_id: UUID) -> DuplicateRelationship | None:
        """Get relationship by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM duplicate_relationship r WHERE r.id = %s",
            (relationship_id,),
        )
        r = await cur.fetchone()
        return _row_to_relationship(r) if r else None

    async def get_by_pair(
        self, source_document_id: UUID, duplicate_document_id: UUID
    ) -> DuplicateRelationship | None:
        """Get relationship by (source, duplicate)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM duplicate_relationship r "
            "WHERE r.source_document_id = %s AND r.duplicate_document_id = %s",
            (source_document_id, duplicate_document_id),
        )
        r = await cur.fetchone()
        return _row_to_relationship(r) if r else None

    async def list_by_owner(
        self, owner_id: str, *, status: DuplicateStatus | None = None
    ) -> list[DuplicateRelationship]:
        """Relationships where either document belongs to owner, newest first."""
        q = (
            f"SELECT {_COLUMNS} FROM duplicate_relationship r "
            "JOIN document s ON s.id = r.source_document_id "
            "JOIN document d ON d.id = r.duplicate_document_id "
            "WHERE (s.owner_id = %s OR d.owner_id = %s)"
        )
        params: list[object] = [owner_id, owner_id]
        if status is not None:
            q += " AND r.status = %s"
            params.append(status.value)
        q += " ORDER BY r.created_at DESC, r.id"
        cur = await self._conn.execute(q, tuple(params))
        rows = await cur.fetchall()
        return [_row_to_relationship(r) for r in rows]

    async def create(self, relationship: DuplicateRelationship) -> DuplicateRelationship:
        """Create relationship."""
        await self._conn.execute(
            "INSERT INTO duplicate_relationship (id, source_document_id, duplicate_document_id, "
            "similarity_percentage, status, created_at, reviewed_by, reviewed_at, notes) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                relationship.id,
                relationship.source_document_id,
                relationship.duplicate_document_id,
                relationship.similarity_percentage,
                relationship.status.value,
                relationship.created_at,
                relationship.reviewed_by,
                relationship.reviewed_at,
                relationship.notes,
            ),
        )
        return relationship

    async def update(self, relationship: DuplicateRelationship) -> None:
        """Update status and review fields."""
        await self._conn.execute(
            "UPDATE duplicate_relationship SET status = %s, reviewed_by = %s, "
            "reviewed_at = %s, notes = %s WHERE id = %s",
            (
                relationship.status.value,
                relationship.reviewed_by,
                relationship.reviewed_at,
                relationship.notes,
                relationship.id,
            ),
        )

    async def delete_for_document(self, document_id: UUID) -> int:
        """Delete relationships referencing document on either side."""
        cur = await self._conn.execute(
            "DELETE FROM duplicate_relationship "
            "WHERE source_document_id = %s OR duplicate_document_id = %s",
            (document_id, document_id),
        )
        return cur.rowcount

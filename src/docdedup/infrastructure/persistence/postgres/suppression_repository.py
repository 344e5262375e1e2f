"""PostgreSQL suppression entry repository implementation."""

from psycopg import AsyncConnection

from docdedup.domain.entities import SuppressionEntry

_COLUMNS = "id, owner_id, hash_a, hash_b, label_a, label_b, created_at, notes"


def _row_to_entry(r: tuple) -> SuppressionEntry:
    return SuppressionEntry(
        id=r[0],
        owner_id=r[1],
        hash_a=r[2],
        hash_b=r[3],
        label_a=r[4],
        label_b=r[5],
        created_at=r[6],
        notes=r[7],
    )


class PostgresSuppressionRepository:
    """Suppression entry repository implementation (insert-only)."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: SuppressionEntry) -> SuppressionEntry:
        """Insert entry."""
        await self._conn.execute(
            f"INSERT INTO suppression_entry ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.owner_id,
                entry.hash_a,
                entry.hash_b,
                entry.label_a,
                entry.label_b,
                entry.created_at,
                entry.notes,
            ),
        )
        return entry

    async def exists_for_pair(self, owner_id: str, hash_a: str, hash_b: str) -> bool:
        """Check pair in either order."""
        cur = await self._conn.execute(
            "SELECT EXISTS (SELECT 1 FROM suppression_entry WHERE owner_id = %s AND ("
            "(hash_a = %s AND hash_b = %s) OR (hash_a = %s AND hash_b = %s)))",
            (owner_id, hash_a, hash_b, hash_b, hash_a),
        )
        r = await cur.fetchone()
        return bool(r[0])

    async def list_by_owner(self, owner_id: str) -> list[SuppressionEntry]:
        """All entries for owner, oldest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM suppression_entry WHERE owner_id = %s "
            "ORDER BY created_at, id",
            (owner_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_entry(r) for r in rows]

    async def count_by_owner(self, owner_id: str) -> int:
        """Number of entries for owner."""
        cur = await self._conn.execute(
            "SELECT COUNT(*) FROM suppression_entry WHERE owner_id = %s", (owner_id,)
        )
        r = await cur.fetchone()
        return int(r[0])

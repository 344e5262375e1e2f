"""PostgreSQL activity event repository implementation."""

from uuid import uuid4

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from docdedup.domain.entities import ActivityEvent


class PostgresActivityRepository:
    """Append-only activity log."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, event: ActivityEvent) -> None:
        await self._conn.execute(
            "INSERT INTO activity_event (id, owner_id, action, entity_type, subject_id, "
            "payload, created_at) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                uuid4(),
                event.owner_id,
                event.action.value,
                event.entity_type,
                event.subject_id,
                Jsonb(event.payload),
                event.created_at,
            ),
        )

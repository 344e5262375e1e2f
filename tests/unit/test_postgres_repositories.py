"""Unit tests for PostgreSQL repositories against a recording connection."""

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import uuid4

import psycopg
import pytest

from docdedup.domain.exceptions import StorageError
from docdedup.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from docdedup.infrastructure.persistence.postgres.suppression_repository import (
    PostgresSuppressionRepository,
)
from docdedup.infrastructure.persistence.postgres.unit_of_work import create_uow_factory


class _Cursor:
    def __init__(self, rows: list[tuple], rowcount: int) -> None:
        self._rows = rows
        self.rowcount = rowcount

    async def fetchone(self):
        return self._rows[0] if self._rows else None

    async def fetchall(self):
        return self._rows


class RecordingConnection:
    """Captures executed SQL and returns canned rows."""

    def __init__(self, rows: list[tuple] | None = None, rowcount: int = 0) -> None:
        self.rows = rows or []
        self.rowcount = rowcount
        self.calls: list[tuple[str, tuple]] = []

    async def execute(self, query: str, params: tuple = ()):
        self.calls.append((query, params))
        return _Cursor(self.rows, self.rowcount)


class TestPostgresDocumentRepository:
    """Query shape of the corpus listing."""

    @pytest.mark.asyncio
    async def test_list_hashed_excludes_and_limits(self) -> None:
        conn = RecordingConnection()
        exclude = uuid4()

        await PostgresDocumentRepository(conn).list_hashed("o1", exclude_id=exclude, limit=100)

        query, params = conn.calls[0]
        assert "content_hash IS NOT NULL" in query
        assert "id <> %s" in query
        assert query.endswith("ORDER BY created_at DESC, id LIMIT %s")
        assert params == ("o1", exclude, 100)

    @pytest.mark.asyncio
    async def test_list_hashed_without_exclude(self) -> None:
        conn = RecordingConnection()

        await PostgresDocumentRepository(conn).list_hashed("o1", limit=10)

        query, params = conn.calls[0]
        assert "id <>" not in query
        assert params == ("o1", 10)

    @pytest.mark.asyncio
    async def test_row_mapping(self) -> None:
        doc_id = uuid4()
        created = datetime(2025, 1, 1, tzinfo=UTC)
        conn = RecordingConnection(
            rows=[(doc_id, "o1", "a.pdf", 10, "application/pdf", created, "abc")]
        )

        doc = await PostgresDocumentRepository(conn).get_by_id(doc_id)

        assert doc.id == doc_id
        assert doc.name == "a.pdf"
        assert doc.content_hash == "abc"

    @pytest.mark.asyncio
    async def test_set_content_hash_reports_missing_row(self) -> None:
        repo = PostgresDocumentRepository(RecordingConnection(rowcount=0))
        assert await repo.set_content_hash(uuid4(), "o1", "abc") is False

        repo = PostgresDocumentRepository(RecordingConnection(rowcount=1))
        assert await repo.set_content_hash(uuid4(), "o1", "abc") is True


class TestPostgresSuppressionRepository:
    @pytest.mark.asyncio
    async def test_exists_for_pair_checks_both_orders(self) -> None:
        conn = RecordingConnection(rows=[(True,)])

        assert await PostgresSuppressionRepository(conn).exists_for_pair("o1", "aa", "bb")

        _, params = conn.calls[0]
        assert params == ("o1", "aa", "bb", "bb", "aa")


class _BrokenPool:
    def connection(self):
        @asynccontextmanager
        async def _cm():
            raise psycopg.OperationalError("server closed the connection")
            yield

        return _cm()


@pytest.mark.asyncio
async def test_uow_factory_wraps_database_errors() -> None:
    factory = create_uow_factory(_BrokenPool())

    with pytest.raises(StorageError, match="server closed"):
        async with factory():
            pass

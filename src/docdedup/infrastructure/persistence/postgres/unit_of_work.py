"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from docdedup.domain.exceptions import StorageError
from docdedup.infrastructure.persistence.postgres.activity_repository import (
    PostgresActivityRepository,
)
from docdedup.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from docdedup.infrastructure.persistence.postgres.duplicate_repository import (
    PostgresDuplicateRepository,
)
from docdedup.infrastructure.persistence.postgres.suppression_repository import (
    PostgresSuppressionRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: psycopg.AsyncConnection | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._documents = PostgresDocumentRepository(self._conn)
        self._suppressions = PostgresSuppressionRepository(self._conn)
        self._duplicates = PostgresDuplicateRepository(self._conn)
        self._activity = PostgresActivityRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    @property
    def suppressions(self) -> PostgresSuppressionRepository:
        return self._suppressions

    @property
    def duplicates(self) -> PostgresDuplicateRepository:
        return self._duplicates

    @property
    def activity(self) -> PostgresActivityRepository:
        return self._activity

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Database errors, including pool timeouts, surface as StorageError.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            uow = PostgresUnitOfWork(pool)
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            raise StorageError(str(e)) from e

    return factory

"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from docdedup.application.ports.repositories import (
    ActivityRepository,
    DocumentRepository,
    DuplicateRepository,
    SuppressionRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def suppressions(self) -> SuppressionRepository: ...

    @property
    def duplicates(self) -> DuplicateRepository: ...

    @property
    def activity(self) -> ActivityRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...

"""Suppression entry repository port."""

from typing import Protocol

from docdedup.domain.entities import SuppressionEntry


class SuppressionRepository(Protocol):
    """Port for suppression ledger persistence. Entries are insert-only."""

    async def create(self, entry: SuppressionEntry) -> SuppressionEntry: ...

    async def exists_for_pair(self, owner_id: str, hash_a: str, hash_b: str) -> bool: ...

    async def list_by_owner(self, owner_id: str) -> list[SuppressionEntry]: ...

    async def count_by_owner(self, owner_id: str) -> int: ...

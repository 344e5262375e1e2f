"""Suppression ledger - permanent memory of deleted duplicate pairs."""

from datetime import UTC, datetime
from uuid import uuid4

from docdedup.domain.entities import SuppressionEntry


class SuppressionLedger:
    """Records and queries unordered content-hash pairs per owner."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def record(
        self,
        owner_id: str,
        hash_a: str,
        hash_b: str,
        label_a: str,
        label_b: str,
        note: str | None = None,
    ) -> SuppressionEntry:
        """Insert a suppression entry. Repeated pairs are stored again."""
        entry = SuppressionEntry(
            id=uuid4(),
            owner_id=owner_id,
            hash_a=hash_a,
            hash_b=hash_b,
            label_a=label_a,
            label_b=label_b,
            created_at=datetime.now(UTC),
            notes=note,
        )
        async with self._uow_factory() as uow:
            await uow.suppressions.create(entry)
        return entry

    async def is_suppressed(self, owner_id: str, hash_a: str, hash_b: str) -> bool:
        """Check whether {hash_a, hash_b} was suppressed for owner, in either order."""
        async with self._uow_factory() as uow:
            return await uow.suppressions.exists_for_pair(owner_id, hash_a, hash_b)

    async def entries(self, owner_id: str) -> list[SuppressionEntry]:
        """All suppression entries for owner."""
        async with self._uow_factory() as uow:
            return await uow.suppressions.list_by_owner(owner_id)

    async def count(self, owner_id: str) -> int:
        """Number of entries for owner (reporting only)."""
        async with self._uow_factory() as uow:
            return await uow.suppressions.count_by_owner(owner_id)

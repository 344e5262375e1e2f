"""Suppression entry entity - remembered deletion of a duplicate pair."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SuppressionEntry:
    """Unordered content-hash pair that must not be reported again for an owner."""

    id: UUID
    owner_id: str
    hash_a: str
    hash_b: str
    label_a: str
    label_b: str
    created_at: datetime
    notes: str | None = None

    @property
    def pair(self) -> frozenset[str]:
        return frozenset((self.hash_a, self.hash_b))

    def matches(self, hash_a: str, hash_b: str) -> bool:
        """True if {hash_a, hash_b} equals this entry's pair, in either order."""
        return (self.hash_a == hash_a and self.hash_b == hash_b) or (
            self.hash_a == hash_b and self.hash_b == hash_a
        )

"""Activity event repository port."""

from typing import Protocol

from docdedup.domain.entities import ActivityEvent


class ActivityRepository(Protocol):
    """Port for the append-only activity log."""

    async def append(self, event: ActivityEvent) -> None: ...

"""Event sink port - append-only activity log."""

from typing import Protocol

from docdedup.domain.entities import ActivityEvent


class EventSink(Protocol):
    """Port for emitting activity events."""

    async def emit(self, event: ActivityEvent) -> None: ...

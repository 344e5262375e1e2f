"""Best-effort activity event emission."""

import logging

from docdedup.application.ports import EventSink
from docdedup.domain.entities import ActivityEvent

logger = logging.getLogger(__name__)


async def emit_quietly(sink: EventSink, event: ActivityEvent) -> None:
    """Emit event; a failing sink is logged and never propagates."""
    try:
        await sink.emit(event)
    except Exception:
        logger.warning(
            "Failed to emit activity event %r for owner %s",
            str(event.action),
            event.owner_id,
            exc_info=True,
        )

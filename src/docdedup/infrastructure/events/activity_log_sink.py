"""Activity log event sinks."""

import logging

from docdedup.domain.entities import ActivityEvent

logger = logging.getLogger(__name__)


class ActivityLogSink:
    """Writes events to the activity log in a transaction of their own."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def emit(self, event: ActivityEvent) -> None:
        async with self._uow_factory() as uow:
            await uow.activity.append(event)


class LoggingEventSink:
    """Writes events to the application log only (no database)."""

    async def emit(self, event: ActivityEvent) -> None:
        logger.info(
            "%s owner=%s subject=%s payload=%s",
            event.action,
            event.owner_id,
            event.subject_id,
            event.payload,
        )

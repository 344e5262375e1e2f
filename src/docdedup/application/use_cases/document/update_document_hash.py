"""Update document hash use case."""

from uuid import UUID

from docdedup.application.events import emit_quietly
from docdedup.application.ports import EventSink, Fingerprinter
from docdedup.domain.entities import ActivityEvent
from docdedup.domain.exceptions import NotFound
from docdedup.domain.value_objects import ActivityAction


class UpdateDocumentHashUseCase:
    """Fingerprint uploaded content and attach the hash to its document."""

    def __init__(
        self,
        unit_of_work_factory: type,
        fingerprinter: Fingerprinter,
        event_sink: EventSink,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._fingerprinter = fingerprinter
        self._events = event_sink

    async def execute(self, owner_id: str, document_id: UUID, content: bytes) -> str:
        """Attach hash of content to owner's document. Returns the hash."""
        try:
            content_hash = self._fingerprinter.fingerprint(content)
            async with self._uow_factory() as uow:
                updated = await uow.documents.set_content_hash(
                    document_id, owner_id, content_hash
                )
                if not updated:
                    raise NotFound("Document", str(document_id))
        except Exception as e:
            await emit_quietly(
                self._events,
                ActivityEvent(
                    owner_id=owner_id,
                    action=ActivityAction.HASH_UPDATE_FAILED,
                    subject_id=document_id,
                    payload={"error": str(e)},
                ),
            )
            raise

        await emit_quietly(
            self._events,
            ActivityEvent(
                owner_id=owner_id,
                action=ActivityAction.HASH_UPDATED,
                subject_id=document_id,
                payload={"content_hash": content_hash[:10] + "..."},
            ),
        )
        return content_hash

"""Register document use case."""

from datetime import UTC, datetime
from uuid import uuid4

from docdedup.application.dto.document_dto import DocumentRegisterInput
from docdedup.application.events import emit_quietly
from docdedup.application.ports import EventSink, Fingerprinter
from docdedup.domain.entities import ActivityEvent, DocumentRecord
from docdedup.domain.exceptions import InvalidInput
from docdedup.domain.value_objects import ActivityAction


class RegisterDocumentUseCase:
    """Create a document record for an ingested artifact.

    When the content is supplied the hash is attached in the same
    transaction; otherwise the document stays invisible to detection until
    UpdateDocumentHashUseCase runs.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        fingerprinter: Fingerprinter,
        event_sink: EventSink,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._fingerprinter = fingerprinter
        self._events = event_sink

    async def execute(self, owner_id: str, input_data: DocumentRegisterInput) -> DocumentRecord:
        """Register document for owner."""
        if not input_data.name or not input_data.name.strip():
            raise InvalidInput("Document name is required")
        if input_data.size < 0:
            raise InvalidInput("Document size must not be negative")

        content_hash = None
        if input_data.content is not None:
            content_hash = self._fingerprinter.fingerprint(input_data.content)

        document = DocumentRecord(
            id=uuid4(),
            owner_id=owner_id,
            name=input_data.name,
            size=input_data.size,
            file_type=input_data.file_type,
            created_at=datetime.now(UTC),
            content_hash=content_hash,
        )
        async with self._uow_factory() as uow:
            await uow.documents.create(document)

        await emit_quietly(
            self._events,
            ActivityEvent(
                owner_id=owner_id,
                action=ActivityAction.DOCUMENT_REGISTERED,
                subject_id=document.id,
                payload={
                    "file_name": document.name,
                    "file_size": document.size,
                    "hashed": content_hash is not None,
                },
            ),
        )
        return document

"""Domain entities."""

from docdedup.domain.entities.activity_event import ActivityEvent
from docdedup.domain.entities.document import DocumentRecord
from docdedup.domain.entities.duplicate_relationship import DuplicateRelationship
from docdedup.domain.entities.suppression_entry import SuppressionEntry

__all__ = [
    "ActivityEvent",
    "DocumentRecord",
    "DuplicateRelationship",
    "SuppressionEntry",
]

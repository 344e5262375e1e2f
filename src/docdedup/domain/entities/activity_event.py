"""Activity event entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from docdedup.domain.value_objects import ActivityAction


@dataclass
class ActivityEvent:
    """One append-only activity log record."""

    owner_id: str
    action: ActivityAction
    subject_id: UUID | None
    payload: dict[str, Any] = field(default_factory=dict)
    entity_type: str = "document"
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

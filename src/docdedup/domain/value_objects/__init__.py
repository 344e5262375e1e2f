"""Domain value objects."""

from docdedup.domain.value_objects.activity_action import ActivityAction
from docdedup.domain.value_objects.content_hash import ContentHash
from docdedup.domain.value_objects.duplicate_status import DuplicateStatus
from docdedup.domain.value_objects.fingerprint_mode import FingerprintMode

__all__ = [
    "ActivityAction",
    "ContentHash",
    "DuplicateStatus",
    "FingerprintMode",
]

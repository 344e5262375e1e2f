"""Activity event actions."""

from enum import StrEnum


class ActivityAction(StrEnum):
    """Actions written to the activity log."""

    DOCUMENT_REGISTERED = "Document Registered"
    HASH_UPDATED = "Document Hash Updated"
    HASH_UPDATE_FAILED = "Document Hash Update Failed"
    CHECK_COMPLETED = "Duplicate Check Completed"
    CHECK_FAILED = "Duplicate Check Failed"
    DUPLICATE_DELETED = "Duplicate Document Deleted"
    DUPLICATE_DELETION_FAILED = "Duplicate Document Deletion Failed"
    STATUS_UPDATED = "Duplicate Status Updated"
    STATUS_UPDATE_FAILED = "Duplicate Status Update Failed"

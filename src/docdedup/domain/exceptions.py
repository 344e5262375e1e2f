"""Domain exceptions."""


class DocDedupError(Exception):
    """Base exception for docdedup."""

    pass


class StorageError(DocDedupError):
    """Durable store is unreachable or rejected a read/write."""

    pass


class InvalidInput(DocDedupError):
    """Input rejected before any write occurred."""

    pass


class InvalidStatusTransition(InvalidInput):
    """Duplicate relationship cannot move to the requested status."""

    pass


class NotFound(DocDedupError):
    """Requested resource was not found (or belongs to another owner)."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class InconsistentState(DocDedupError):
    """Upstream contract violated, e.g. an unhashed document reached the detector."""

    pass

"""Repository ports."""

from docdedup.application.ports.repositories.activity_repository import (
    ActivityRepository,
)
from docdedup.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from docdedup.application.ports.repositories.duplicate_repository import (
    DuplicateRepository,
)
from docdedup.application.ports.repositories.suppression_repository import (
    SuppressionRepository,
)

__all__ = [
    "ActivityRepository",
    "DocumentRepository",
    "DuplicateRepository",
    "SuppressionRepository",
]

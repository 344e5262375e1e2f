"""Document DTOs."""

from dataclasses import dataclass


@dataclass
class DocumentRegisterInput:
    """Input for registering an ingested document."""

    name: str
    size: int
    file_type: str = ""
    content: bytes | None = None

"""Content hash value object."""

import re
from dataclasses import dataclass

_HEX = re.compile(r"^[0-9a-f]+$")


@dataclass(frozen=True)
class ContentHash:
    """Fingerprint of a document's byte content (lowercase hex)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Content hash must be a non-empty string")
        if not _HEX.match(self.value):
            raise ValueError("Content hash must be lowercase hexadecimal")

    def __str__(self) -> str:
        return self.value

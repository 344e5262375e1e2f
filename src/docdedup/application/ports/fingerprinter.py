"""Fingerprinter port - content hashing."""

from typing import Protocol


class Fingerprinter(Protocol):
    """Port for computing a deterministic content hash over bytes."""

    def fingerprint(self, content: bytes) -> str: ...

"""MD5 content fingerprinter."""

import hashlib

from docdedup.domain.exceptions import InvalidInput
from docdedup.domain.value_objects import FingerprintMode


def _legacy_text(content: bytes) -> bytes:
    """Comma-joined decimal byte values, e.g. b"\\x01\\xff" -> b"1,255"."""
    return ",".join(str(b) for b in content).encode("utf-8")


class Md5Fingerprinter:
    """32-character lowercase hex MD5 fingerprint.

    Not a security boundary; MD5 is used for practical uniqueness only.
    """

    def __init__(self, mode: FingerprintMode = FingerprintMode.TEXT) -> None:
        self._mode = FingerprintMode(mode)

    @property
    def mode(self) -> FingerprintMode:
        return self._mode

    def fingerprint(self, content: bytes) -> str:
        """Hash content. Empty content is valid."""
        if not isinstance(content, bytes | bytearray | memoryview):
            raise InvalidInput(
                f"Fingerprint input must be bytes, got {type(content).__name__}"
            )
        data = bytes(content)
        if self._mode is FingerprintMode.TEXT:
            data = _legacy_text(data)
        return hashlib.md5(data).hexdigest()

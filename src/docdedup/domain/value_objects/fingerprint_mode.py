"""Fingerprint input encoding."""

from enum import StrEnum


class FingerprintMode(StrEnum):
    """How bytes are fed to the hash function.

    TEXT hashes the comma-joined decimal byte values, which is what every
    previously stored hash was computed from. RAW hashes the bytes directly.
    """

    TEXT = "text"
    RAW = "raw"

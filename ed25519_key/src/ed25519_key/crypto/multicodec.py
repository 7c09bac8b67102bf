"""Multicodec varint headers for Ed25519 key material.

The header values come from the multicodec registry
(https://github.com/multiformats/multicodec) and must not change:
``ed25519-pub`` is ``0xed`` and ``ed25519-priv`` is ``0x1300``, both
written as unsigned varints.
"""
from __future__ import annotations

from ..core.exceptions import ValidationError

MULTICODEC_ED25519_PUB_HEADER = bytes([0xED, 0x01])
MULTICODEC_ED25519_PRIV_HEADER = bytes([0x80, 0x26])


def attach_tag(header: bytes, raw_key: bytes) -> bytes:
    return bytes(header) + bytes(raw_key)


def has_tag(candidate: bytes, expected_header: bytes) -> bool:
    """Return ``True`` if ``candidate`` starts with ``expected_header``.

    Never raises: short input or a non-bytes value simply does not match.
    """

    if not isinstance(candidate, (bytes, bytearray, memoryview)):
        return False
    if len(candidate) < len(expected_header):
        return False
    return all(candidate[i] == value for i, value in enumerate(expected_header))


def strip_tag(candidate: bytes, expected_header: bytes) -> bytes:
    if not has_tag(candidate, expected_header):
        raise ValidationError(
            f"Expected multicodec header 0x{bytes(expected_header).hex()}",
            code="invalidKeyHeader",
        )
    return bytes(candidate[len(expected_header):])


__all__ = [
    "MULTICODEC_ED25519_PUB_HEADER",
    "MULTICODEC_ED25519_PRIV_HEADER",
    "attach_tag",
    "has_tag",
    "strip_tag",
]

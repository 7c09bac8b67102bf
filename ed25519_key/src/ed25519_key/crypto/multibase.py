"""Multibase base58-btc envelope.

Only the ``z`` (base58-btc, Bitcoin alphabet) encoding is produced or
accepted; any other multibase prefix is reported as a :class:`FormatError`.
"""
from __future__ import annotations

import base58

from ..core.exceptions import FormatError
from .multicodec import attach_tag, strip_tag

MULTIBASE_BASE58BTC_HEADER = "z"


def encode(data: bytes) -> str:
    return MULTIBASE_BASE58BTC_HEADER + base58.b58encode(bytes(data)).decode("ascii")


def decode(value: str) -> bytes:
    if not isinstance(value, str) or not value:
        raise FormatError("Multibase value must be a non-empty string")
    if value[0] != MULTIBASE_BASE58BTC_HEADER:
        raise FormatError(
            f'Unsupported multibase header "{value[0]}" (expecting "{MULTIBASE_BASE58BTC_HEADER}")'
        )
    return b58decode(value[1:])


def b58decode(value: str) -> bytes:
    """Decode a plain base58-btc string, mapping codec failures to :class:`FormatError`."""

    if not isinstance(value, str):
        raise FormatError(f"Expected a base58 string, got {type(value).__name__}")
    try:
        return base58.b58decode(value)
    except ValueError as exc:
        raise FormatError(f"Invalid base58-btc encoding: {exc}") from exc


def b58encode(data: bytes) -> str:
    return base58.b58encode(bytes(data)).decode("ascii")


def encode_key(header: bytes, raw_key: bytes) -> str:
    """Tag ``raw_key`` with a multicodec ``header`` and multibase-encode it."""

    return encode(attach_tag(header, raw_key))


def decode_key(value: str, header: bytes) -> bytes:
    """Inverse of :func:`encode_key`; returns the raw key bytes."""

    return strip_tag(decode(value), header)


__all__ = [
    "MULTIBASE_BASE58BTC_HEADER",
    "encode",
    "decode",
    "b58encode",
    "b58decode",
    "encode_key",
    "decode_key",
]

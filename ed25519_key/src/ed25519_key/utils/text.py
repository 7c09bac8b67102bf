"""Text helpers."""
from __future__ import annotations

from ..core.exceptions import ValidationError


def to_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    """Return ``data`` as bytes, UTF-8 encoding text input."""

    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise ValidationError(f'"data" must be str or bytes, got {type(data).__name__}')


__all__ = ["to_bytes"]

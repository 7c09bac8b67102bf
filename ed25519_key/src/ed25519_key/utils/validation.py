"""Validation helpers for key material."""
from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError

_BYTES_LIKE = (bytes, bytearray, memoryview)


def buffer_equals(lhs: bytes, rhs: bytes) -> bool:
    """Return ``True`` when ``lhs`` and ``rhs`` are byte-for-byte equal.

    WARNING: this comparison is not timing-safe. It returns on the first
    differing byte and must only be used on public values such as public
    keys and fingerprints, never on secret key material or signatures
    checked against a secret expectation.
    """

    if len(lhs) != len(rhs):
        return False
    for index in range(len(lhs)):
        if lhs[index] != rhs[index]:
            return False
    return True


def assert_byte_length(data: Any, expected_length: int, code: str | None = None) -> None:
    """Ensure ``data`` is a bytes-like object of exactly ``expected_length`` bytes.

    Parameters
    ----------
    data:
        Candidate key bytes.
    expected_length:
        Required length in bytes.
    code:
        Machine readable error code attached to the raised error.

    Raises
    ------
    ValidationError
        If ``data`` is not bytes-like or has the wrong length.
    """

    if not isinstance(data, _BYTES_LIKE):
        raise ValidationError(
            f"Expected a byte sequence of length {expected_length}, got {type(data).__name__}",
            code=code,
        )
    if len(data) != expected_length:
        raise ValidationError(
            f"Expected {expected_length} bytes, got {len(data)}",
            code=code,
        )


__all__ = ["assert_byte_length", "buffer_equals"]

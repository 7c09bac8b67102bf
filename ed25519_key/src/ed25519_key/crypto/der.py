# DER framing for raw Ed25519 key bytes (RFC 8410).
from __future__ import annotations

from ..core.exceptions import ValidationError
from ..utils.validation import assert_byte_length

# PKCS#8 OneAsymmetricKey header for a 32 byte Ed25519 seed
DER_PRIVATE_KEY_PREFIX = bytes.fromhex("302e020100300506032b657004220420")
# SubjectPublicKeyInfo header for a 32 byte Ed25519 public key
DER_PUBLIC_KEY_PREFIX = bytes.fromhex("302a300506032b6570032100")


def private_key_der_encode(*, private_key_bytes: bytes | None = None, seed_bytes: bytes | None = None) -> bytes:
    """Wrap a seed, or the seed half of a 64 byte private key, in PKCS#8 DER."""

    if private_key_bytes is None and seed_bytes is None:
        raise ValidationError("`private_key_bytes` or `seed_bytes` is required")
    if seed_bytes is not None:
        assert_byte_length(seed_bytes, 32, "invalidSeedLength")
        key = bytes(seed_bytes)
    else:
        assert_byte_length(private_key_bytes, 64, "invalidPrivateKeyLength")
        key = bytes(private_key_bytes[:32])
    return DER_PRIVATE_KEY_PREFIX + key


def public_key_der_encode(public_key_bytes: bytes) -> bytes:
    assert_byte_length(public_key_bytes, 32, "invalidPublicKeyLength")
    return DER_PUBLIC_KEY_PREFIX + bytes(public_key_bytes)


def get_key_material(der: bytes) -> bytes:
    """Return the raw key bytes that follow a known Ed25519 DER prefix."""

    if der.startswith(DER_PUBLIC_KEY_PREFIX):
        return der[len(DER_PUBLIC_KEY_PREFIX):]
    if der.startswith(DER_PRIVATE_KEY_PREFIX):
        return der[len(DER_PRIVATE_KEY_PREFIX):]
    raise ValidationError("Expected DER data to match the Ed25519 public or private prefix")


__all__ = [
    "DER_PRIVATE_KEY_PREFIX",
    "DER_PUBLIC_KEY_PREFIX",
    "private_key_der_encode",
    "public_key_der_encode",
    "get_key_material",
]

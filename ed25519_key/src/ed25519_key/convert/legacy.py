"""Conversions to and from the Ed25519VerificationKey2018 (plain base58) format.

The 2018 suite stores the same raw bytes as the 2020 suite, without a
multicodec tag and without a multibase prefix::

    publicKeyBase58  = base58btc(public key, 32 bytes)
    privateKeyBase58 = base58btc(seed || public key, 64 bytes)
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

import structlog

from ..config import AppConfig
from ..core.exceptions import ValidationError
from ..crypto.multibase import b58decode, b58encode
from ..models import KeyPairCapability, SerializedKeyPair
from .canonical import canonical_record

logger = structlog.get_logger(__name__)

LEGACY_SUITE_ID = "Ed25519VerificationKey2018"
LEGACY_SUITE_CONTEXT = "https://w3id.org/security/suites/ed25519-2018/v1"


def from_ed25519_verification_key_2018(
    record: Mapping[str, Any], *, config: AppConfig | None = None
) -> Dict[str, Any]:
    """Translate a 2018 record into canonical 2020 fields."""

    if not isinstance(record, Mapping):
        raise ValidationError(f"Expected a key pair mapping, got {type(record).__name__}")
    public_key_base58 = record.get("publicKeyBase58")
    if not public_key_base58:
        raise ValidationError('The "publicKeyBase58" property is required.')
    private_key_base58 = record.get("privateKeyBase58")

    canonical = canonical_record(
        public_key=b58decode(public_key_base58),
        private_key=b58decode(private_key_base58) if private_key_base58 else None,
        id=record.get("id"),
        controller=record.get("controller"),
        revoked=record.get("revoked"),
        config=config,
    )
    logger.debug("keypair.import", source=LEGACY_SUITE_ID, key_id=canonical.get("id"))
    return canonical


def to_ed25519_verification_key_2018(
    key: KeyPairCapability,
    *,
    public_key: bool = False,
    private_key: bool = False,
    include_context: bool = False,
) -> SerializedKeyPair:
    if not (public_key or private_key):
        raise ValidationError('Export requires specifying either "publicKey" or "privateKey".')

    exported: SerializedKeyPair = {}
    if key.id:
        exported["id"] = key.id
    exported["type"] = LEGACY_SUITE_ID
    if include_context:
        exported["@context"] = LEGACY_SUITE_CONTEXT
    if key.controller:
        exported["controller"] = key.controller
    public_bytes = key.public_key_bytes
    if public_key and public_bytes:
        exported["publicKeyBase58"] = b58encode(public_bytes)
    private_bytes = key.private_key_bytes
    if private_key and private_bytes:
        exported["privateKeyBase58"] = b58encode(private_bytes)
    if key.revoked:
        exported["revoked"] = key.revoked
    return exported


__all__ = [
    "LEGACY_SUITE_ID",
    "LEGACY_SUITE_CONTEXT",
    "from_ed25519_verification_key_2018",
    "to_ed25519_verification_key_2018",
]

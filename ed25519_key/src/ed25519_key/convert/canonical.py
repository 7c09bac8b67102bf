"""Canonical record helpers shared by the format converters."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..config import AppConfig, DEFAULT_CONFIG
from ..core.exceptions import ValidationError
from ..crypto.multicodec import MULTICODEC_ED25519_PRIV_HEADER, MULTICODEC_ED25519_PUB_HEADER
from ..crypto.multibase import encode_key
from ..utils.validation import buffer_equals

SUITE_ID = "Ed25519VerificationKey2020"
SUITE_CONTEXT = "https://w3id.org/security/suites/ed25519-2020/v1"

PUBLIC_FIELD = "publicKeyMultibase"
PRIVATE_FIELD = "privateKeyMultibase"


def canonical_record(
    *,
    public_key: bytes,
    private_key: bytes | None = None,
    id: Optional[str] = None,
    controller: Optional[str] = None,
    revoked: Optional[str] = None,
    config: AppConfig | None = None,
) -> Dict[str, Any]:
    """Build a canonical record from raw key bytes, omitting absent fields."""

    config = config or DEFAULT_CONFIG
    if private_key is not None and config.imports.require_matching_keys:
        ensure_matching_keys(public_key, private_key)

    record: Dict[str, Any] = {"type": SUITE_ID}
    if id:
        record["id"] = id
    if controller:
        record["controller"] = controller
    record[PUBLIC_FIELD] = encode_key(MULTICODEC_ED25519_PUB_HEADER, public_key)
    if private_key is not None:
        record[PRIVATE_FIELD] = encode_key(MULTICODEC_ED25519_PRIV_HEADER, private_key)
    if revoked:
        record["revoked"] = revoked
    return record


def ensure_matching_keys(public_key: bytes, private_key: bytes) -> None:
    """Check that the trailing public half of ``private_key`` is ``public_key``.

    Only public bytes take part in the comparison.
    """

    if len(private_key) <= len(public_key) or not buffer_equals(
        private_key[len(private_key) - len(public_key):], public_key
    ):
        raise ValidationError(
            "Private key does not correspond to the supplied public key",
            code="keyPairMismatch",
        )


__all__ = [
    "SUITE_ID",
    "SUITE_CONTEXT",
    "PUBLIC_FIELD",
    "PRIVATE_FIELD",
    "canonical_record",
    "ensure_matching_keys",
]

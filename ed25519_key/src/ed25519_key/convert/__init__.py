"""Format converters between the canonical multibase form and foreign formats."""
from .canonical import SUITE_CONTEXT, SUITE_ID, canonical_record, ensure_matching_keys
from .dispatch import normalize_record
from .jwk import (
    JWK_SUITE_ID,
    from_json_web_key_2020,
    from_jwk,
    jwk_thumbprint,
    to_json_web_key_2020,
    to_jwk,
)
from .legacy import LEGACY_SUITE_ID, from_ed25519_verification_key_2018, to_ed25519_verification_key_2018

__all__ = [
    "SUITE_CONTEXT",
    "SUITE_ID",
    "JWK_SUITE_ID",
    "LEGACY_SUITE_ID",
    "canonical_record",
    "ensure_matching_keys",
    "normalize_record",
    "from_ed25519_verification_key_2018",
    "to_ed25519_verification_key_2018",
    "from_jwk",
    "from_json_web_key_2020",
    "to_jwk",
    "jwk_thumbprint",
    "to_json_web_key_2020",
]

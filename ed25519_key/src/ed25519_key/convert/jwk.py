"""JSON Web Key (RFC 8037 ``OKP``/``Ed25519``) and JsonWebKey2020 conversions."""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import structlog

from ..config import AppConfig
from ..core.exceptions import ValidationError
from ..crypto.ed25519 import DEFAULT_PROVIDER, Ed25519Provider
from ..models import KeyPairCapability, SerializedKeyPair
from ..utils.b64d import b64d
from ..utils.b64e import b64e
from ..utils.validation import assert_byte_length
from .canonical import canonical_record

logger = structlog.get_logger(__name__)

JWK_SUITE_ID = "JsonWebKey2020"
JWK_SUITE_CONTEXT = "https://w3id.org/security/jws/v1"
KTY = "OKP"
CRV = "Ed25519"


def from_jwk(
    jwk: Mapping[str, Any],
    *,
    id: Optional[str] = None,
    controller: Optional[str] = None,
    revoked: Optional[str] = None,
    config: AppConfig | None = None,
) -> Dict[str, Any]:
    """Translate a single OKP JWK (optionally carrying ``d``) into canonical fields.

    The 64 byte private buffer is rebuilt as ``d || x``.
    """

    if not isinstance(jwk, Mapping):
        raise ValidationError(f"Expected a JWK mapping, got {type(jwk).__name__}")
    if jwk.get("kty") != KTY:
        raise ValidationError('"kty" is required to be "OKP".')
    if jwk.get("crv") != CRV:
        raise ValidationError('"crv" is required to be "Ed25519".')

    public_key = b64d(jwk.get("x", ""))
    assert_byte_length(public_key, 32, "invalidPublicKeyLength")

    private_key = None
    if jwk.get("d"):
        seed = b64d(jwk["d"])
        assert_byte_length(seed, 32, "invalidPrivateKeyLength")
        private_key = seed + public_key

    canonical = canonical_record(
        public_key=public_key,
        private_key=private_key,
        id=id,
        controller=controller,
        revoked=revoked,
        config=config,
    )
    logger.debug("keypair.import", source="jwk", key_id=canonical.get("id"))
    return canonical


def from_json_web_key_2020(
    record: Mapping[str, Any], *, config: AppConfig | None = None
) -> Dict[str, Any]:
    if not isinstance(record, Mapping):
        raise ValidationError(f"Expected a key pair mapping, got {type(record).__name__}")
    if record.get("type") != JWK_SUITE_ID:
        raise ValidationError(f'Invalid key type: "{record.get("type")}".')
    public_jwk = record.get("publicKeyJwk")
    if not public_jwk:
        raise ValidationError('"publicKeyJwk" property is required.')
    if not isinstance(public_jwk, Mapping):
        raise ValidationError('"publicKeyJwk" must be a JWK object.')

    jwk = dict(public_jwk)
    private_jwk = record.get("privateKeyJwk")
    if private_jwk is not None and not isinstance(private_jwk, Mapping):
        raise ValidationError('"privateKeyJwk" must be a JWK object.')
    if private_jwk and private_jwk.get("d"):
        jwk["d"] = private_jwk["d"]

    return from_jwk(
        jwk,
        id=record.get("id"),
        controller=record.get("controller"),
        revoked=record.get("revoked"),
        config=config,
    )


def to_jwk(key: KeyPairCapability, *, public_key: bool = True, private_key: bool = False) -> Dict[str, str]:
    if not (public_key or private_key):
        raise ValidationError('Either a "publicKey" or a "privateKey" is required.')
    public_bytes = key.public_key_bytes
    if not public_bytes:
        raise ValidationError("Public key buffer is not set.")

    jwk = {"crv": CRV, "kty": KTY}
    if public_key:
        jwk["x"] = b64e(public_bytes)
    private_bytes = key.private_key_bytes
    if private_key and private_bytes:
        # only the seed half; the trailing 32 bytes repeat the public key
        jwk["d"] = b64e(private_bytes[:32])
    return jwk


def jwk_thumbprint(key: KeyPairCapability, *, provider: Ed25519Provider = DEFAULT_PROVIDER) -> str:
    """RFC 7638 thumbprint: required members only, lexical order, no whitespace."""

    public_bytes = key.public_key_bytes
    if not public_bytes:
        raise ValidationError("Public key buffer is not set.")
    members = {"crv": CRV, "kty": KTY, "x": b64e(public_bytes)}
    serialized = json.dumps(members, sort_keys=True, separators=(",", ":"))
    return b64e(provider.sha256_digest(serialized.encode("utf-8")))


def to_json_web_key_2020(
    key: KeyPairCapability, *, provider: Ed25519Provider = DEFAULT_PROVIDER
) -> SerializedKeyPair:
    serialized: SerializedKeyPair = {
        "@context": JWK_SUITE_CONTEXT,
        "type": JWK_SUITE_ID,
        "publicKeyJwk": to_jwk(key, public_key=True),
    }
    if key.controller:
        serialized["controller"] = key.controller
        serialized["id"] = f"{key.controller}#{jwk_thumbprint(key, provider=provider)}"
    if key.revoked:
        serialized["revoked"] = key.revoked
    return serialized


__all__ = [
    "JWK_SUITE_ID",
    "JWK_SUITE_CONTEXT",
    "from_jwk",
    "from_json_web_key_2020",
    "to_jwk",
    "jwk_thumbprint",
    "to_json_web_key_2020",
]

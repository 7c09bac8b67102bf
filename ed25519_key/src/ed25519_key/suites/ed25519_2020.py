"""Ed25519VerificationKey2020 key pair.

Implements https://w3c-ccg.github.io/lds-ed25519-2020/#ed25519verificationkey2020
for use with Linked Data Proofs and DID documents.

The multibase strings are the only stored key state::

    publicKeyMultibase  = "z" + base58btc(0xed 0x01 || public key)
    privateKeyMultibase = "z" + base58btc(0x80 0x26 || seed || public key)

Raw byte views are decoded from them on demand.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

import structlog

from ..config import AppConfig
from ..convert import jwk as jwk_format
from ..convert import legacy
from ..convert.canonical import PRIVATE_FIELD, PUBLIC_FIELD, SUITE_CONTEXT, SUITE_ID
from ..convert.dispatch import normalize_record
from ..core.exceptions import FormatError, ValidationError
from ..crypto import multibase
from ..crypto.ed25519 import DEFAULT_PROVIDER, Ed25519Provider
from ..crypto.multibase import MULTIBASE_BASE58BTC_HEADER
from ..crypto.multicodec import MULTICODEC_ED25519_PRIV_HEADER, MULTICODEC_ED25519_PUB_HEADER, has_tag
from ..crypto.signing import Ed25519Signer, Ed25519Verifier
from ..models import SerializedKeyPair, VerificationResult
from ..utils.validation import buffer_equals

logger = structlog.get_logger(__name__)


class Ed25519VerificationKey2020:
    """Ed25519 key pair in the 2020 multibase/multicodec representation."""

    suite = SUITE_ID
    SUITE_CONTEXT = SUITE_CONTEXT

    def __init__(
        self,
        *,
        public_key_multibase: str | None = None,
        private_key_multibase: str | None = None,
        id: Optional[str] = None,
        controller: Optional[str] = None,
        revoked: Optional[str] = None,
        provider: Ed25519Provider = DEFAULT_PROVIDER,
    ) -> None:
        """
        Args:
            public_key_multibase: multibase public key with the ed25519-pub
                varint header ``0xed01``. Required.
            private_key_multibase: multibase private key with the ed25519-priv
                varint header ``0x8026``.
            id: key identifier. Defaults to ``controller#fingerprint`` when a
                controller is given.
            controller: controller DID or document URL.
            revoked: RFC 3339 timestamp of revocation. Carried, not enforced.
            provider: Ed25519 primitive operations.
        """
        if not public_key_multibase:
            raise ValidationError('The "publicKeyMultibase" property is required.')
        if not _is_valid_key_header(public_key_multibase, MULTICODEC_ED25519_PUB_HEADER):
            raise ValidationError(
                f'"publicKeyMultibase" has invalid header bytes: "{public_key_multibase}".',
                code="invalidKeyHeader",
            )
        if private_key_multibase and not _is_valid_key_header(
            private_key_multibase, MULTICODEC_ED25519_PRIV_HEADER
        ):
            raise ValidationError('"privateKeyMultibase" has invalid header bytes.', code="invalidKeyHeader")

        self.type = SUITE_ID
        self.id = id
        self.controller = controller
        self.revoked = revoked
        self._public_key_multibase = public_key_multibase
        self._private_key_multibase = private_key_multibase or None
        self._provider = provider

        if controller and not id:
            self.id = f"{controller}#{self.fingerprint()}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, controller={self.controller!r}, "
            f"public_key_multibase={self._public_key_multibase!r}, "
            f"private={self._private_key_multibase is not None})"
        )

    # Construction

    @classmethod
    def generate(
        cls,
        *,
        seed: bytes | None = None,
        id: Optional[str] = None,
        controller: Optional[str] = None,
        revoked: Optional[str] = None,
        provider: Ed25519Provider = DEFAULT_PROVIDER,
    ) -> "Ed25519VerificationKey2020":
        """Generate a key pair, deterministically when a 32 byte ``seed`` is given."""
        if seed is not None:
            material = provider.generate_key_pair_from_seed(seed)
        else:
            material = provider.generate_key_pair()
        key = cls(
            public_key_multibase=multibase.encode_key(MULTICODEC_ED25519_PUB_HEADER, material.public_key),
            private_key_multibase=multibase.encode_key(MULTICODEC_ED25519_PRIV_HEADER, material.secret_key),
            id=id,
            controller=controller,
            revoked=revoked,
            provider=provider,
        )
        logger.debug("keypair.generate", fingerprint=key.fingerprint(), seeded=seed is not None)
        return key

    @classmethod
    def from_fingerprint(
        cls, fingerprint: str, *, provider: Ed25519Provider = DEFAULT_PROVIDER, **options: Any
    ) -> "Ed25519VerificationKey2020":
        """Public-only key pair whose public key is the given fingerprint."""
        return cls(public_key_multibase=fingerprint, provider=provider, **options)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        *,
        config: AppConfig | None = None,
        provider: Ed25519Provider = DEFAULT_PROVIDER,
    ) -> "Ed25519VerificationKey2020":
        """Create a key pair from any serialized form (2020, 2018 or JsonWebKey2020)."""
        canonical = normalize_record(record, config=config)
        return cls(
            public_key_multibase=canonical.get(PUBLIC_FIELD),
            private_key_multibase=canonical.get(PRIVATE_FIELD),
            id=canonical.get("id"),
            controller=canonical.get("controller"),
            revoked=canonical.get("revoked"),
            provider=provider,
        )

    @classmethod
    def from_ed25519_verification_key_2018(
        cls,
        record: Mapping[str, Any],
        *,
        config: AppConfig | None = None,
        provider: Ed25519Provider = DEFAULT_PROVIDER,
    ) -> "Ed25519VerificationKey2020":
        canonical = legacy.from_ed25519_verification_key_2018(record, config=config)
        return cls.from_record(canonical, provider=provider)

    @classmethod
    def from_jwk(
        cls,
        jwk: Mapping[str, Any],
        *,
        id: Optional[str] = None,
        controller: Optional[str] = None,
        revoked: Optional[str] = None,
        config: AppConfig | None = None,
        provider: Ed25519Provider = DEFAULT_PROVIDER,
    ) -> "Ed25519VerificationKey2020":
        canonical = jwk_format.from_jwk(jwk, id=id, controller=controller, revoked=revoked, config=config)
        return cls.from_record(canonical, provider=provider)

    @classmethod
    def from_json_web_key_2020(
        cls,
        record: Mapping[str, Any],
        *,
        config: AppConfig | None = None,
        provider: Ed25519Provider = DEFAULT_PROVIDER,
    ) -> "Ed25519VerificationKey2020":
        canonical = jwk_format.from_json_web_key_2020(record, config=config)
        return cls.from_record(canonical, provider=provider)

    # Key material

    @property
    def public_key_multibase(self) -> str:
        return self._public_key_multibase

    @property
    def private_key_multibase(self) -> str | None:
        return self._private_key_multibase

    @property
    def public_key_bytes(self) -> bytes | None:
        """Raw 32 byte public key without multibase or multicodec headers."""
        if not self._public_key_multibase:
            return None
        return multibase.decode_key(self._public_key_multibase, MULTICODEC_ED25519_PUB_HEADER)

    @property
    def private_key_bytes(self) -> bytes | None:
        """Raw 64 byte private key (seed || public key), if present."""
        if not self._private_key_multibase:
            return None
        return multibase.decode_key(self._private_key_multibase, MULTICODEC_ED25519_PRIV_HEADER)

    # Fingerprints

    def fingerprint(self) -> str:
        """Multibase/multicodec encoded public key, usable as a cryptonym."""
        return self._public_key_multibase

    def verify_fingerprint(self, fingerprint: str) -> VerificationResult:
        """Check whether ``fingerprint`` was derived from this key pair.

        Untrusted input is expected here, so every failure is reported in the
        returned result instead of being raised.
        """
        if not (isinstance(fingerprint, str) and fingerprint[:1] == MULTIBASE_BASE58BTC_HEADER):
            return VerificationResult(
                verified=False,
                error=FormatError('"fingerprint" must be a multibase encoded string.'),
            )

        try:
            fingerprint_bytes = multibase.decode(fingerprint)
        except FormatError as exc:
            logger.debug("fingerprint.rejected", reason="decode", key_id=self.id)
            return VerificationResult(verified=False, error=exc)

        public_key = self.public_key_bytes or b""
        verified = (
            fingerprint_bytes[:2] == MULTICODEC_ED25519_PUB_HEADER
            and buffer_equals(public_key, fingerprint_bytes[2:])
        )
        if not verified:
            logger.debug("fingerprint.rejected", reason="mismatch", key_id=self.id)
            return VerificationResult(
                verified=False,
                error=ValidationError("Invalid fingerprint encoding (expecting 0xed01 byte prefix)."),
            )
        return VerificationResult(verified=True)

    # Export

    def export(
        self, *, public_key: bool = False, private_key: bool = False, include_context: bool = False
    ) -> SerializedKeyPair:
        """Plain dict ready for JSON serialization in DID documents and proofs."""
        if not (public_key or private_key):
            raise ValidationError('Export requires specifying either "publicKey" or "privateKey".')

        exported: SerializedKeyPair = {}
        if self.id:
            exported["id"] = self.id
        exported["type"] = self.type
        if include_context:
            exported["@context"] = SUITE_CONTEXT
        if self.controller:
            exported["controller"] = self.controller
        if public_key:
            exported[PUBLIC_FIELD] = self._public_key_multibase
        if private_key and self._private_key_multibase:
            exported[PRIVATE_FIELD] = self._private_key_multibase
        if self.revoked:
            exported["revoked"] = self.revoked
        return exported

    def to_ed25519_verification_key_2018(
        self, *, public_key: bool = False, private_key: bool = False, include_context: bool = False
    ) -> SerializedKeyPair:
        return legacy.to_ed25519_verification_key_2018(
            self, public_key=public_key, private_key=private_key, include_context=include_context
        )

    def to_jwk(self, *, public_key: bool = True, private_key: bool = False) -> dict[str, str]:
        return jwk_format.to_jwk(self, public_key=public_key, private_key=private_key)

    def jwk_thumbprint(self) -> str:
        return jwk_format.jwk_thumbprint(self, provider=self._provider)

    def to_json_web_key_2020(self) -> SerializedKeyPair:
        return jwk_format.to_json_web_key_2020(self, provider=self._provider)

    # Signing

    def signer(self) -> Ed25519Signer:
        """Signer bound to this key; fails at ``sign`` time for public-only keys."""
        return Ed25519Signer(id=self.id, private_key_bytes=self.private_key_bytes, provider=self._provider)

    def verifier(self) -> Ed25519Verifier:
        return Ed25519Verifier(id=self.id, public_key_bytes=self.public_key_bytes, provider=self._provider)


def _is_valid_key_header(multibase_key: str, expected_header: bytes) -> bool:
    try:
        key_bytes = multibase.decode(multibase_key)
    except FormatError:
        return False
    return has_tag(key_bytes, expected_header)


__all__ = ["Ed25519VerificationKey2020"]

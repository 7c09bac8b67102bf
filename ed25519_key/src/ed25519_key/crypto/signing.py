
from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from ..core.exceptions import UnavailableKeyMaterialError, ValidationError
from ..utils.text import to_bytes
from .ed25519 import DEFAULT_PROVIDER, Ed25519Provider

logger = structlog.get_logger(__name__)

ALGORITHM = "Ed25519"


@dataclass(slots=True)
class Ed25519Signer:
    """Signing capability bound to one key's raw private bytes"""

    id: str | None
    private_key_bytes: bytes | None = field(default=None, repr=False)
    provider: Ed25519Provider = field(default=DEFAULT_PROVIDER, repr=False)
    algorithm: str = ALGORITHM

    def sign(self, *, data: str | bytes) -> bytes:
        if not self.private_key_bytes:
            raise UnavailableKeyMaterialError("A private key is not available for signing.")
        logger.debug("signer.sign", key_id=self.id)
        return self.provider.sign(self.private_key_bytes, to_bytes(data))


@dataclass(slots=True)
class Ed25519Verifier:
    """Verification capability bound to one key's raw public bytes"""

    id: str | None
    public_key_bytes: bytes | None = None
    provider: Ed25519Provider = field(default=DEFAULT_PROVIDER, repr=False)
    algorithm: str = ALGORITHM

    def verify(self, *, data: str | bytes, signature: bytes) -> bool:
        if not self.public_key_bytes:
            raise UnavailableKeyMaterialError("A public key is not available for verifying.")
        if not isinstance(signature, (bytes, bytearray, memoryview)):
            raise ValidationError(
                f"Signature must be bytes, got {type(signature).__name__}", code="invalidSignature"
            )
        verified = self.provider.verify(self.public_key_bytes, to_bytes(data), bytes(signature))
        logger.debug("verifier.verify", key_id=self.id, verified=verified)
        return verified


__all__ = ["ALGORITHM", "Ed25519Signer", "Ed25519Verifier"]

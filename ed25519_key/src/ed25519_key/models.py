# Result types and the capability interface shared by key pair suites.

from __future__ import annotations
from dataclasses import dataclass

from typing import Any, Dict, Optional, Protocol

from .crypto.signing import Ed25519Signer, Ed25519Verifier

SerializedKeyPair = Dict[str, Any]


@dataclass(slots=True)
class VerificationResult:
    """Outcome of a fingerprint check; failures carry the reason in ``error``"""
    verified: bool
    error: Optional[Exception] = None


class KeyPairCapability(Protocol):
    id: Optional[str]
    controller: Optional[str]
    revoked: Optional[str]
    type: str

    @property
    def public_key_bytes(self) -> Optional[bytes]: ...

    @property
    def private_key_bytes(self) -> Optional[bytes]: ...

    def fingerprint(self) -> str: ...

    def verify_fingerprint(self, fingerprint: str) -> VerificationResult: ...

    def export(
        self, *, public_key: bool = False, private_key: bool = False, include_context: bool = False
    ) -> SerializedKeyPair: ...

    def signer(self) -> Ed25519Signer: ...

    def verifier(self) -> Ed25519Verifier: ...


__all__ = ["SerializedKeyPair", "VerificationResult", "KeyPairCapability"]

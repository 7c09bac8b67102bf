"""Ed25519 primitive operations backed by ``cryptography``.

Raw key bytes are framed as DER (see :mod:`.der`) and loaded through
``cryptography``'s serialization layer. Secret keys use the 64 byte
``seed || public key`` layout throughout the package.
"""
from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass
from typing import Protocol

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from .der import get_key_material, private_key_der_encode, public_key_der_encode

SEED_LENGTH = 32


@dataclass(slots=True)
class KeyMaterial:
    public_key: bytes  # 32 bytes
    secret_key: bytes  # seed (32 bytes) || public key (32 bytes)


class Ed25519Provider(Protocol):
    def generate_key_pair(self) -> KeyMaterial: ...

    def generate_key_pair_from_seed(self, seed: bytes) -> KeyMaterial: ...

    def sign(self, secret_key: bytes, data: bytes) -> bytes: ...

    def verify(self, public_key: bytes, data: bytes, signature: bytes) -> bool: ...

    def sha256_digest(self, data: bytes) -> bytes: ...


class CryptographyProvider:
    """Default provider built on the ``cryptography`` Ed25519 implementation"""

    def generate_key_pair(self) -> KeyMaterial:
        seed = bytearray(secrets.token_bytes(SEED_LENGTH))
        try:
            return self.generate_key_pair_from_seed(seed)
        finally:
            for index in range(len(seed)):
                seed[index] = 0

    def generate_key_pair_from_seed(self, seed: bytes) -> KeyMaterial:
        private_key = _load_private_key(private_key_der_encode(seed_bytes=seed))
        public_der = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        public_key = get_key_material(public_der)
        return KeyMaterial(public_key=public_key, secret_key=bytes(seed) + public_key)

    def sign(self, secret_key: bytes, data: bytes) -> bytes:
        private_key = _load_private_key(private_key_der_encode(private_key_bytes=secret_key))
        return private_key.sign(bytes(data))

    def verify(self, public_key: bytes, data: bytes, signature: bytes) -> bool:
        key = serialization.load_der_public_key(public_key_der_encode(public_key))
        assert isinstance(key, Ed25519PublicKey)
        try:
            key.verify(bytes(signature), bytes(data))
            return True
        except InvalidSignature:
            return False

    def sha256_digest(self, data: bytes) -> bytes:
        return hashlib.sha256(bytes(data)).digest()


def _load_private_key(der: bytes) -> Ed25519PrivateKey:
    key = serialization.load_der_private_key(der, password=None)
    assert isinstance(key, Ed25519PrivateKey)
    return key


DEFAULT_PROVIDER: Ed25519Provider = CryptographyProvider()

__all__ = [
    "SEED_LENGTH",
    "KeyMaterial",
    "Ed25519Provider",
    "CryptographyProvider",
    "DEFAULT_PROVIDER",
]

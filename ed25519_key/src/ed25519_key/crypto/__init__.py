"""Encoding layers and Ed25519 primitives."""
from .ed25519 import DEFAULT_PROVIDER, CryptographyProvider, Ed25519Provider, KeyMaterial
from .multicodec import MULTICODEC_ED25519_PRIV_HEADER, MULTICODEC_ED25519_PUB_HEADER
from .signing import Ed25519Signer, Ed25519Verifier

__all__ = [
    "DEFAULT_PROVIDER",
    "CryptographyProvider",
    "Ed25519Provider",
    "KeyMaterial",
    "MULTICODEC_ED25519_PRIV_HEADER",
    "MULTICODEC_ED25519_PUB_HEADER",
    "Ed25519Signer",
    "Ed25519Verifier",
]

from .ed25519_2020 import Ed25519VerificationKey2020

__all__ = ["Ed25519VerificationKey2020"]


from __future__ import annotations

"""Central exception hierarchy"""
class KeyPairError(Exception):
    """Base exception for all key pair failures"""


class ValidationError(KeyPairError):
    """Raised for missing or malformed input (fields, headers, lengths)"""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class FormatError(KeyPairError):
    """Raised when an encoded string cannot be decoded"""


class UnavailableKeyMaterialError(KeyPairError):
    """Raised when an operation needs key bytes this instance does not carry"""


__all__ = [
    "KeyPairError",
    "ValidationError",
    "FormatError",
    "UnavailableKeyMaterialError",
]

from .exceptions import FormatError, KeyPairError, UnavailableKeyMaterialError, ValidationError

__all__ = ["FormatError", "KeyPairError", "UnavailableKeyMaterialError", "ValidationError"]

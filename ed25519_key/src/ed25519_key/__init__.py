"""Ed25519VerificationKey2020 key pairs for Linked Data Proofs and DID documents."""
from .config import AppConfig, DEFAULT_CONFIG, load_config
from .core.exceptions import FormatError, KeyPairError, UnavailableKeyMaterialError, ValidationError
from .crypto.signing import Ed25519Signer, Ed25519Verifier
from .logging import configure_logging
from .models import VerificationResult
from .suites.ed25519_2020 import Ed25519VerificationKey2020
from .version import __version__

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "FormatError",
    "KeyPairError",
    "UnavailableKeyMaterialError",
    "ValidationError",
    "Ed25519Signer",
    "Ed25519Verifier",
    "configure_logging",
    "VerificationResult",
    "Ed25519VerificationKey2020",
    "__version__",
]

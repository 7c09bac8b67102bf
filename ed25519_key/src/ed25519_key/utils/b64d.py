
import base64
import binascii

from ..core.exceptions import FormatError


def b64d(value: str) -> bytes:
    """base64url decode, tolerating missing padding and rejecting foreign characters"""
    if not isinstance(value, str):
        raise FormatError(f"Expected a base64url string, got {type(value).__name__}")
    pad = "=" * (-len(value) % 4)
    try:
        return base64.b64decode((value + pad).encode("ascii"), altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise FormatError(f"Invalid base64url encoding: {value!r}") from exc


import base64

def b64e(data: bytes) -> str:
    """base64url encode without padding (RFC 4648 section 5)"""
    return base64.urlsafe_b64encode(bytes(data)).decode("ascii").rstrip("=")


from __future__ import annotations

from .b64d import b64d
from .b64e import b64e
from .text import to_bytes
from .validation import assert_byte_length, buffer_equals

__all__ = [
    "b64e",
    "b64d",
    "to_bytes",
    "assert_byte_length",
    "buffer_equals",
]

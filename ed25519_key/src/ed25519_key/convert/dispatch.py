"""Route serialized key pairs to the matching importer by ``type``."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from ..config import AppConfig
from ..core.exceptions import ValidationError
from .canonical import PRIVATE_FIELD, PUBLIC_FIELD
from .jwk import JWK_SUITE_ID, from_json_web_key_2020
from .legacy import LEGACY_SUITE_ID, from_ed25519_verification_key_2018

_CANONICAL_FIELDS = ("id", "controller", "revoked", PUBLIC_FIELD, PRIVATE_FIELD)


def normalize_record(record: Mapping[str, Any], *, config: AppConfig | None = None) -> Dict[str, Any]:
    """Return canonical 2020 fields for any supported serialized key pair.

    Records whose ``type`` is neither the 2018 suite nor ``JsonWebKey2020``
    are taken to be canonical already and only have their known fields kept.
    """

    if not isinstance(record, Mapping):
        raise ValidationError(f"Expected a key pair mapping, got {type(record).__name__}")
    record_type = record.get("type")
    if record_type == LEGACY_SUITE_ID:
        return from_ed25519_verification_key_2018(record, config=config)
    if record_type == JWK_SUITE_ID:
        return from_json_web_key_2020(record, config=config)
    return {name: record[name] for name in _CANONICAL_FIELDS if record.get(name) is not None}


__all__ = ["normalize_record"]

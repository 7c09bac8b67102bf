"""Structured logging setup for applications embedding ed25519_key.

Records are rendered as JSON lines carrying ``ts``, ``level``, ``component``
and ``msg``. The level comes from :class:`~ed25519_key.config.LoggingConfig`;
fields that could hold key material are masked before rendering.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping, Optional, TextIO

import structlog

from .config import DEFAULT_CONFIG, AppConfig

PACKAGE_LOGGER = "ed25519_key"
REDACTED = "[redacted]"

SECRET_FIELDS = frozenset(
    {
        "seed",
        "secret_key",
        "private_key",
        "private_key_bytes",
        "private_key_multibase",
        "privateKeyMultibase",
        "privateKeyBase58",
        "privateKeyJwk",
        "d",
    }
)

EventDict = MutableMapping[str, Any]


def configure_logging(
    config: Optional[AppConfig] = None,
    *,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Route structlog through the stdlib root logger as JSON lines.

    ``level`` overrides ``config.logging.level`` when given.
    """

    settings = config or DEFAULT_CONFIG
    numeric_level = _level_from_str(level or settings.logging.normalized_level())

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            _mask_key_material,
            _event_as_msg,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _add_component(logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    """Name the emitting subsystem, e.g. ``suites.ed25519_2020``."""

    if "component" not in event_dict:
        name = getattr(logger, "name", None) or PACKAGE_LOGGER
        prefix = PACKAGE_LOGGER + "."
        event_dict["component"] = name[len(prefix):] if name.startswith(prefix) else name
    return event_dict


def _mask_key_material(_logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    for field in SECRET_FIELDS.intersection(event_dict):
        event_dict[field] = REDACTED
    return event_dict


def _event_as_msg(_logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


__all__ = ["configure_logging", "REDACTED", "SECRET_FIELDS"]

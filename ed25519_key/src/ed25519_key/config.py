"""Configuration loading utilities for ed25519_key."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

CONFIG_ENV = "ED25519_KEY_CONFIG"


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class ImportConfig(BaseModel):
    require_matching_keys: bool = Field(
        default=False,
        description=(
            "Reject legacy and JWK imports whose private key does not embed "
            "the supplied public key"
        ),
    )


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    imports: ImportConfig = Field(default_factory=ImportConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield Path(explicit)
    env_value = os.getenv(CONFIG_ENV)
    if env_value:
        yield Path(env_value).expanduser()
    yield Path.cwd() / ".ed25519_key" / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


__all__ = [
    "AppConfig",
    "CONFIG_ENV",
    "DEFAULT_CONFIG",
    "ImportConfig",
    "LoggingConfig",
    "config_search_paths",
    "load_config",
]

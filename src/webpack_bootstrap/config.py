from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, Field, ValidationError, field_validator

from webpack_bootstrap.errors import ConfigError

ENV_PREFIX = "WEBPACK_BOOTSTRAP_"


class Variant(StrEnum):
    BASIC = "basic"
    JEST = "jest"


class SetupConfig(BaseModel):
    npm: str = Field(default="npm", min_length=1)
    variant: Variant = Variant.JEST
    show_progress: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def _env_str(environ: Mapping[str, str], name: str) -> str:
    return str(environ.get(ENV_PREFIX + name) or "").strip()


def _env_bool(environ: Mapping[str, str], name: str, *, default: bool) -> bool:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def load_config(environ: Mapping[str, str] | None = None) -> SetupConfig:
    """
    Build the setup configuration from WEBPACK_BOOTSTRAP_* environment variables.
    Unset or empty variables keep their defaults.
    """
    environ = os.environ if environ is None else environ

    values: dict[str, object] = {
        "show_progress": _env_bool(environ, "PROGRESS", default=True),
    }
    for field, name in (("npm", "NPM"), ("variant", "VARIANT"), ("log_level", "LOG_LEVEL")):
        raw = _env_str(environ, name)
        if raw:
            values[field] = raw.lower() if field == "variant" else raw

    try:
        return SetupConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

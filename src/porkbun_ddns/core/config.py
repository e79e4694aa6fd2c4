"""Core configuration.

Two distinct inputs live here:
- `AppSettings`: runtime knobs (timeouts, endpoints, log level) read from
  environment variables via pydantic-settings.
- `load_config`: the user's record file (credentials + target records),
  validated into the `Configuration` domain model.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from porkbun_ddns.core.domain.models import Configuration
from porkbun_ddns.core.errors import ConfigParseError, ConfigReadError

logger = logging.getLogger(__name__)


class AppSettings(BaseSettings):
    """Central runtime settings.

    Why pydantic-settings:
    - Typed + validated at the boundary (env vars) without leaking into the Core.
    - One settings contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORKBUN_DDNS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="porkbun-ddns/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    ip_service_url: str = Field(
        default="https://checkip.amazonaws.com/",
        description="Service returning the caller's public IP as plain text.",
    )
    api_base_url: str = Field(
        default="https://api.porkbun.com/api/json/v3",
        description="Porkbun JSON API base URL.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for diagnostics written to stderr.",
    )

    @field_validator("ip_service_url", "api_base_url")
    @classmethod
    def _require_https(cls, value: str) -> str:
        # Credentials travel in request bodies.
        if not value.lower().startswith("https://"):
            raise ValueError("only https:// URLs are allowed")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def load_config(path: Path) -> Configuration:
    """Read and validate the record file.

    Raises:
    - `ConfigReadError` if the file cannot be read.
    - `ConfigParseError` if it is not JSON or misses/mistypes any field.
    """

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigReadError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(path, str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, f"not valid JSON ({exc})") from exc

    try:
        config = Configuration.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(path, _describe_validation_error(exc)) from exc

    if len(config.domains) > 1:
        logger.info("%d domains configured, only the first one is managed", len(config.domains))
    logger.debug("Loaded config from %s for %s", path, config.target.domain)
    return config

"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))

DEFAULT_SECTION_ORDER: tuple[str, ...] = (
    "Fruit & Vegtables",
    "Fridge",
    "Bakery",
    "Cupboard",
    "Snacks and Sweets",
    "Alcohol",
    "Freezer",
)


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token required for authenticated endpoints.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_requests: bool = Field(
        default=True,
        description="Emit request access logs when true.",
    )
    strict_hydration: bool = Field(
        default=True,
        description="Reject store rows whose ingredient references are unresolved.",
    )
    section_order: tuple[str, ...] = Field(
        default=DEFAULT_SECTION_ORDER,
        description="Canonical supermarket section order used when grouping the shopping list.",
    )
    default_supermarket: Optional[str] = Field(
        default=None,
        description="Supermarket used for search links in the plain-text export.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(entry.strip() for entry in value.split(",") if entry.strip())


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (api_token := _env("LARDER_API_TOKEN")):
        payload["api_token"] = api_token
    if (log_level := _env("LARDER_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("LARDER_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("LARDER_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    if (strict_hydration := _env("LARDER_STRICT_HYDRATION")):
        payload["strict_hydration"] = _coerce_bool(strict_hydration)
    if (section_order := _env("LARDER_SECTION_ORDER")):
        sections = _split_list(section_order)
        if sections:
            payload["section_order"] = sections
    if (supermarket := _env("LARDER_DEFAULT_SUPERMARKET")):
        payload["default_supermarket"] = supermarket
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())

"""
search_sdk.tier0_core.config
──────────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic; invalid values raise
ConfigurationError when the config is first loaded.

Also owns the process-wide key-casing ("keyword") mode. Clients that set
``keyword_mode`` explicitly ignore it; clients that leave it as ``None``
read it at dispatch time. The flag is plain module state: mutating it from
several threads while requests are in flight is a data race.

Configure via: SEARCH_ENDPOINT, SEARCH_USER, SEARCH_PASSWORD,
               SEARCH_KEYWORD_MODE, SEARCH_TIMEOUT, SEARCH_ERROR_STATUSES,
               SEARCH_LOG_LEVEL, SEARCH_LOG_FORMAT
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Annotated, Iterator

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from search_sdk.tier0_core.errors import ConfigurationError
from search_sdk.tier0_core.http import DEFAULT_ERROR_STATUSES


class SearchConfig(BaseSettings):
    """
    Typed client configuration. All env vars are prefixed with SEARCH_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Endpoint ──────────────────────────────────────────────────────────────
    endpoint: str = Field(default="http://localhost:9200", alias="SEARCH_ENDPOINT")
    user: str | None = Field(default=None, alias="SEARCH_USER")
    password: str | None = Field(default=None, alias="SEARCH_PASSWORD")
    timeout: float | None = Field(default=None, alias="SEARCH_TIMEOUT")

    # ── Marshalling ───────────────────────────────────────────────────────────
    keyword_mode: bool = Field(default=False, alias="SEARCH_KEYWORD_MODE")
    error_statuses: Annotated[frozenset[int], NoDecode] = Field(
        default=DEFAULT_ERROR_STATUSES, alias="SEARCH_ERROR_STATUSES"
    )

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="SEARCH_LOG_LEVEL")
    log_format: str = Field(default="json", alias="SEARCH_LOG_FORMAT")

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("error_statuses", mode="before")
    @classmethod
    def parse_error_statuses(cls, v: object) -> object:
        if isinstance(v, str):
            return frozenset(int(part) for part in v.split(",") if part.strip())
        return v

    @field_validator("error_statuses")
    @classmethod
    def validate_error_statuses(cls, v: frozenset[int]) -> frozenset[int]:
        bad = sorted(code for code in v if not 400 <= code < 600)
        if bad:
            raise ValueError(f"error statuses must be 4xx/5xx, got {bad}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in {"json", "console"}:
            raise ValueError(f"log format must be 'json' or 'console', got {v!r}")
        return v.lower()


class _KeywordModeSetting(BaseSettings):
    """Just SEARCH_KEYWORD_MODE, so an unrelated bad setting cannot block dispatch."""

    model_config = SearchConfig.model_config

    keyword_mode: bool = Field(default=False, alias="SEARCH_KEYWORD_MODE")


@lru_cache(maxsize=1)
def get_config() -> SearchConfig:
    """
    Return the singleton search config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    try:
        return SearchConfig()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid search client configuration.",
            detail=str(exc),
        ) from exc


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()


# ── Process-wide keyword mode ──────────────────────────────────────────────

_keyword_mode: bool | None = None


def get_keyword_mode() -> bool:
    """Return the process-wide key-casing mode, seeding it from SEARCH_KEYWORD_MODE on first use."""
    global _keyword_mode
    if _keyword_mode is None:
        try:
            _keyword_mode = _KeywordModeSetting().keyword_mode
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid SEARCH_KEYWORD_MODE.",
                detail=str(exc),
            ) from exc
    return _keyword_mode


def set_keyword_mode(enabled: bool) -> None:
    """Switch the process-wide key-casing mode for all subsequent requests."""
    global _keyword_mode
    _keyword_mode = bool(enabled)


def _reset_keyword_mode() -> None:
    """For tests — forget the mode so the next read goes back to config."""
    global _keyword_mode
    _keyword_mode = None


@contextmanager
def keyword_mode(enabled: bool) -> Iterator[None]:
    """Temporarily set the process-wide key-casing mode, restoring it on exit."""
    previous = get_keyword_mode()
    set_keyword_mode(enabled)
    try:
        yield
    finally:
        set_keyword_mode(previous)


__sdk_export__ = {
    "surface": "client",
    "exports": [
        "get_config", "SearchConfig",
        "get_keyword_mode", "set_keyword_mode", "keyword_mode",
    ],
    "description": "Typed settings and the process-wide key-casing mode",
    "tier": "tier0_core",
    "module": "config",
}

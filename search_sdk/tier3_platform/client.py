"""
search_sdk.tier3_platform.client
──────────────────────────────────
The Client value: where to send requests and how to marshal them. It has
no behaviour of its own and no mutable state, so one instance can be shared
by any number of threads.

Usage::

    client = Client("http://search.internal:9200", user="elastic", password="changeme")
    client = Client.from_config()   # SEARCH_* environment / .env
"""
from __future__ import annotations

from dataclasses import dataclass, field

from search_sdk.tier0_core.config import SearchConfig, get_config, get_keyword_mode
from search_sdk.tier0_core.http import DEFAULT_ERROR_STATUSES


@dataclass(frozen=True)
class Client:
    """Immutable connection settings for an Elasticsearch-compatible endpoint."""

    endpoint: str = "http://localhost:9200"
    user: str | None = None
    password: str | None = field(default=None, repr=False)
    # None defers to the process-wide mode at dispatch time.
    keyword_mode: bool | None = None
    error_statuses: frozenset[int] = DEFAULT_ERROR_STATUSES
    timeout: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))
        object.__setattr__(self, "error_statuses", frozenset(self.error_statuses))

    @classmethod
    def from_config(cls, config: SearchConfig | None = None) -> Client:
        """Build a Client from typed settings (defaults to ``get_config()``)."""
        cfg = config or get_config()
        return cls(
            endpoint=cfg.endpoint,
            user=cfg.user,
            password=cfg.password,
            error_statuses=cfg.error_statuses,
            timeout=cfg.timeout,
        )

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic credentials to pass through, when a user is configured."""
        if self.user is None:
            return None
        return (self.user, self.password or "")

    def resolve_keyword_mode(self) -> bool:
        """Return the key-casing mode in effect for a request made now."""
        if self.keyword_mode is None:
            return get_keyword_mode()
        return self.keyword_mode


__sdk_export__ = {
    "surface": "client",
    "exports": ["Client"],
    "description": "Immutable endpoint/credential settings for dispatch",
    "tier": "tier3_platform",
    "module": "client",
}

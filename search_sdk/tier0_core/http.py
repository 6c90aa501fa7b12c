"""
search_sdk.tier0_core.http
───────────────────────────
HTTP primitives shared by the dispatcher: status code constants, the fixed
JSON content type, the default "raise on" status policy and the typed
response pair returned by ``send``.
"""
from __future__ import annotations

from typing import Any, NamedTuple


# ── Status code constants ──────────────────────────────────────────────────

class HTTP:
    """HTTP status codes an Elasticsearch-compatible engine answers with."""

    # 2xx
    OK = 200
    CREATED = 201

    # 4xx
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429

    # 5xx
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


JSON_MEDIA_TYPE = "application/json"
JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
CHARSET = "utf-8"

# Only 400 raises by default; every other status is handed back to the caller.
DEFAULT_ERROR_STATUSES: frozenset[int] = frozenset({HTTP.BAD_REQUEST})


# ── Response pair ─────────────────────────────────────────────────────────

class SearchResponse(NamedTuple):
    """Decoded body and HTTP status of a request that was not raised on."""

    body: Any
    status: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def found(self) -> bool:
        return self.status != HTTP.NOT_FOUND


__all__ = [
    "HTTP",
    "JSON_MEDIA_TYPE",
    "JSON_CONTENT_TYPE",
    "CHARSET",
    "DEFAULT_ERROR_STATUSES",
    "SearchResponse",
]


__sdk_export__ = {
    "surface": "client",
    "exports": ["HTTP", "SearchResponse"],
    "description": "Status constants and the (body, status) response pair",
    "tier": "tier0_core",
    "module": "http",
}

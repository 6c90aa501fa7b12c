"""
search_sdk.tier0_core.errors
─────────────────────────────
Error taxonomy for the search client. Every error carries a stable
machine-readable ``code``, a human-readable ``user_message`` and optional
internal ``detail``/metadata, and serializes to the same ``{"error": {...}}``
envelope wherever it is surfaced.

Only ``ElasticsearchClientError`` reflects a server answer; the rest are
raised locally before, during or after the HTTP exchange.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class SearchError(Exception):
    """
    Base class for all search_sdk errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context
    - status_code: HTTP status the error maps to, when there is one
    """

    status_code: int = 500
    code: str = "search_error"

    def __init__(
        self,
        user_message: str = "An unexpected search client error occurred.",
        *,
        code: str | None = None,
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.user_message)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class InvalidClient(SearchError):
    """The value passed as a client is not a :class:`Client`. No I/O was attempted."""
    status_code = 500
    code = "invalid_client"

    def __init__(self, value: Any, **metadata: Any) -> None:
        self.value = value
        super().__init__(
            f"Expected a search_sdk Client, got {type(value).__name__}",
            **metadata,
        )


class ElasticsearchClientError(SearchError):
    """The server answered with a status the client is configured to raise on (400 by default)."""
    status_code = 400
    code = "elasticsearch_client_error"

    def __init__(
        self,
        message: str,
        *,
        status: int = 400,
        body: Any = None,
        **metadata: Any,
    ) -> None:
        self.status = status
        self.body = body
        super().__init__(message, **metadata)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["error"]["status"] = self.status
        return d


class MalformedResponse(SearchError):
    """A response body could not be decoded as JSON."""
    status_code = 502
    code = "malformed_response"

    _SNIPPET = 200

    def __init__(self, body: str, reason: str | None = None, **metadata: Any) -> None:
        self.body = body[: self._SNIPPET]
        super().__init__(
            "Response body is not valid JSON.",
            detail=reason,
            **metadata,
        )


class OddFormCount(SearchError):
    """A map literal was given an odd number of key/value forms."""
    status_code = 500
    code = "odd_form_count"

    def __init__(self, count: int, **metadata: Any) -> None:
        self.count = count
        super().__init__(
            f"Map literal needs an even number of forms, got {count}",
            **metadata,
        )


class SerializationError(SearchError):
    """An outgoing payload contains a value with no JSON rendering."""
    status_code = 500
    code = "serialization_error"


class TransportFailure(SearchError):
    """The HTTP exchange itself failed (connection refused, timeout, protocol or content-decoding error)."""
    status_code = 502
    code = "transport_failure"


class ConfigurationError(SearchError):
    """Misconfiguration detected while loading settings."""
    status_code = 500
    code = "configuration_error"


__sdk_export__ = {
    "surface": "client",
    "exports": [
        "SearchError", "InvalidClient", "ElasticsearchClientError",
        "MalformedResponse", "OddFormCount", "SerializationError",
        "TransportFailure", "ConfigurationError",
    ],
    "description": "Error taxonomy for request marshalling and dispatch",
    "tier": "tier0_core",
    "module": "errors",
}

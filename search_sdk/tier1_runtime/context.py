"""
search_sdk.tier1_runtime.context
────────────────────────────────────
Request correlation. The current ``request_id`` is sent with every search
call as ``X-Opaque-Id`` so a request can be traced through the engine's
task list and slow logs, and is bound into structlog contextvars so the
client's own log lines carry the same id.

Uses Python contextvars for async-safe, framework-agnostic storage.
"""
from __future__ import annotations

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog


# ── Domain model ─────────────────────────────────────────────────────────────

@dataclass
class RequestContext:
    """Correlation metadata attached to outgoing search requests."""
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    trace_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


# ── ContextVar storage ────────────────────────────────────────────────────────

_ctx: ContextVar[RequestContext | None] = ContextVar(
    "search_request_context",
    default=None,
)


# ── Public API ────────────────────────────────────────────────────────────────

def get_context() -> RequestContext | None:
    """Return the current request context, or None when none was set."""
    return _ctx.get()


def set_context(ctx: RequestContext) -> None:
    """Set the request context for the current async scope."""
    _ctx.set(ctx)
    structlog.contextvars.bind_contextvars(
        request_id=ctx.request_id,
        trace_id=ctx.trace_id,
    )


def new_context(trace_id: str | None = None, **metadata: Any) -> RequestContext:
    """Create and activate a new request context. Returns the new context."""
    ctx = RequestContext(trace_id=trace_id, metadata=metadata)
    set_context(ctx)
    return ctx


def clear_request_context() -> None:
    """Drop the current request context and its bound log fields."""
    _ctx.set(None)
    structlog.contextvars.unbind_contextvars("request_id", "trace_id")


def correlation_headers() -> dict[str, str]:
    """Headers that propagate the current context to the engine."""
    ctx = get_context()
    if ctx is None:
        return {}
    return {"X-Opaque-Id": ctx.request_id}


__sdk_export__ = {
    "surface": "client",
    "exports": ["get_context", "set_context", "new_context", "RequestContext"],
    "description": "Request correlation via contextvars (X-Opaque-Id)",
    "tier": "tier1_runtime",
    "module": "context",
}

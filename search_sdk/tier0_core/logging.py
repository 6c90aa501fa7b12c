"""
search_sdk.tier0_core.logging
──────────────────────────────
Structured logs with levels, automatic context injection (request_id,
trace_id) and credential redaction.

Stack: structlog over the stdlib logging tree (stdout JSON or console).
Configure via: SEARCH_LOG_LEVEL, SEARCH_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from search_sdk.tier0_core.redact import structlog_redact_processor


# ── Configuration ─────────────────────────────────────────────────────────────

def _configure_structlog() -> None:
    log_level = os.getenv("SEARCH_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("SEARCH_LOG_FORMAT", "json").lower()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog_redact_processor,
    ]

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    sdk_logger = logging.getLogger("search_sdk")
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(getattr(logging, log_level, logging.INFO))


# ── Public API ────────────────────────────────────────────────────────────────

_configured = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger bound to the given name.

    Usage:
        log = get_logger(__name__)
        log.info("search.request", method="GET", url="http://localhost:9200/_search")
    """
    global _configured
    if not _configured:
        _configure_structlog()
        _configured = True
    return structlog.get_logger(name or __name__)


def bind_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to the current async/thread context.
    All subsequent log calls in this context will include these fields.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context-bound log fields."""
    structlog.contextvars.clear_contextvars()


__sdk_export__ = {
    "surface": "client",
    "exports": ["get_logger", "bind_context", "clear_context"],
    "description": "structlog configuration with credential redaction",
    "tier": "tier0_core",
    "module": "logging",
}

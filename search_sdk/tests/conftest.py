"""
search_sdk test configuration.

All dispatch tests run against canned httpx transports — no search engine
required. Override by setting environment variables before running pytest.
"""
from __future__ import annotations

import json
import os
from typing import Any, Callable, Iterator

import httpx
import pytest

# ── Deterministic settings ─────────────────────────────────────────────────
# These must be set before any search_sdk modules are imported.

os.environ.setdefault("SEARCH_ENDPOINT", "http://localhost:9200")
os.environ.setdefault("SEARCH_KEYWORD_MODE", "false")
os.environ.setdefault("SEARCH_LOG_LEVEL", "WARNING")
os.environ.setdefault("SEARCH_LOG_FORMAT", "json")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_module_singletons():
    """
    Reset the cached config and the process-wide keyword mode between tests.
    This ensures each test starts from the environment with no state bleed.
    """
    from search_sdk.tier0_core.config import _reset_config, _reset_keyword_mode
    from search_sdk.tier1_runtime.context import clear_request_context

    _reset_config()
    _reset_keyword_mode()
    clear_request_context()

    yield

    _reset_config()
    _reset_keyword_mode()
    clear_request_context()


class RecordingStream(httpx.ByteStream):
    """
    Response stream that remembers whether it was closed. With ``fail_after``
    set it yields that many bytes and then drops the connection.
    """

    def __init__(self, content: bytes, *, fail_after: int | None = None) -> None:
        super().__init__(content)
        self.content = content
        self.fail_after = fail_after
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        if self.fail_after is None:
            yield self.content
            return
        yield self.content[: self.fail_after]
        raise httpx.ReadError("connection reset while reading body")

    def close(self) -> None:
        self.closed = True


class CannedTransport:
    """
    Build an httpx client whose transport answers every request with a fixed
    status and body, recording requests and response streams for assertions.
    """

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        *,
        raw: bytes | None = None,
        content_type: str = "application/json; charset=UTF-8",
        headers: dict[str, str] | None = None,
        fail_after: int | None = None,
    ) -> None:
        self.status = status
        if raw is None:
            raw = b"" if body is None else json.dumps(body).encode("utf-8")
        self.raw = raw
        self.content_type = content_type
        self.headers = headers or {}
        self.fail_after = fail_after
        self.requests: list[httpx.Request] = []
        self.streams: list[RecordingStream] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        stream = RecordingStream(self.raw, fail_after=self.fail_after)
        self.streams.append(stream)
        return httpx.Response(
            self.status,
            headers={"content-type": self.content_type, **self.headers},
            stream=stream,
        )

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def canned() -> Callable[..., CannedTransport]:
    """Return a factory for CannedTransport instances."""
    return CannedTransport


@pytest.fixture
def es_client():
    """Return a Client pointing at the default local endpoint."""
    from search_sdk.tier3_platform.client import Client
    return Client("http://localhost:9200")

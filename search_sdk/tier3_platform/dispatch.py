"""
search_sdk.tier3_platform.dispatch
────────────────────────────────────
Request dispatch: compose the URI, encode the body, perform one HTTP
exchange and interpret the status.

Statuses listed in ``Client.error_statuses`` (only 400 by default) raise
ElasticsearchClientError with the message found under the body's ``error``
key. Every other status, 404 and 5xx included, is decoded and returned as
a ``SearchResponse(body, status)`` for the caller to interpret.

The response is requested as a stream and released on every exit path:
success, the raising branch, a decode failure or a transport error.

Backed by: httpx (sync). No retries, pooling or TLS knobs.

Usage::

    client = Client("http://localhost:9200")
    body, status = send(client, ["my-index", "_search"], "POST",
                        {"query": {"match_all": {}}})
"""
from __future__ import annotations

import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import httpx

from search_sdk.tier0_core.errors import (
    ElasticsearchClientError,
    InvalidClient,
    TransportFailure,
)
from search_sdk.tier0_core.http import (
    CHARSET,
    JSON_CONTENT_TYPE,
    JSON_MEDIA_TYPE,
    SearchResponse,
)
from search_sdk.tier0_core.keywords import Keyword
from search_sdk.tier0_core.logging import get_logger
from search_sdk.tier1_runtime.casing import normalize_params
from search_sdk.tier1_runtime.context import correlation_headers
from search_sdk.tier1_runtime.serialize import decode, encode, encode_document
from search_sdk.tier1_runtime.uri import build_full_uri
from search_sdk.tier3_platform.client import Client

logger = get_logger(__name__)


@contextmanager
def _session(http: httpx.Client | None) -> Iterator[httpx.Client]:
    """Yield the caller's httpx client, or a fresh one closed afterwards."""
    if http is not None:
        yield http
        return
    with httpx.Client() as owned:
        yield owned


def _read_text(response: httpx.Response) -> str:
    response.read()
    media_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type == JSON_MEDIA_TYPE:
        response.encoding = CHARSET
    return response.text


def _error_message(body: Any, raw: str, status: int, keyword_mode: bool) -> str:
    key = Keyword("error") if keyword_mode else "error"
    error = body.get(key) if isinstance(body, Mapping) else None
    if error is None:
        return raw.strip() or f"HTTP {status}"
    if isinstance(error, (Mapping, list, tuple)):
        return encode_document(error, keyword_mode=True)
    return str(error)


def _interpret(
    client: Client,
    url: str,
    status: int,
    raw: str,
    keyword_mode: bool,
) -> SearchResponse:
    body = decode(raw, keyword_mode)
    if status in client.error_statuses:
        message = _error_message(body, raw, status, keyword_mode)
        logger.warning("search.client_error", url=url, status=status, message=message)
        raise ElasticsearchClientError(message, status=status, body=body)
    return SearchResponse(body, status)


def send(
    client: Client,
    path: Any,
    method: str = "GET",
    data: Any = None,
    parameters: Mapping[Any, Any] | list[tuple[Any, Any]] | None = None,
    *,
    http: httpx.Client | None = None,
) -> SearchResponse:
    """
    Perform one request against ``client.endpoint + compose(path)``.

    *data* is encoded as a JSON document, or as NDJSON when it is a list of
    documents. *parameters* become the query string. Pass *http* to reuse
    an existing httpx client (or a test transport); otherwise a client is
    created and closed for this call.

    Raises InvalidClient, ElasticsearchClientError, MalformedResponse,
    SerializationError or TransportFailure.
    """
    if not isinstance(client, Client):
        raise InvalidClient(client)

    keyword_mode = client.resolve_keyword_mode()
    method = method.upper()
    url = build_full_uri(client, path)
    body = encode(data, keyword_mode)
    params = normalize_params(parameters, keyword_mode)
    headers = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_MEDIA_TYPE,
        **correlation_headers(),
    }
    options: dict[str, Any] = {}
    if client.auth is not None:
        options["auth"] = client.auth
    if client.timeout is not None:
        options["timeout"] = client.timeout

    logger.debug(
        "search.request",
        method=method,
        url=url,
        has_body=body is not None,
        params=params,
    )
    started = time.perf_counter()
    try:
        with _session(http) as session, session.stream(
            method,
            url,
            content=body.encode(CHARSET) if body is not None else None,
            params=params,
            headers=headers,
            **options,
        ) as response:
            raw = _read_text(response)
            logger.debug(
                "search.response",
                method=method,
                url=url,
                status=response.status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return _interpret(client, url, response.status_code, raw, keyword_mode)
    except httpx.RequestError as exc:
        logger.error("search.transport_failed", method=method, url=url, error=str(exc))
        raise TransportFailure(
            f"{method} {url} failed: {exc}",
            detail=repr(exc),
        ) from exc


def get(client: Client, path: Any, **kwargs: Any) -> SearchResponse:
    return send(client, path, "GET", **kwargs)


def post(client: Client, path: Any, data: Any = None, **kwargs: Any) -> SearchResponse:
    return send(client, path, "POST", data, **kwargs)


def put(client: Client, path: Any, data: Any = None, **kwargs: Any) -> SearchResponse:
    return send(client, path, "PUT", data, **kwargs)


def delete(client: Client, path: Any, **kwargs: Any) -> SearchResponse:
    return send(client, path, "DELETE", **kwargs)


def head(client: Client, path: Any, **kwargs: Any) -> SearchResponse:
    return send(client, path, "HEAD", **kwargs)


__sdk_export__ = {
    "surface": "client",
    "exports": ["send", "get", "post", "put", "delete", "head"],
    "description": "Single-shot request dispatch with status interpretation",
    "tier": "tier3_platform",
    "module": "dispatch",
}

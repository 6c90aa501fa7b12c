"""
search_sdk.tier1_runtime.serialize
───────────────────────────────────────
JSON codec for request and response bodies.

``encode`` turns a payload into the body text: ``None`` means no body, a
top-level list is a sequence of documents rendered as NDJSON (one compact
document per line, trailing newline) and anything else is one JSON
document. ``decode`` parses a response body; in keyword mode object keys
come back as Keywords.

``keyword_mode=None`` means "use the process-wide mode" for either call.
"""
from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from search_sdk.tier0_core.config import get_keyword_mode
from search_sdk.tier0_core.errors import MalformedResponse, SerializationError
from search_sdk.tier0_core.http import CHARSET
from search_sdk.tier0_core.keywords import Keyword
from search_sdk.tier1_runtime.casing import to_string_keys, to_keyword_keys


class JsonEncoder(json.JSONEncoder):
    def default(self, value: Any) -> Any:
        """Convert more Python data types to JSON the engine understands."""
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        if isinstance(value, (set, frozenset)):
            return list(value)
        if isinstance(value, Keyword):
            return value.lower()
        if isinstance(value, Decimal):
            return float(value)
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")
        return super().default(value)


def _resolve(keyword_mode: bool | None) -> bool:
    return get_keyword_mode() if keyword_mode is None else keyword_mode


def encode_document(value: Any, keyword_mode: bool | None = None) -> str:
    """Serialize a single document as compact JSON."""
    if _resolve(keyword_mode):
        value = to_string_keys(value)
    try:
        return json.dumps(
            value,
            cls=JsonEncoder,
            ensure_ascii=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            "Payload cannot be encoded as JSON.",
            detail=str(exc),
        ) from exc


def encode(value: Any, keyword_mode: bool | None = None) -> str | None:
    """
    Encode a request payload.

    Usage:
        encode({"query": {"match_all": {}}})   # → '{"query":{"match_all":{}}}'
        encode([{"index": {}}, {"a": 1}])      # → '{"index":{}}\\n{"a":1}\\n'
        encode(None)                           # → None
    """
    if value is None:
        return None
    mode = _resolve(keyword_mode)
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return "".join(encode_document(doc, mode) + "\n" for doc in value)
    return encode_document(value, mode)


def decode(text: str, keyword_mode: bool | None = None) -> Any:
    """
    Decode a response body. Empty bodies (HEAD, 204) decode to None.
    Raises MalformedResponse when the text is not JSON.
    """
    if not text or not text.strip():
        return None
    hook = to_keyword_keys if _resolve(keyword_mode) else None
    try:
        return json.loads(text, object_pairs_hook=hook)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(text, reason=str(exc)) from exc


def serialize(value: Any, keyword_mode: bool | None = None) -> bytes:
    """Encode *value* to UTF-8 body bytes (``b""`` when there is no body)."""
    text = encode(value, keyword_mode)
    return text.encode(CHARSET) if text is not None else b""


def deserialize(data: bytes | str, keyword_mode: bool | None = None) -> Any:
    """Decode UTF-8 body bytes (or text)."""
    if isinstance(data, bytes):
        try:
            data = data.decode(CHARSET)
        except UnicodeDecodeError as exc:
            raise MalformedResponse(
                data.decode(CHARSET, errors="replace"), reason=str(exc)
            ) from exc
    return decode(data, keyword_mode)


__sdk_export__ = {
    "surface": "client",
    "exports": ["encode", "decode", "serialize", "deserialize"],
    "description": "JSON / NDJSON body codec with keyword-casing support",
    "tier": "tier1_runtime",
    "module": "serialize",
}

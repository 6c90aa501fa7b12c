"""
search_sdk.tier1_runtime.casing
─────────────────────────────────
Key-casing normalization between Keyword-keyed Python maps and the
string-keyed objects JSON carries.

Outgoing, ``to_string_keys`` rewrites every Keyword (as a key or a value)
to its lowercase string, recursing through maps and sequences and always
building fresh containers. Incoming, ``to_keyword_keys`` is handed to the
JSON decoder as its object hook, so keys are promoted one object at a time
while parsing rather than by a second pass over the decoded tree.

Two keys that fold to the same string (``:Foo`` and ``:foo``, or ``:foo``
and ``"foo"``) collide: the one iterated last wins.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from search_sdk.tier0_core.keywords import Keyword

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def to_string_keys(value: Any) -> Any:
    """Return *value* with Keyword keys and values lowercased to strings."""
    if isinstance(value, Mapping):
        result: dict[Any, Any] = {}
        for k, v in value.items():
            normalized = to_string_keys(v)
            result[k.lower() if isinstance(k, Keyword) else k] = normalized
        return result
    if isinstance(value, (str, bytes, bytearray)):
        return value
    if isinstance(value, Keyword):
        return value.lower()
    if isinstance(value, _SEQUENCE_TYPES):
        return [to_string_keys(item) for item in value]
    return value


def to_keyword(raw: str) -> Keyword:
    """Promote a decoded object key to a Keyword, as-is."""
    return Keyword(raw)


def to_keyword_keys(pairs: Iterable[tuple[str, Any]]) -> dict[Keyword, Any]:
    """Build a Keyword-keyed dict from decoded ``(key, value)`` pairs."""
    return {to_keyword(k): v for k, v in pairs}


# ── Query parameters ──────────────────────────────────────────────────────

def _param_key(key: Any, keyword_mode: bool) -> str:
    if isinstance(key, Keyword):
        return key.lower() if keyword_mode else key.name
    return str(key)


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Keyword):
        return value.lower()
    if isinstance(value, (list, tuple)):
        return ",".join(_param_value(item) for item in value)
    return str(value)


def normalize_params(
    parameters: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None,
    keyword_mode: bool,
) -> list[tuple[str, str]]:
    """
    Return query parameters as an ordered list of ``(key, value)`` strings.

    In keyword mode Keyword keys are lowercased like map keys. Values are
    rendered the way Elasticsearch expects (``true``/``false``, comma lists);
    ``None`` values are dropped.
    """
    if not parameters:
        return []
    items = parameters.items() if isinstance(parameters, Mapping) else parameters
    return [
        (_param_key(k, keyword_mode), _param_value(v))
        for k, v in items
        if v is not None
    ]


__all__ = ["to_string_keys", "to_keyword", "to_keyword_keys", "normalize_params"]


__sdk_export__ = {
    "surface": "client",
    "exports": ["to_string_keys", "to_keyword"],
    "description": "Key-casing normalization between keyword and string keys",
    "tier": "tier1_runtime",
    "module": "casing",
}

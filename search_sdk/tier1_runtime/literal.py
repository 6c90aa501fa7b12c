"""
search_sdk.tier1_runtime.literal
──────────────────────────────────
Inline map construction and a matching debug printer.

    map_of(kw("query"), map_of(kw("term"), map_of(kw("user"), "kimchy")))
    # → {:query {:term {:user "kimchy"}}} when printed with format_map_literal

``map_of`` produces the same plain dict ``send(data=...)`` accepts.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from search_sdk.tier0_core.errors import OddFormCount
from search_sdk.tier0_core.keywords import Keyword


def map_of(*forms: Any) -> dict[Any, Any]:
    """Build a dict from alternating key/value arguments."""
    if len(forms) % 2:
        raise OddFormCount(len(forms))
    return dict(zip(forms[::2], forms[1::2]))


def _format_form(value: Any) -> str:
    if isinstance(value, Mapping):
        return format_map_literal(value)
    if isinstance(value, Keyword):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_form(item) for item in value) + "]"
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def format_map_literal(value: Mapping[Any, Any]) -> str:
    """Render a map as ``{k1 v1, k2 v2}`` for debugging output."""
    entries = ", ".join(
        f"{_format_form(k)} {_format_form(v)}" for k, v in value.items()
    )
    return "{" + entries + "}"


__all__ = ["map_of", "format_map_literal"]


__sdk_export__ = {
    "surface": "client",
    "exports": ["map_of", "format_map_literal"],
    "description": "Map literal builder and debug printer",
    "tier": "tier1_runtime",
    "module": "literal",
}

"""
search_sdk.tier0_core.keywords
───────────────────────────────
Symbolic tokens. A ``Keyword`` is a named, hashable token distinct from a
plain string: ``Keyword("hits") != "hits"``. Maps keyed by keywords are
turned into string-keyed JSON on the way out and, in keyword mode, decoded
JSON object keys come back as keywords.

Usage::

    from search_sdk import keyword as kw

    query = {kw("query"): {kw("match_all"): {}}}
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Keyword:
    """An immutable symbolic token identified by its name."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Keyword name must be a str, got {type(self.name).__name__}")

    def lower(self) -> str:
        """Return the lowercase string form used on the wire."""
        return self.name.lower()

    def __repr__(self) -> str:
        return f":{self.name}"

    __str__ = __repr__


def keyword(name: str | Keyword) -> Keyword:
    """Return a Keyword for *name*; an existing Keyword is returned as-is."""
    if isinstance(name, Keyword):
        return name
    return Keyword(name)


__all__ = ["Keyword", "keyword"]


__sdk_export__ = {
    "surface": "client",
    "exports": ["Keyword", "keyword"],
    "description": "Symbolic keyword tokens used as map keys in keyword mode",
    "tier": "tier0_core",
    "module": "keywords",
}

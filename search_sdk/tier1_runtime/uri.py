"""
search_sdk.tier1_runtime.uri
─────────────────────────────
Path composition. A path spec is a string segment, a Keyword, or a
sequence of path specs; every segment is rendered with a leading ``/``.

    compose(["my-index", "_search"])       → "/my-index/_search"
    compose([Keyword("Logs"), "_doc", 7])  → "/logs/_doc/7"
    compose([])                            → ""
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from search_sdk.tier0_core.keywords import Keyword

if TYPE_CHECKING:
    from search_sdk.tier3_platform.client import Client


def compose(path_spec: Any) -> str:
    """Render *path_spec* as a URI path."""
    if isinstance(path_spec, str):
        return "/" + path_spec
    if isinstance(path_spec, Keyword):
        return "/" + path_spec.lower()
    if isinstance(path_spec, (list, tuple)):
        return "".join(compose(segment) for segment in path_spec)
    return "/" + str(path_spec)


def build_full_uri(client: Client, path_spec: Any) -> str:
    """Return the client's endpoint followed by the composed path."""
    return client.endpoint + compose(path_spec)


__all__ = ["compose", "build_full_uri"]


__sdk_export__ = {
    "surface": "client",
    "exports": ["compose", "build_full_uri"],
    "description": "Request path composition against a client endpoint",
    "tier": "tier1_runtime",
    "module": "uri",
}

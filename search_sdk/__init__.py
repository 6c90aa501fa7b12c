"""
search_sdk
────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from search_sdk.tier0_core.keywords import Keyword, keyword
from search_sdk.tier0_core.logging import get_logger, bind_context, clear_context
from search_sdk.tier0_core.errors import (
    SearchError,
    InvalidClient,
    ElasticsearchClientError,
    MalformedResponse,
    OddFormCount,
    SerializationError,
    TransportFailure,
    ConfigurationError,
)
from search_sdk.tier0_core.config import (
    get_config,
    SearchConfig,
    get_keyword_mode,
    set_keyword_mode,
    keyword_mode,
)
from search_sdk.tier0_core.http import HTTP, SearchResponse

from search_sdk.tier1_runtime.uri import compose, build_full_uri
from search_sdk.tier1_runtime.casing import to_string_keys, to_keyword
from search_sdk.tier1_runtime.serialize import encode, decode, serialize, deserialize
from search_sdk.tier1_runtime.context import (
    get_context,
    set_context,
    new_context,
    RequestContext,
)
from search_sdk.tier1_runtime.literal import map_of, format_map_literal

from search_sdk.tier3_platform.client import Client
from search_sdk.tier3_platform.dispatch import send, get, post, put, delete, head

__version__ = "0.1.0"
__all__ = [
    # keywords
    "Keyword", "keyword",
    # logging
    "get_logger", "bind_context", "clear_context",
    # errors
    "SearchError", "InvalidClient", "ElasticsearchClientError",
    "MalformedResponse", "OddFormCount", "SerializationError",
    "TransportFailure", "ConfigurationError",
    # config
    "get_config", "SearchConfig",
    "get_keyword_mode", "set_keyword_mode", "keyword_mode",
    # http
    "HTTP", "SearchResponse",
    # uri
    "compose", "build_full_uri",
    # casing
    "to_string_keys", "to_keyword",
    # serialize
    "encode", "decode", "serialize", "deserialize",
    # context
    "get_context", "set_context", "new_context", "RequestContext",
    # literal
    "map_of", "format_map_literal",
    # client
    "Client",
    # dispatch
    "send", "get", "post", "put", "delete", "head",
]

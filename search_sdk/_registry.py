"""
search_sdk._registry
─────────────────────────
Internal module registry — the single source of truth for which modules
make up the public API and which names each one exports.

Adding a new module:
  1. Implement it in the right tier
  2. Add ``__sdk_export__`` to the module
  3. Add one tuple to TIER_MODULES below
  4. Re-export its names from ``search_sdk/__init__.py``

The test suite checks that every exported name is reachable from the
top-level package, so step 4 cannot be forgotten silently.
"""
from __future__ import annotations

import importlib
from typing import Any

# ---------------------------------------------------------------------------
# Ordered list of (tier_path, module_name) for all modules that declare
# ``__sdk_export__``.
# ---------------------------------------------------------------------------
TIER_MODULES: list[tuple[str, str]] = [
    # tier0_core — foundational layer
    ("tier0_core", "errors"),
    ("tier0_core", "config"),
    ("tier0_core", "logging"),
    ("tier0_core", "keywords"),
    ("tier0_core", "http"),
    # tier1_runtime — marshalling
    ("tier1_runtime", "uri"),
    ("tier1_runtime", "casing"),
    ("tier1_runtime", "serialize"),
    ("tier1_runtime", "literal"),
    ("tier1_runtime", "context"),
    # tier3_platform — client and dispatch
    ("tier3_platform", "client"),
    ("tier3_platform", "dispatch"),
]


def collect_exports() -> dict[str, list[str]]:
    """
    Return ``{qualified_module_name: [exported names]}`` for every module
    in ``TIER_MODULES``.

    Raises ImportError when a listed module cannot be imported and
    AttributeError when an exported name is missing from its module.
    """
    exports: dict[str, list[str]] = {}

    for tier_path, module_name in TIER_MODULES:
        qualified = f"search_sdk.{tier_path}.{module_name}"
        mod = importlib.import_module(qualified)

        export_meta: dict[str, Any] | None = getattr(mod, "__sdk_export__", None)
        if not export_meta:
            continue

        names: list[str] = list(export_meta.get("exports", []))
        for name in names:
            if not hasattr(mod, name):
                raise AttributeError(f"{qualified} exports {name!r} but does not define it")
        exports[qualified] = names

    return exports

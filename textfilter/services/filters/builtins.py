"""
Built-in filter registrations.
Call register_all_builtins() once at application startup.
"""

from __future__ import annotations

from typing import Optional

from .registry import FilterRegistry, filter_registry
from .stages import MacroPost, MacroPre
from . import (
    filter_markup,
    filter_postprocess,
    macro_code,
    macro_note,
)


def register_all_builtins(registry: Optional[FilterRegistry] = None) -> FilterRegistry:
    """Register every built-in filter, plus the two macro meta-filters."""
    registry = registry if registry is not None else filter_registry

    registry.register(MacroPre(registry=registry))
    registry.register(MacroPost(registry=registry))

    filter_markup.register(registry)
    macro_code.register(registry)
    macro_note.register(registry)
    filter_postprocess.register(registry)
    return registry

"""
TextFilterPipeline
==================
Runs one piece of content through a configured filter chain:

    macropre  →  markup  →  macropost  →  post-process filters…

The chain is described by a FilterParams record (which markup filter, which
post-process filters, per-option overrides).  Every step is looked up by
short name in the registry.  An unknown markup filter is a configuration
error; unknown macro stages or post-process filters are logged and skipped.

Usage::

    register_all_builtins()
    pipeline = TextFilterPipeline()
    html = pipeline.render(raw_text, FilterParams(markup="markdown", filters=["sanitize"]))
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.config import get_settings
from ..schemas import FilterParams
from .filters.base import TextFilter
from .filters.errors import FilterNotFound
from .filters.registry import FilterRegistry, filter_registry

logger = logging.getLogger(__name__)

MACRO_PRE_STAGE = "macropre"
MACRO_POST_STAGE = "macropost"


class TextFilterPipeline:
    def __init__(self, registry: Optional[FilterRegistry] = None) -> None:
        self._registry = registry if registry is not None else filter_registry

    # ----------------------------------------------------------------- public

    def filter_chain(self, params: FilterParams) -> list[TextFilter]:
        """Resolve the ordered list of filters *params* asks for."""
        names = [MACRO_PRE_STAGE, params.markup, MACRO_POST_STAGE, *params.filters]
        chain: list[TextFilter] = []

        for name in names:
            text_filter = self._registry.lookup(name)
            if text_filter is None:
                if name == params.markup:
                    raise FilterNotFound(name)
                logger.warning("Skipping unknown text filter %r in %r", name, params.name)
                continue
            chain.append(text_filter)

        return chain

    def render(self, text: str, params: Optional[FilterParams] = None) -> str:
        """Filter *text* through the chain and return the final output."""
        if not text:
            return ""

        if params is None:
            params = FilterParams(markup=get_settings().default_markup)

        for text_filter in self.filter_chain(params):
            text = text_filter.filtertext(text, params)
        return text

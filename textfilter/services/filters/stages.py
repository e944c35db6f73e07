"""
MacroPre / MacroPost — macro expansion meta-filters.

Each one threads the text through every registered macro filter of its
stage, in registration order.  A stage with no filters returns the text
unchanged; an exception from any filter aborts the stage and propagates.
"""

from __future__ import annotations

from functools import reduce
from typing import Optional

from ...schemas import FilterParams
from .base import TextFilter
from .kinds import FilterType
from .registry import FilterRegistry, filter_registry


class _MacroStage(TextFilter):
    stage: FilterType

    def __init__(self, registry: Optional[FilterRegistry] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._registry = registry if registry is not None else filter_registry

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        macros = self._registry.by_type(self.stage)
        return reduce(lambda new_text, macro: macro.filtertext(new_text, params), macros, text)


class MacroPre(_MacroStage):
    display_name = "MacroPre"
    description = "Macro expansion meta-filter (pre-markup)"
    stage = FilterType.MACRO_PRE


class MacroPost(_MacroStage):
    display_name = "MacroPost"
    description = "Macro expansion meta-filter (post-markup)"
    stage = FilterType.MACRO_POST

"""
Filter types — the five stage buckets a filter can belong to.
"""

from __future__ import annotations

from enum import Enum


class FilterType(str, Enum):
    MACRO_PRE = "macropre"
    MACRO_POST = "macropost"
    MARKUP = "markup"
    POST_PROCESS = "postprocess"
    OTHER = "other"

    @property
    def is_macro(self) -> bool:
        """Macro stages expand custom inline tags; the rest do not."""
        return self in (FilterType.MACRO_PRE, FilterType.MACRO_POST)

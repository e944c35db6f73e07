"""
Text filter subsystem — public API.
"""

from .errors import FilterIdentityError, FilterNotFound, MissingDefaultConfig, TextFilterError
from .kinds import FilterType
from .base import MarkupFilter, PostProcessFilter, TextFilter
from .macro import MacroFilter, MacroPostFilter, MacroPreFilter
from .registry import FilterRegistry, filter_registry, register_filter
from .stages import MacroPost, MacroPre
from .builtins import register_all_builtins

__all__ = [
    "FilterIdentityError",
    "FilterNotFound",
    "MissingDefaultConfig",
    "TextFilterError",
    "FilterType",
    "TextFilter",
    "MarkupFilter",
    "PostProcessFilter",
    "MacroFilter",
    "MacroPreFilter",
    "MacroPostFilter",
    "FilterRegistry",
    "filter_registry",
    "register_filter",
    "MacroPre",
    "MacroPost",
    "register_all_builtins",
]

"""
FilterRegistry — central store of all registered text filters.

Filters are keyed by their short name and bucketed by filter type.
Register an instance directly, or decorate a filter class to register a
default-constructed instance of it:

    filter_registry.register(Markdown())

    @register_filter
    class Code(MacroPreFilter):
        ...

Registration happens at import time.  Re-registering a short name replaces
the earlier filter.  Writers are serialised by a lock; readers only ever
see immutable snapshots, so lookups need no locking.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional, TypeVar

from ...schemas import FilterInfo
from .base import TextFilter
from .errors import FilterNotFound
from .kinds import FilterType

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=type[TextFilter])

_Buckets = Mapping[FilterType, tuple[TextFilter, ...]]


def _empty_buckets() -> _Buckets:
    return MappingProxyType({ft: () for ft in FilterType})


class FilterRegistry:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._filters: Mapping[str, TextFilter] = MappingProxyType({})
        self._buckets: _Buckets = _empty_buckets()

    # ---------------------------------------------------------------- register

    def register(self, text_filter: TextFilter) -> TextFilter:
        """Add *text_filter*, replacing any filter with the same short name."""
        name = text_filter.short_name   # raises FilterIdentityError before any change

        with self._lock:
            filters = dict(self._filters)
            replaced = filters.get(name)
            filters[name] = text_filter

            buckets: dict[FilterType, list[TextFilter]] = {ft: [] for ft in FilterType}
            for f in filters.values():
                buckets[f.filter_type].append(f)

            self._filters = MappingProxyType(filters)
            self._buckets = MappingProxyType({ft: tuple(fs) for ft, fs in buckets.items()})

        if replaced is not None and replaced is not text_filter:
            logger.debug("Replaced text filter: %s (%r -> %r)", name, replaced, text_filter)
        else:
            logger.debug("Registered text filter: %s (%s)", name, text_filter.filter_type.value)
        return text_filter

    # ------------------------------------------------------------------ lookup

    def lookup(self, name: str) -> Optional[TextFilter]:
        """Return the filter registered as *name*, or None."""
        return self._filters.get(name)

    def require(self, name: str) -> TextFilter:
        """Like lookup(), but raise FilterNotFound on a miss."""
        text_filter = self._filters.get(name)
        if text_filter is None:
            raise FilterNotFound(name)
        return text_filter

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    # ---------------------------------------------------------- introspection

    def all(self) -> list[TextFilter]:
        return list(self._filters.values())

    def by_type(self, filter_type: FilterType | str) -> list[TextFilter]:
        """Filters of *filter_type* in registration order (empty if none)."""
        return list(self._buckets[FilterType(filter_type)])

    def filter_types(self) -> dict[FilterType, list[TextFilter]]:
        return {ft: list(fs) for ft, fs in self._buckets.items()}

    def macro_filters(self) -> list[TextFilter]:
        return [f for f in self._filters.values() if f.filter_type.is_macro]

    def registered_names(self) -> list[str]:
        return sorted(self._filters.keys())

    def describe(self) -> list[FilterInfo]:
        """Display metadata for every registered filter, e.g. for a help page."""
        return [
            FilterInfo(
                short_name=name,
                filter_type=f.filter_type.value,
                display_name=f.display_name,
                description=f.description,
                help_text=f.help_text(),
                default_config=f.default_config(),
                is_macro=f.filter_type.is_macro,
            )
            for name, f in self._filters.items()
        ]


# Singleton shared across the application
filter_registry = FilterRegistry()


def register_filter(cls: F) -> F:
    """Class decorator: register a default instance of *cls* with filter_registry."""
    filter_registry.register(cls())
    return cls

"""
TextFilter — base class for every text filter.

A filter instance is both the registry descriptor (short name, type,
display metadata, default configuration) and the transform itself
(``filtertext``).  Subclasses set the class-level metadata and override
``filtertext``; they are registered explicitly::

    @register_filter
    class Smartypants(PostProcessFilter):
        display_name = "Smartypants"
        description = "Converts plain ASCII punctuation to typographic entities"

        def filtertext(self, text, params=None):
            ...
"""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar, Optional

from ...core.logging import get_logger
from ...schemas import FilterParams
from ..sanitizer import HtmlSanitizer, get_sanitizer
from .errors import FilterIdentityError, MissingDefaultConfig
from .kinds import FilterType

# Final alphabetic segment of a dotted identity: "pkg.mod.Markdown" -> "Markdown"
_IDENTITY_RE = re.compile(r'\.([a-zA-Z]+)$')

DefaultConfig = dict[str, dict[str, Any]]


class TextFilter:
    filter_type: ClassVar[FilterType] = FilterType.OTHER
    display_name: ClassVar[str] = "Unknown Text Filter"
    description: ClassVar[str] = "Unknown Text Filter Description"
    reloadable: ClassVar[bool] = False

    def __init__(self, sanitizer: Optional[HtmlSanitizer] = None) -> None:
        self._sanitizer = sanitizer

    # --------------------------------------------------------------- identity

    @property
    def identity(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def component_name(self) -> str:
        """Name used when referring to the filter's help component."""
        m = _IDENTITY_RE.search(self.identity)
        if m is None:
            raise FilterIdentityError(self.identity)
        return f"plugins/textfilters/{m.group(1)}".lower()

    @property
    def short_name(self) -> str:
        """Registry key and macro tag name, e.g. ``markdown`` or ``code``."""
        return self.component_name.rsplit("/", 1)[-1]

    # ----------------------------------------------------------------- config

    def default_config(self) -> DefaultConfig:
        return {}

    def help_text(self) -> str:
        return ""

    def config_value(self, params: Optional[FilterParams], name: str) -> Any:
        """
        Look up config option *name*, falling back to the declared default.

        A supplied value wins only when it is truthy.  Raises
        MissingDefaultConfig when the option has neither a value nor a
        default.
        """
        supplied = params.filter_params.get(name) if params is not None else None
        if supplied:
            return supplied
        try:
            return self.default_config()[name]["default"]
        except KeyError:
            raise MissingDefaultConfig(self.short_name, name) from None

    # ------------------------------------------------------------ collaborators

    def sanitize(self, html: str, **options) -> str:
        sanitizer = self._sanitizer if self._sanitizer is not None else get_sanitizer()
        return sanitizer.sanitize(html, **options)

    @property
    def logger(self) -> logging.Logger:
        return get_logger(type(self).__module__)

    # -------------------------------------------------------------- transform

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not implement filtertext()")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.filter_type.value}>"


# -----------------------------------------------------------------------------

class MarkupFilter(TextFilter):
    filter_type = FilterType.MARKUP


class PostProcessFilter(TextFilter):
    filter_type = FilterType.POST_PROCESS

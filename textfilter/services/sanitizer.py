"""
HtmlSanitizer — allow-list HTML cleaning for filter output.

Thin wrapper over ``bleach.clean``.  The allow-lists come from Settings so a
deployment can widen or narrow them without code changes.  Filters never
implement sanitization rules themselves; they call ``TextFilter.sanitize``,
which delegates here.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Mapping, Optional

import bleach

from ..core.config import get_settings

logger = logging.getLogger(__name__)


class HtmlSanitizer:
    def __init__(
        self,
        tags: Optional[Iterable[str]] = None,
        attributes: Optional[Mapping[str, list[str]]] = None,
        protocols: Optional[Iterable[str]] = None,
        strip: Optional[bool] = None,
    ) -> None:
        settings = get_settings()
        self.tags = frozenset(tags if tags is not None else settings.sanitizer_allowed_tags)
        self.attributes = dict(
            attributes if attributes is not None else settings.sanitizer_allowed_attributes
        )
        self.protocols = frozenset(
            protocols if protocols is not None else settings.sanitizer_allowed_protocols
        )
        self.strip = settings.sanitizer_strip if strip is None else strip

    def sanitize(self, html: str, **options) -> str:
        """
        Clean *html* against the allow-list.

        Keyword *options* are passed through to ``bleach.clean`` and override
        the configured ``tags``, ``attributes``, ``protocols`` and ``strip``.
        """
        if not html:
            return html
        kwargs = {
            "tags": self.tags,
            "attributes": self.attributes,
            "protocols": self.protocols,
            "strip": self.strip,
        }
        kwargs.update(options)
        return bleach.clean(html, **kwargs)


@lru_cache(maxsize=1)
def get_sanitizer() -> HtmlSanitizer:
    """Shared sanitizer built from the current settings."""
    logger.debug("Building default HTML sanitizer")
    return HtmlSanitizer()

"""
Macro filters
=============
Expand custom inline tags in the configured namespace (``publify`` by
default) into computed output.

    <publify:NAME attr="val" .../>                 — self-closing form
    <publify:NAME attr="val">body</publify:NAME>   — paired form

NAME is the filter's short name.  Expansion runs two passes over the text:
every self-closing tag first, then every paired tag in the pass-1 output.
Within one pass matches never overlap, never nest, and a macro's output is
not re-scanned.

Tags are located without backtracking: a regex matches only the fixed
``<ns:NAME`` head, the end of the tag is the next ``>`` found with a
substring search (shared by every head before it), and the closing tag of a
paired form is found the same way.  Attribute text longer than
``max_tag_attributes_length`` leaves the tag unexpanded.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from ...core.config import get_settings
from ...schemas import FilterParams
from .base import TextFilter
from .kinds import FilterType

AttributeMap = dict[str, str]

_ATTR_DOUBLE = re.compile(r'([^\s=]+)="([^"]*)"')
_ATTR_SINGLE = re.compile(r"([^\s=]+)='([^']*)'")

# A tag's attribute text must start with one of these, or be empty
_ATTR_LEAD = (" ", "\t")


@lru_cache(maxsize=256)
def _tag_head(namespace: str, name: str) -> re.Pattern:
    """``<ns:NAME`` followed by whitespace, ``/`` or ``>``; never ``<ns:NAMEx``."""
    return re.compile(f"<{re.escape(namespace)}:{re.escape(name)}(?=[ \\t/>])")


class _TagScanner:
    """
    Finds complete ``<ns:NAME ...>`` / ``<ns:NAME .../>`` tags in one text.

    The position of the next ``>`` is cached, so a run of heads that share
    the same ``>`` (or have none) costs one substring search in total.
    """

    def __init__(self, text: str, head: re.Pattern, max_attrs: int) -> None:
        self.text = text
        self.head = head
        self.max_attrs = max_attrs
        self._gt = -1

    def find(self, pos: int, self_closing: bool) -> Optional[tuple[int, int, str]]:
        """(start, end, attribute text) of the next tag at or after *pos*."""
        text = self.text
        while True:
            m = self.head.search(text, pos)
            if m is None:
                return None
            attrs_start = pos = m.end()

            if self._gt < attrs_start:
                self._gt = text.find(">", attrs_start)
                if self._gt < 0:
                    return None
            gt = self._gt

            attrs_end = gt - 1 if self_closing else gt
            if self_closing and text[attrs_end] != "/":
                continue
            if attrs_end < attrs_start or attrs_end - attrs_start > self.max_attrs + 1:
                continue
            if attrs_end > attrs_start and text[attrs_start] not in _ATTR_LEAD:
                continue

            return m.start(), gt + 1, text[attrs_start:attrs_end]


class MacroFilter(TextFilter):

    # ------------------------------------------------------------------ parse

    @staticmethod
    def attributes_parse(string: str) -> AttributeMap:
        """
        Hand it a tag string like ``<a href="foo" title='bar'>`` and get back
        ``{"href": "foo", "title": "bar"}``.

        Double-quoted pairs are collected first, then single-quoted pairs
        from the same original string, so a key given in both styles ends up
        with its single-quoted value.  Anything that isn't a quoted
        ``key=value`` pair is ignored.
        """
        attributes: AttributeMap = {}
        for m in _ATTR_DOUBLE.finditer(string):
            attributes[m.group(1)] = m.group(2)
        for m in _ATTR_SINGLE.finditer(string):
            attributes[m.group(1)] = m.group(2)
        return attributes

    # ----------------------------------------------------------------- expand

    def macrofilter(
        self,
        attrib: AttributeMap,
        text: str = "",
        params: Optional[FilterParams] = None,
    ) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not implement macrofilter()")

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        settings = get_settings()
        namespace, name = settings.macro_namespace, self.short_name
        head = _tag_head(namespace, name)
        max_attrs = settings.max_tag_attributes_length

        text = self._expand_self_closing(_TagScanner(text, head, max_attrs), params)
        return self._expand_paired(
            _TagScanner(text, head, max_attrs), f"</{namespace}:{name}>", params
        )

    def _expand_self_closing(self, scanner: _TagScanner, params: Optional[FilterParams]) -> str:
        text = scanner.text
        parts: list[str] = []
        pos = 0

        while True:
            tag = scanner.find(pos, self_closing=True)
            if tag is None:
                break
            start, end, attrs = tag
            parts.append(text[pos:start])
            parts.append(self.macrofilter(self.attributes_parse(attrs), params=params))
            pos = end

        parts.append(text[pos:])
        return "".join(parts)

    def _expand_paired(
        self,
        scanner: _TagScanner,
        closing: str,
        params: Optional[FilterParams],
    ) -> str:
        text = scanner.text
        parts: list[str] = []
        pos = 0

        while True:
            tag = scanner.find(pos, self_closing=False)
            if tag is None:
                break
            start, body_start, attrs = tag
            end = text.find(closing, body_start)
            if end < 0:
                # no closing tag anywhere after this point: nothing else can match
                break

            parts.append(text[pos:start])
            body = text[body_start:end]
            parts.append(self.macrofilter(self.attributes_parse(attrs), body, params=params))
            pos = end + len(closing)

        parts.append(text[pos:])
        return "".join(parts)


# -----------------------------------------------------------------------------

class MacroPreFilter(MacroFilter):
    filter_type = FilterType.MACRO_PRE


class MacroPostFilter(MacroFilter):
    filter_type = FilterType.MACRO_POST

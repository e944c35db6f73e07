"""
Note macro (post-markup)
------------------------
<publify:note type="warning">Back up *first*.</publify:note>

Runs after markup conversion, so the body is already HTML.  Produces an
inline admonition span:

  <span class="admonition admonition-warning">
    <strong class="admonition-title">Warning:</strong> Back up <em>first</em>.
  </span>

type  — note | tip | warning | danger   (default from filter params, "note")
title — overrides the label derived from the type
"""

from __future__ import annotations

import html
from typing import Optional

from ...schemas import FilterParams
from .macro import AttributeMap, MacroPostFilter
from .registry import FilterRegistry

NOTE_TYPES = ("note", "tip", "warning", "danger")


class Note(MacroPostFilter):
    display_name = "Note"
    description = "Highlight a passage as a note, tip, warning or danger"

    def default_config(self):
        return {
            "type": {"default": "note", "description": "Admonition type when the tag names none"},
        }

    def macrofilter(self, attrib: AttributeMap, text: str = "", params: Optional[FilterParams] = None) -> str:
        kind = str(attrib.get("type") or self.config_value(params, "type")).lower()
        if kind not in NOTE_TYPES:
            self.logger.warning("Unknown note type %r, using 'note'", kind)
            kind = "note"
        title = attrib.get("title") or kind.capitalize()

        return (
            f'<span class="admonition admonition-{kind}">'
            f'<strong class="admonition-title">{html.escape(title)}:</strong> {text}'
            f'</span>'
        )


def register(registry: FilterRegistry) -> None:
    registry.register(Note())

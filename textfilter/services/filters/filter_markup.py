"""
Markup filters
--------------
markdown — Python-Markdown, extensions taken from Settings.markdown_extensions
plain    — no markup; text passes through untouched
"""

from __future__ import annotations

from typing import Optional

import markdown

from ...core.config import get_settings
from ...schemas import FilterParams
from .base import MarkupFilter
from .registry import FilterRegistry


class Markdown(MarkupFilter):
    display_name = "Markdown"
    description = "Markdown markup language from Daring Fireball"

    def help_text(self) -> str:
        return (
            "Markdown is a simple text-to-HTML converter that turns common text "
            "idioms into HTML.  *emphasis*, **strong**, `code`, [links](url), "
            "# headings and indented code blocks are all supported; raw HTML "
            "passes through."
        )

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        return markdown.markdown(text, extensions=get_settings().markdown_extensions)


class Plain(MarkupFilter):
    display_name = "None"
    description = "Raw HTML only"

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        return text


def register(registry: FilterRegistry) -> None:
    registry.register(Markdown())
    registry.register(Plain())

"""
Code macro (pre-markup)
-----------------------
<publify:code lang="python">
def hello():
    return "<b>"
</publify:code>

Escapes the body and wraps it in <pre><code class="language-LANG">, so the
markup stage leaves it alone.

Attributes:
  lang        — language name, added as a CSS class
  linenumber  — "true" prefixes every line with its number
  title       — optional caption shown above the block
"""

from __future__ import annotations

import html
from typing import Optional

from ...schemas import FilterParams
from .macro import AttributeMap, MacroPreFilter
from .registry import FilterRegistry

_TRUE = ("on", "1", "true", "yes")


class Code(MacroPreFilter):
    display_name = "Code"
    description = "Apply syntax-highlighting classes to code blocks"

    def default_config(self):
        return {
            "linenumber": {"default": "false", "description": "Number every line of code"},
            "lang": {"default": "", "description": "Language used when the tag names none"},
        }

    def help_text(self) -> str:
        return (
            'Wrap code in <publify:code lang="ruby">...</publify:code>.  The body '
            'is HTML-escaped.  Add linenumber="true" to number the lines and '
            'title="..." for a caption.'
        )

    def macrofilter(self, attrib: AttributeMap, text: str = "", params: Optional[FilterParams] = None) -> str:
        lang = str(attrib.get("lang") or self.config_value(params, "lang"))
        numbered = str(attrib.get("linenumber") or self.config_value(params, "linenumber")).lower() in _TRUE
        title = attrib.get("title")

        # leading/trailing newline belong to the tag layout, not the code
        body = text.strip("\r\n")
        lines = body.splitlines() or [""]
        if numbered:
            width = len(str(len(lines)))
            code = "\n".join(
                f'<span class="lineno">{n:>{width}}</span> {html.escape(line)}'
                for n, line in enumerate(lines, 1)
            )
        else:
            code = "\n".join(html.escape(line) for line in lines)

        class_attr = f' class="language-{html.escape(lang)}"' if lang else ""
        block = f"<pre><code{class_attr}>{code}</code></pre>"
        if title:
            block = f'<div class="codeblock"><div class="codeblock-title">{html.escape(title)}</div>{block}</div>'
        return block


def register(registry: FilterRegistry) -> None:
    registry.register(Code())

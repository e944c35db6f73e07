#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Text filter configuration.

All values can be overridden via TEXTFILTER_* environment variables or a
.env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="TEXTFILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Macros ─────────────────────────────────────────────────────────────

    macro_namespace: str = "publify"
    max_tag_attributes_length: int = 2048   # bounds attribute scanning per tag

    # ── Markup ─────────────────────────────────────────────────────────────

    default_markup: str = "markdown"
    markdown_extensions: list[str] = ["extra", "sane_lists"]

    # ── Sanitizer ──────────────────────────────────────────────────────────

    sanitizer_allowed_tags: list[str] = [
        "a", "abbr", "acronym", "b", "blockquote", "br", "cite", "code",
        "dd", "del", "div", "dl", "dt", "em", "h1", "h2", "h3", "h4", "h5",
        "h6", "hr", "i", "img", "ins", "kbd", "li", "ol", "p", "pre", "span",
        "strong", "sub", "sup", "table", "tbody", "td", "tfoot", "th",
        "thead", "tr", "ul",
    ]
    sanitizer_allowed_attributes: dict[str, list[str]] = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height"],
        "abbr": ["title"],
        "acronym": ["title"],
        "td": ["colspan", "rowspan"],
        "th": ["colspan", "rowspan", "scope"],
    }
    sanitizer_allowed_protocols: list[str] = ["http", "https", "mailto"]
    sanitizer_strip: bool = False

    # ── Logging ────────────────────────────────────────────────────────────

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------

"""
Pydantic v2 schemas for filter configuration and filter introspection.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Filter configuration
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FilterParams(BaseModel):
    """
    One stored text-filter setup: which markup filter to use, which
    post-process filters follow it, and per-option overrides.
    """

    name: str = "default"
    markup: str = "markdown"
    filters: list[str] = Field(default_factory=list)
    filter_params: dict[str, Any] = Field(default_factory=dict)

    @field_validator("markup")
    @classmethod
    def markup_lowercase(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("filters")
    @classmethod
    def filters_lowercase(cls, v: list[str]) -> list[str]:
        return [f.strip().lower() for f in v if f.strip()]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Introspection
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FilterInfo(BaseModel):
    short_name: str
    filter_type: str
    display_name: str
    description: str
    help_text: str = ""
    default_config: dict[str, dict[str, Any]] = Field(default_factory=dict)
    is_macro: bool = False

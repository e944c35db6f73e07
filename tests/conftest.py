#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Every test starts from freshly read settings and, where it asks for one, an
empty FilterRegistry so registrations never leak between tests.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from textfilter.core.config import get_settings
from textfilter.services.filters import FilterRegistry, register_all_builtins
from textfilter.services.sanitizer import get_sanitizer


# ── Settings are cached; clear around every test so env overrides apply ───────

@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for var in ("TEXTFILTER_MACRO_NAMESPACE", "TEXTFILTER_DEFAULT_MARKUP"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_sanitizer.cache_clear()
    yield
    get_settings.cache_clear()
    get_sanitizer.cache_clear()


# ── Registries ────────────────────────────────────────────────────────────────

@pytest.fixture
def registry() -> FilterRegistry:
    return FilterRegistry()


@pytest.fixture
def builtin_registry() -> FilterRegistry:
    return register_all_builtins(FilterRegistry())

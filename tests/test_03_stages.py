"""
Stage Test Suite
================
Tests for the MacroPre / MacroPost meta-filters:
  - fold order follows registration order
  - empty stages are a no-op
  - failures abort the stage
  - each stage only runs its own macros

Run with:  pytest tests/test_03_stages.py -v
"""

from __future__ import annotations

import pytest

from textfilter.schemas import FilterParams
from textfilter.services.filters import (
    FilterRegistry,
    FilterType,
    MacroPost,
    MacroPostFilter,
    MacroPre,
    MacroPreFilter,
)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Sample macros — each appends its own letter
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Alpha(MacroPreFilter):
    def filtertext(self, text, params=None):
        return text + "A"


class Beta(MacroPreFilter):
    def filtertext(self, text, params=None):
        return text + "B"


class Gamma(MacroPreFilter):
    def filtertext(self, text, params=None):
        return text + "C"


class Omega(MacroPostFilter):
    def filtertext(self, text, params=None):
        return text + "Z"


class Boom(MacroPreFilter):
    def filtertext(self, text, params=None):
        raise ValueError("boom")


class Upcase(MacroPostFilter):
    def macrofilter(self, attrib, text="", params=None):
        return text.upper()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. MacroPre
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestMacroPre:
    def setup_method(self):
        self.reg = FilterRegistry()
        self.stage = MacroPre(registry=self.reg)

    def test_empty_stage_is_noop(self):
        assert self.stage.filtertext("unchanged <publify:x/>") == "unchanged <publify:x/>"

    def test_fold_in_registration_order(self):
        self.reg.register(Alpha())
        self.reg.register(Beta())
        self.reg.register(Gamma())
        assert self.stage.filtertext("x") == "xABC"

    def test_order_is_registration_not_name(self):
        self.reg.register(Gamma())
        self.reg.register(Alpha())
        self.reg.register(Beta())
        assert self.stage.filtertext("x") == "xCAB"

    def test_registrations_after_construction_are_seen(self):
        assert self.stage.filtertext("x") == "x"
        self.reg.register(Alpha())
        assert self.stage.filtertext("x") == "xA"

    def test_ignores_post_macros(self):
        self.reg.register(Alpha())
        self.reg.register(Omega())
        assert self.stage.filtertext("x") == "xA"

    def test_failure_aborts_stage(self):
        calls = []

        class Tail(MacroPreFilter):
            def filtertext(self, text, params=None):
                calls.append(text)
                return text

        self.reg.register(Alpha())
        self.reg.register(Boom())
        self.reg.register(Tail())

        with pytest.raises(ValueError, match="boom"):
            self.stage.filtertext("x")
        assert calls == []

    def test_params_threaded_through(self):
        seen = []

        class Probe(MacroPreFilter):
            def filtertext(self, text, params=None):
                seen.append(params)
                return text

        self.reg.register(Probe())
        params = FilterParams(filter_params={"k": "v"})
        self.stage.filtertext("x", params)
        assert seen == [params]

    def test_stage_metadata(self):
        assert self.stage.short_name == "macropre"
        assert self.stage.filter_type is FilterType.OTHER
        assert self.stage.display_name == "MacroPre"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. MacroPost
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestMacroPost:
    def setup_method(self):
        self.reg = FilterRegistry()
        self.stage = MacroPost(registry=self.reg)

    def test_empty_stage_is_noop(self):
        assert self.stage.filtertext("text") == "text"

    def test_runs_only_post_macros(self):
        self.reg.register(Alpha())
        self.reg.register(Omega())
        assert self.stage.filtertext("x") == "xZ"

    def test_expands_tags(self):
        self.reg.register(Upcase())
        result = self.stage.filtertext("<p><publify:upcase>loud</publify:upcase></p>")
        assert result == "<p>LOUD</p>"

    def test_stage_metadata(self):
        assert self.stage.short_name == "macropost"
        assert self.stage.description == "Macro expansion meta-filter (post-markup)"

    def test_stage_registered_alongside_macros(self):
        self.reg.register(self.stage)
        self.reg.register(Omega())
        assert self.reg.lookup("macropost") is self.stage
        assert self.stage.filtertext("x") == "xZ"

    def test_default_registry(self):
        from textfilter.services.filters import filter_registry
        assert MacroPost()._registry is filter_registry

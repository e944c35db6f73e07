"""
Post-process filters
--------------------
sanitize       — allow-list clean of the rendered HTML
externallinks  — mark links that leave the site (target, rel, CSS class)
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ...schemas import FilterParams
from .base import PostProcessFilter
from .registry import FilterRegistry


class Sanitize(PostProcessFilter):
    display_name = "Sanitize"
    description = "Strip markup that is not on the HTML allow-list"

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        return self.sanitize(text)


class ExternalLinks(PostProcessFilter):
    display_name = "External links"
    description = "Open off-site links in a new window with rel=noopener"

    def default_config(self):
        return {
            "target": {"default": "_blank", "description": "Link target for external links"},
            "rel": {"default": "noopener noreferrer", "description": "rel attribute value"},
            "site_host": {"default": "", "description": "Host treated as internal"},
        }

    def filtertext(self, text: str, params: Optional[FilterParams] = None) -> str:
        if "<a" not in text:
            return text

        target = self.config_value(params, "target")
        rel = self.config_value(params, "rel")
        site_host = str(self.config_value(params, "site_host")).lower()

        soup = BeautifulSoup(text, "html.parser")
        for link in soup.find_all("a", href=True):
            url = urlparse(link["href"])
            if url.scheme not in ("http", "https"):
                continue
            if site_host and url.hostname and url.hostname.lower() == site_host:
                continue

            link["target"] = target
            link["rel"] = rel
            classes = link.get("class", [])
            if "external-link" not in classes:
                link["class"] = [*classes, "external-link"]

        return str(soup)


def register(registry: FilterRegistry) -> None:
    registry.register(Sanitize())
    registry.register(ExternalLinks())

"""Internal link density."""

from __future__ import annotations

from typing import Any

from site_checker.extractors.base import PageExtractor
from site_checker.links import count_internal_links


class InternalLinkExtractor(PageExtractor):
    name = "links"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        return {"internal_links": count_internal_links(html, page_url)}

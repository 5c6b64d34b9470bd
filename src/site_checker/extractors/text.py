"""Plain-text content and its length."""

from __future__ import annotations

from typing import Any

from site_checker.cleaner import extract_text_content
from site_checker.extractors.base import PageExtractor


class TextExtractor(PageExtractor):
    name = "text"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        text = extract_text_content(html)
        return {
            "text_content": text[: self.settings.text_excerpt_chars],
            "content_length": len(text),
        }

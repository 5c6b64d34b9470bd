"""Heading counts and heading texts."""

from __future__ import annotations

import re
from typing import Any

from site_checker.cleaner import strip_tags
from site_checker.extractors.base import PageExtractor
from site_checker.models import HeadingStructure, HeadingText

MAX_HEADINGS = 30
MAX_HEADING_CHARS = 150

_HEADING_RE = re.compile(r"<(h[1-3])[^>]*>([\s\S]*?)</\1>", re.IGNORECASE)


def count_headings(html: str) -> HeadingStructure:
    """Count opening h1/h2/h3 tags."""
    return HeadingStructure(
        h1=len(re.findall(r"<h1", html, re.IGNORECASE)),
        h2=len(re.findall(r"<h2", html, re.IGNORECASE)),
        h3=len(re.findall(r"<h3", html, re.IGNORECASE)),
    )


def extract_headings_text(html: str) -> list[HeadingText]:
    headings: list[HeadingText] = []
    for match in _HEADING_RE.finditer(html):
        text = strip_tags(match.group(2))
        if text:
            headings.append(
                HeadingText(level=match.group(1).lower(), text=text[:MAX_HEADING_CHARS])
            )
    return headings[:MAX_HEADINGS]


class HeadingExtractor(PageExtractor):
    name = "headings"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        return {
            "heading_structure": count_headings(html),
            "headings_text": extract_headings_text(html),
        }

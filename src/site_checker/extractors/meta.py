"""Title, meta description, viewport and canonical signals."""

from __future__ import annotations

import re
from typing import Any

from site_checker.extractors.base import PageExtractor

_VIEWPORT_RE = re.compile(r"""meta[^>]*name=["']viewport["']""", re.IGNORECASE)
_CANONICAL_RE = re.compile(r"""link[^>]*rel=["']canonical["']""", re.IGNORECASE)


def extract_tag(html: str, tag: str) -> str:
    """Text of the first ``<tag>`` element, or an empty string."""
    match = re.search(rf"<{tag}[^>]*>([^<]*)</{tag}>", html, re.IGNORECASE)
    return match.group(1).strip() if match else ""


def extract_meta_content(html: str, name: str) -> str:
    """Content of ``<meta name=...>`` with either attribute order."""
    name = re.escape(name)
    match = re.search(
        rf"""<meta[^>]*name=["']{name}["'][^>]*content=["']([^"']*)["']""",
        html,
        re.IGNORECASE,
    ) or re.search(
        rf"""<meta[^>]*content=["']([^"']*)["'][^>]*name=["']{name}["']""",
        html,
        re.IGNORECASE,
    )
    return match.group(1).strip() if match else ""


def has_viewport(html: str) -> bool:
    return bool(_VIEWPORT_RE.search(html))


def has_canonical(html: str) -> bool:
    return bool(_CANONICAL_RE.search(html))


class MetaExtractor(PageExtractor):
    name = "meta"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        return {
            "title": extract_tag(html, "title"),
            "meta_description": extract_meta_content(html, "description"),
            "has_viewport": has_viewport(html),
            "has_canonical": has_canonical(html),
        }

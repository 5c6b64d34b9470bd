"""Script, stylesheet and image counts plus alt-text coverage."""

from __future__ import annotations

import re
from typing import Any

from site_checker.extractors.base import PageExtractor

_IMG_RE = re.compile(r"<img[^>]*>", re.IGNORECASE)
_ALT_RE = re.compile(r"""alt=["'][^"']+["']""", re.IGNORECASE)


def alt_text_ratio(html: str) -> float:
    """Share of ``<img>`` tags with a non-empty alt; 1.0 without images."""
    images = _IMG_RE.findall(html)
    if not images:
        return 1.0
    with_alt = sum(1 for img in images if _ALT_RE.search(img))
    return with_alt / len(images)


class AssetExtractor(PageExtractor):
    name = "assets"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        return {
            "script_count": len(re.findall(r"<script", html, re.IGNORECASE)),
            "stylesheet_count": len(re.findall(r"<link[^>]*stylesheet", html, re.IGNORECASE)),
            "image_count": len(re.findall(r"<img", html, re.IGNORECASE)),
            "alt_text_ratio": alt_text_ratio(html),
        }

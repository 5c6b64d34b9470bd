"""Content-signal flags (FAQ, address, price, ...) and copyright year.

Patterns are matched against the raw markup, attributes included, so a
``tel:`` link or an ``/about`` href counts as well as visible text.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from site_checker.extractors.base import PageExtractor

# Ordered (field, pattern); matched case-insensitively.
CONTENT_SIGNAL_PATTERNS: list[tuple[str, str]] = [
    ("has_faq", r"faq|よくある質問|Q&A|Q＆A"),
    ("has_address", r"〒|住所|所在地|address"),
    ("has_price", r"円|料金|価格|price"),
    ("has_phone", r"tel:|電話|TEL"),
    ("has_company_info", r"会社概要|代表|設立|about"),
    ("has_testimonials", r"お客様の声|実績|事例|voice|testimonial|case"),
    ("has_privacy_policy", r"プライバシー|個人情報|privacy"),
]

_COPYRIGHT_RE = re.compile(r"©\s*(\d{4})|copyright\s*(\d{4})", re.IGNORECASE)


def detect_content_signals(
    html: str,
    patterns: list[tuple[str, str]] = CONTENT_SIGNAL_PATTERNS,
) -> dict[str, bool]:
    return {
        field: re.search(pattern, html, re.IGNORECASE) is not None
        for field, pattern in patterns
    }


def extract_copyright_year(html: str) -> Optional[int]:
    match = _COPYRIGHT_RE.search(html)
    if not match:
        return None
    return int(match.group(1) or match.group(2))


class ContentSignalExtractor(PageExtractor):
    name = "content"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        fields: dict[str, Any] = detect_content_signals(html)
        fields["copyright_year"] = extract_copyright_year(html)
        return fields

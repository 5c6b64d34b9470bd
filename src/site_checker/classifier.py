"""First-match page classification over URL path and leading text."""

from __future__ import annotations

from typing import NamedTuple
from urllib.parse import urlparse

from site_checker.models import PageType

TEXT_WINDOW = 500


class ClassificationRule(NamedTuple):
    label: PageType
    url_keywords: tuple[str, ...]
    text_keywords: tuple[str, ...]


# Evaluated top to bottom; the first matching rule wins.
CLASSIFICATION_RULES: list[ClassificationRule] = [
    ClassificationRule("company", ("company", "about"), ("会社概要", "代表挨拶")),
    ClassificationRule("testimonials", ("voice", "testimonial", "case"), ("お客様の声", "導入事例")),
    ClassificationRule("faq", ("faq",), ("よくある質問", "q&a")),
    ClassificationRule("privacy", ("privacy",), ("プライバシー", "個人情報")),
    ClassificationRule("terms", ("terms",), ("利用規約",)),
    ClassificationRule("blog", ("blog", "news", "column"), ()),
    ClassificationRule("contact", ("contact",), ("お問い合わせ", "お問合せ")),
    ClassificationRule("pricing", ("price", "pricing", "plan"), ("料金", "プラン")),
    ClassificationRule("service", ("service",), ("サービス内容", "事業内容")),
]


def classify_page(
    url: str,
    title: str,
    text: str,
    rules: list[ClassificationRule] = CLASSIFICATION_RULES,
) -> PageType:
    """Assign exactly one category; falls back to ``"other"``."""
    path = urlparse(url).path.lower()
    haystack = f"{title} {text[:TEXT_WINDOW]}".lower()
    for rule in rules:
        if any(k in path for k in rule.url_keywords):
            return rule.label
        if any(k in haystack for k in rule.text_keywords):
            return rule.label
    return "other"

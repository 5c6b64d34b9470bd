"""Tests for site_checker.company module."""

from __future__ import annotations

import json

from site_checker.company import UNKNOWN_COMPANY, extract_company_name
from site_checker.models import CrawlResult


def _json_ld(*blocks: dict) -> str:
    return "".join(
        f'<script type="application/ld+json">{json.dumps(b, ensure_ascii=False)}</script>'
        for b in blocks
    )


def _crawl(**fields) -> CrawlResult:
    fields.setdefault("final_url", "https://www.acme.test/")
    return CrawlResult(success=True, **fields)


class TestJsonLd:
    def test_organization_name(self):
        html = _json_ld(
            {"@type": "WebSite", "name": "Acme Site"},
            {"@type": "Organization", "name": "Acme Holdings"},
        )
        assert extract_company_name(_crawl(html=html, title="Ignored | Title")) == "Acme Holdings"

    def test_type_list(self):
        html = _json_ld({"@type": ["Thing", "LocalBusiness"], "name": "Corner Shop"})
        assert extract_company_name(_crawl(html=html)) == "Corner Shop"

    def test_provider_name(self):
        html = _json_ld({"@type": "Service", "name": "Repairs", "provider": {"name": "Fixers LLC"}})
        assert extract_company_name(_crawl(html=html)) == "Fixers LLC"

    def test_author_name(self):
        html = _json_ld({"@type": "Article", "author": {"@type": "Person", "name": "Jane Doe"}})
        assert extract_company_name(_crawl(html=html)) == "Jane Doe"

    def test_any_short_name(self):
        html = _json_ld({"@type": "WebSite", "name": "Acme Site"})
        assert extract_company_name(_crawl(html=html)) == "Acme Site"

    def test_long_name_ignored(self):
        html = _json_ld({"@type": "WebSite", "name": "x" * 60})
        assert extract_company_name(_crawl(html=html, title="Fallback")) == "Fallback"

    def test_broken_block_ignored(self):
        html = '<script type="application/ld+json">{not json</script>'
        assert extract_company_name(_crawl(html=html, title="Fallback")) == "Fallback"


class TestTitle:
    def test_prefers_part_with_company_suffix(self):
        crawl = _crawl(title="株式会社サンプル | ホーム")
        assert extract_company_name(crawl) == "株式会社サンプル"

    def test_english_suffix(self):
        assert extract_company_name(_crawl(title="Home - Acme Inc")) == "Acme Inc"

    def test_last_part(self):
        assert extract_company_name(_crawl(title="Welcome ｜ Acme Widgets")) == "Acme Widgets"

    def test_unsplit_title_used_last(self):
        assert extract_company_name(_crawl(title="Acme")) == "Acme"


class TestTextAndHost:
    def test_company_phrase_in_text(self):
        crawl = _crawl(title="ようこそ", text_content="運営会社: 株式会社サンプル 東京都")
        assert extract_company_name(crawl) == "株式会社サンプル"

    def test_hostname(self):
        assert extract_company_name(_crawl()) == "www.acme.test"

    def test_unknown(self):
        assert extract_company_name(_crawl(final_url="")) == UNKNOWN_COMPANY

"""Tests for site_checker.models module."""

from __future__ import annotations

import pydantic
import pytest

from site_checker.models import CrawlResult, PageSignal, PageSummary, SiteProfile


class TestPageSignal:
    def test_defaults(self):
        page = PageSignal(url="https://example.com/")
        assert page.alt_text_ratio == 1.0
        assert page.copyright_year is None
        assert page.heading_structure.h1 == 0
        assert page.json_ld_types == []

    def test_is_frozen(self):
        page = PageSignal(url="https://example.com/")
        with pytest.raises(pydantic.ValidationError):
            page.title = "changed"

    def test_alt_text_ratio_bounds(self):
        with pytest.raises(pydantic.ValidationError):
            PageSignal(url="https://example.com/", alt_text_ratio=1.5)

    def test_html_excluded_from_dump(self):
        page = PageSignal(url="https://example.com/", html="<html></html>")
        assert "html" not in page.model_dump()
        assert page.html == "<html></html>"


class TestCrawlResult:
    def test_failed(self):
        result = CrawlResult.failed("nope")
        assert result.success is False
        assert result.error == "nope"
        assert result.site_profile is None
        assert result.page_statuses is None

    def test_dump_uses_camel_case_aliases(self):
        result = CrawlResult(
            success=True,
            final_url="https://example.com/",
            meta_description="desc",
            has_json_ld=True,
            json_ld_types=["Organization"],
            site_profile=SiteProfile(has_faq=True),
        )
        dumped = result.model_dump(by_alias=True)
        assert dumped["finalUrl"] == "https://example.com/"
        assert dumped["metaDescription"] == "desc"
        assert dumped["hasJsonLd"] is True
        assert dumped["jsonLdTypes"] == ["Organization"]
        assert dumped["headingStructure"] == {"h1": 0, "h2": 0, "h3": 0}
        assert dumped["siteProfile"]["hasFaq"] is True
        assert "html" not in dumped

    def test_populate_by_alias(self):
        result = CrawlResult.model_validate({"success": True, "finalUrl": "https://a.test/"})
        assert result.final_url == "https://a.test/"


class TestPageSummary:
    def test_type_alias(self):
        summary = PageSummary(url="https://example.com/faq", page_type="faq")
        assert summary.model_dump(by_alias=True)["type"] == "faq"

    def test_rejects_unknown_type(self):
        with pytest.raises(pydantic.ValidationError):
            PageSummary(url="https://example.com/", page_type="landing")

"""Aggregate classified pages into a SiteProfile and a CrawlResult."""

from __future__ import annotations

from typing import Optional

from site_checker.models import (
    ClassifiedPage,
    CrawlResult,
    PageStatus,
    PageSummary,
    PageType,
    SiteProfile,
)

SUMMARY_HEADINGS = 10
SUMMARY_TEXT_CHARS = 2_000


def _any(pages: list[ClassifiedPage], page_type: Optional[PageType], flag: Optional[str]) -> bool:
    """True if any page has the label or the explicit flag set."""
    for p in pages:
        if page_type is not None and p.page_type == page_type:
            return True
        if flag is not None and getattr(p.page, flag):
            return True
    return False


def build_site_profile(pages: list[ClassifiedPage]) -> SiteProfile:
    with_images = [p.page for p in pages if p.page.image_count > 0]
    if with_images:
        avg_alt_text = sum(p.alt_text_ratio for p in with_images) / len(with_images)
    else:
        avg_alt_text = 1.0

    return SiteProfile(
        has_testimonials=_any(pages, "testimonials", "has_testimonials"),
        has_faq=_any(pages, "faq", "has_faq"),
        has_company_info=_any(pages, "company", "has_company_info"),
        has_privacy_policy=_any(pages, "privacy", "has_privacy_policy"),
        has_pricing=_any(pages, "pricing", "has_price"),
        has_contact=_any(pages, "contact", None),
        has_blog=_any(pages, "blog", None),
        has_service=_any(pages, "service", None),
        has_address=_any(pages, None, "has_address"),
        has_phone=_any(pages, None, "has_phone"),
        total_content_length=sum(p.page.content_length for p in pages),
        total_images=sum(p.page.image_count for p in pages),
        avg_alt_text=avg_alt_text,
        blog_post_count=sum(1 for p in pages if p.page_type == "blog"),
        testimonial_page_count=sum(1 for p in pages if p.page_type == "testimonials"),
        page_types=list(dict.fromkeys(p.page_type for p in pages)),
    )


def summarize_page(page: ClassifiedPage) -> PageSummary:
    return PageSummary(
        url=page.page.url,
        page_type=page.page_type,
        title=page.page.title,
        content_length=page.page.content_length,
        headings_text=page.page.headings_text[:SUMMARY_HEADINGS],
        text_content=page.page.text_content[:SUMMARY_TEXT_CHARS],
    )


def build_crawl_result(
    pages: list[ClassifiedPage],
    page_statuses: Optional[list[PageStatus]] = None,
) -> CrawlResult:
    """Flatten the homepage (``pages[0]``) and attach the site-wide aggregate."""
    homepage = pages[0].page
    profile = build_site_profile(pages)
    json_ld_types = list(dict.fromkeys(t for p in pages for t in p.page.json_ld_types))

    return CrawlResult(
        success=True,
        final_url=homepage.url,
        title=homepage.title,
        meta_description=homepage.meta_description,
        is_https=homepage.is_https,
        has_viewport=homepage.has_viewport,
        heading_structure=homepage.heading_structure,
        has_canonical=homepage.has_canonical,
        internal_links=homepage.internal_links,
        page_size=homepage.page_size,
        copyright_year=homepage.copyright_year,
        content_length=homepage.content_length,
        script_count=homepage.script_count,
        stylesheet_count=homepage.stylesheet_count,
        image_count=homepage.image_count,
        alt_text_ratio=homepage.alt_text_ratio,
        text_content=homepage.text_content,
        headings_text=homepage.headings_text,
        html=homepage.html,
        has_json_ld=any(p.page.has_json_ld for p in pages),
        json_ld_types=json_ld_types,
        has_faq=profile.has_faq,
        has_address=profile.has_address,
        has_price=profile.has_pricing,
        has_phone=profile.has_phone,
        has_company_info=profile.has_company_info,
        total_pages=len(pages),
        pages=[summarize_page(p) for p in pages],
        site_profile=profile,
        page_statuses=page_statuses,
    )

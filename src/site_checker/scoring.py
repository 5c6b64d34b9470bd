"""Deterministic four-category site scoring.

Each category is worth 25 points and is built from independent sub-criteria
with hard thresholds; there is no interpolation between tiers. The total is
the plain sum of the category totals (0-100).
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from site_checker.models import CrawlResult, ScoreCategory, SiteProfile, SiteScore, SubScore

CATEGORY_MAX = 25


def _tier(value: float, tiers: list[tuple[float, int]], *, strict: bool) -> int:
    """Points of the first (threshold, points) tier the value clears."""
    for threshold, points in tiers:
        if (value > threshold) if strict else (value >= threshold):
            return points
    return 0


def _category(name: str, label: str, details: dict[str, SubScore]) -> ScoreCategory:
    return ScoreCategory(
        name=name,
        label=label,
        total=sum(d.score for d in details.values()),
        max_score=CATEGORY_MAX,
        details=details,
    )


def score_content(crawl: CrawlResult, sp: SiteProfile) -> ScoreCategory:
    service_clarity = 0
    if sp.has_service or crawl.has_price:
        service_clarity += 3
    if len(crawl.title) >= 10:
        service_clarity += 2
    if len(crawl.meta_description) >= 50:
        service_clarity += 2

    total_len = sp.total_content_length or crawl.content_length
    content_depth = _tier(
        total_len, [(20_000, 6), (10_000, 4), (5_000, 2), (2_000, 1)], strict=True
    )
    diversity = _tier(len(sp.page_types), [(6, 6), (4, 4), (3, 3), (2, 1)], strict=False)

    return _category("content", "Content depth", {
        "service_clarity": SubScore(score=service_clarity, max=7, label="Service description"),
        "content_depth": SubScore(score=content_depth, max=6, label="Content volume"),
        "diversity": SubScore(score=diversity, max=6, label="Page diversity"),
        "faq": SubScore(score=3 if sp.has_faq else 0, max=3, label="FAQ / Q&A"),
        "pricing": SubScore(score=3 if sp.has_pricing else 0, max=3, label="Pricing"),
    })


def score_trust(crawl: CrawlResult, sp: SiteProfile) -> ScoreCategory:
    testimonials = 0
    if sp.has_testimonials:
        testimonials += 5
        if sp.testimonial_page_count >= 2:
            testimonials += 3

    company = 0
    if sp.has_company_info:
        company += 3
        if sp.has_address:
            company += 2
        if sp.has_phone:
            company += 1

    fresh_content = 0
    if sp.has_blog:
        fresh_content += 2
        if sp.blog_post_count >= 3:
            fresh_content += 1

    return _category("trust", "Trust and track record", {
        "testimonials": SubScore(score=testimonials, max=8, label="Testimonials and case studies"),
        "company": SubScore(score=company, max=6, label="Company information"),
        "legal": SubScore(score=4 if sp.has_privacy_policy else 0, max=4, label="Privacy policy"),
        "contact": SubScore(score=4 if sp.has_contact else 0, max=4, label="Contact page"),
        "fresh_content": SubScore(score=fresh_content, max=3, label="Fresh content"),
    })


def score_machine_readability(crawl: CrawlResult, sp: SiteProfile) -> ScoreCategory:
    structured = 0
    if crawl.has_json_ld:
        structured += 3
        types = crawl.json_ld_types
        if "Organization" in types or "LocalBusiness" in types:
            structured += 2
        if "FAQPage" in types:
            structured += 2
        if "Service" in types or "Product" in types:
            structured += 1

    hs = crawl.heading_structure
    headings = 0
    if hs.h1 >= 1:
        headings += 2
    if hs.h2 >= 3:
        headings += 2
    elif hs.h2 >= 1:
        headings += 1
    if hs.h3 >= 2:
        headings += 1

    clarity = 0
    if sp.has_address:
        clarity += 2
    if sp.has_phone:
        clarity += 1
    if sp.has_pricing:
        clarity += 2

    linking = _tier(crawl.internal_links, [(15, 4), (8, 3), (3, 1)], strict=False)

    meta = 0
    if crawl.has_canonical:
        meta += 2
    if len(crawl.meta_description) >= 30:
        meta += 1

    return _category("machine_readability", "Machine readability", {
        "structured": SubScore(score=structured, max=8, label="Structured data"),
        "headings": SubScore(score=headings, max=5, label="Heading structure"),
        "clarity": SubScore(score=clarity, max=5, label="Information clarity"),
        "linking": SubScore(score=linking, max=4, label="Internal links"),
        "meta": SubScore(score=meta, max=3, label="Meta information"),
    })


def score_technical(crawl: CrawlResult, sp: SiteProfile, current_year: int) -> ScoreCategory:
    speed = 0
    if crawl.page_size < 150_000:
        speed += 3
    elif crawl.page_size < 300_000:
        speed += 2
    elif crawl.page_size < 500_000:
        speed += 1
    if crawl.script_count <= 5:
        speed += 1
    if crawl.image_count <= 15:
        speed += 1

    if crawl.image_count == 0:
        accessibility = 3
    else:
        accessibility = _tier(crawl.alt_text_ratio, [(0.9, 5), (0.7, 3), (0.4, 2)], strict=False)

    freshness = 0
    if crawl.copyright_year:
        if crawl.copyright_year >= current_year:
            freshness += 3
        elif crawl.copyright_year >= current_year - 1:
            freshness += 2
        elif crawl.copyright_year >= current_year - 2:
            freshness += 1
    if sp.has_blog:
        freshness += 2

    return _category("technical", "Technical quality", {
        "security": SubScore(score=5 if crawl.is_https else 0, max=5, label="HTTPS"),
        "mobile": SubScore(score=5 if crawl.has_viewport else 0, max=5, label="Mobile viewport"),
        "speed": SubScore(score=speed, max=5, label="Page weight"),
        "accessibility": SubScore(score=accessibility, max=5, label="Image alt text"),
        "freshness": SubScore(score=freshness, max=5, label="Freshness"),
    })


def score_site(crawl: CrawlResult, current_year: Optional[int] = None) -> SiteScore:
    """Score a successful crawl. Same input and year always give the same score."""
    if not crawl.success or crawl.site_profile is None:
        raise ValueError("Cannot score an unsuccessful crawl")

    year = current_year or date.today().year
    sp = crawl.site_profile
    categories = [
        score_content(crawl, sp),
        score_trust(crawl, sp),
        score_machine_readability(crawl, sp),
        score_technical(crawl, sp, year),
    ]
    return SiteScore(
        total_score=sum(c.total for c in categories),
        categories={c.name: c for c in categories},
    )

"""Pydantic models for the crawl-classify-score pipeline.

Field names are snake_case in Python; ``model_dump(by_alias=True)`` produces
the camelCase keys expected by the narrative-generation step.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PageType = Literal[
    "company",
    "testimonials",
    "faq",
    "privacy",
    "terms",
    "blog",
    "contact",
    "pricing",
    "service",
    "other",
]


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class HeadingStructure(_Model):
    h1: int = 0
    h2: int = 0
    h3: int = 0


class HeadingText(_Model):
    level: str
    text: str


class PageSignal(_Model):
    """Signals extracted from one fetched page."""

    url: str
    html: str = Field(default="", exclude=True, repr=False)
    page_size: int = 0
    title: str = ""
    meta_description: str = ""
    has_viewport: bool = False
    has_json_ld: bool = False
    json_ld_types: list[str] = Field(default_factory=list)
    has_canonical: bool = False
    is_https: bool = False
    heading_structure: HeadingStructure = Field(default_factory=HeadingStructure)
    internal_links: int = 0
    has_faq: bool = False
    has_address: bool = False
    has_price: bool = False
    has_phone: bool = False
    has_company_info: bool = False
    has_testimonials: bool = False
    has_privacy_policy: bool = False
    script_count: int = 0
    stylesheet_count: int = 0
    image_count: int = 0
    alt_text_ratio: float = Field(default=1.0, ge=0.0, le=1.0)
    copyright_year: Optional[int] = None
    text_content: str = Field(default="", description="Plain text, truncated")
    content_length: int = Field(default=0, description="Length of the untruncated plain text")
    headings_text: list[HeadingText] = Field(default_factory=list)


class LinkCandidate(_Model):
    """A same-host link chosen by one of the prioritization strategies."""

    url: str
    weight: Optional[int] = None
    label: Optional[str] = None


class ClassifiedPage(_Model):
    page: PageSignal
    page_type: PageType


class PageSummary(_Model):
    url: str
    page_type: PageType = Field(alias="type")
    title: str = ""
    content_length: int = 0
    headings_text: list[HeadingText] = Field(default_factory=list)
    text_content: str = ""


class PageStatus(_Model):
    url: str
    label: str
    status: Literal["success", "failed"]


class SiteProfile(_Model):
    """Site-wide aggregate over every successfully fetched page."""

    has_testimonials: bool = False
    has_faq: bool = False
    has_company_info: bool = False
    has_privacy_policy: bool = False
    has_pricing: bool = False
    has_contact: bool = False
    has_blog: bool = False
    has_service: bool = False
    has_address: bool = False
    has_phone: bool = False
    total_content_length: int = 0
    total_images: int = 0
    avg_alt_text: float = 1.0
    blog_post_count: int = 0
    testimonial_page_count: int = 0
    page_types: list[PageType] = Field(default_factory=list)


class CrawlResult(_Model):
    """Final output of a crawl, handed to the narrative-generation step."""

    success: bool
    error: Optional[str] = None
    final_url: str = ""

    # Homepage fields, flattened
    title: str = ""
    meta_description: str = ""
    is_https: bool = False
    has_viewport: bool = False
    heading_structure: HeadingStructure = Field(default_factory=HeadingStructure)
    has_canonical: bool = False
    internal_links: int = 0
    page_size: int = 0
    copyright_year: Optional[int] = None
    content_length: int = 0
    script_count: int = 0
    stylesheet_count: int = 0
    image_count: int = 0
    alt_text_ratio: float = 1.0
    text_content: str = ""
    headings_text: list[HeadingText] = Field(default_factory=list)
    html: str = Field(default="", exclude=True, repr=False)

    # Site-wide signals
    has_json_ld: bool = False
    json_ld_types: list[str] = Field(default_factory=list)
    has_faq: bool = False
    has_address: bool = False
    has_price: bool = False
    has_phone: bool = False
    has_company_info: bool = False

    total_pages: int = 0
    pages: list[PageSummary] = Field(default_factory=list)
    site_profile: Optional[SiteProfile] = None
    page_statuses: Optional[list[PageStatus]] = None

    @classmethod
    def failed(cls, error: str) -> CrawlResult:
        return cls(success=False, error=error)


class SubScore(_Model):
    score: int
    max: int
    label: str


class ScoreCategory(_Model):
    name: str
    label: str
    total: int
    max_score: int = 25
    details: dict[str, SubScore] = Field(default_factory=dict)


class SiteScore(_Model):
    total_score: int
    max_score: int = 100
    categories: dict[str, ScoreCategory] = Field(default_factory=dict)

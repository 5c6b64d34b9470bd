"""SiteChecker - crawl a business website and score it for machine readability."""

__version__ = "0.1.0"

from site_checker.crawler import crawl, diagnose
from site_checker.models import CrawlResult, SiteProfile, SiteScore
from site_checker.retry import with_retry
from site_checker.scoring import score_site

__all__ = [
    "CrawlResult",
    "SiteProfile",
    "SiteScore",
    "crawl",
    "diagnose",
    "score_site",
    "with_retry",
]

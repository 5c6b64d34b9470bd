"""Crawl orchestration: homepage, link selection, concurrent subpages, scoring.

Pipeline:
  1. Normalize the input URL (https:// is assumed when no scheme is given)
  2. Fetch the homepage; this is the only failure that fails the crawl
  3. Extract internal links and select subpages (broad or targeted strategy)
  4. Fetch the selected subpages concurrently; each failure stays isolated
  5. Classify every fetched page, aggregate the site profile, score
"""

from __future__ import annotations

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from typing import Optional
from urllib.parse import urlparse

import httpx

from site_checker.classifier import classify_page
from site_checker.config import STRATEGIES, Settings
from site_checker.fetcher import build_client, fetch_page
from site_checker.links import (
    extract_internal_links,
    extract_nav_links,
    prioritize_pages,
    select_target_pages,
)
from site_checker.models import (
    ClassifiedPage,
    CrawlResult,
    LinkCandidate,
    PageSignal,
    PageStatus,
    SiteScore,
)
from site_checker.profile import build_crawl_result
from site_checker.scoring import score_site

logger = logging.getLogger(__name__)

LINE = "=" * 60

HOMEPAGE_LABEL = "homepage"

ERROR_EMPTY_URL = "Please enter a URL."
ERROR_INVALID_URL = "Invalid URL format. Example: https://example.com"
ERROR_UNREACHABLE = "Could not reach the site. Please check that the URL is correct."


class InvalidURLError(ValueError):
    """Raised when the input cannot be turned into an absolute http(s) URL."""


def _out(settings: Settings, msg: str = "") -> None:
    """Print a status message to stderr so it doesn't mix with JSON output."""
    if settings.show_progress:
        print(msg, file=sys.stderr, flush=True)


def _elapsed(t: float) -> str:
    """Format elapsed seconds as human-readable string."""
    secs = time.time() - t
    if secs < 60:
        return f"{secs:.1f}s"
    return f"{secs / 60:.1f}m"


def normalize_url(raw: str) -> str:
    url = (raw or "").strip()
    if not url:
        raise InvalidURLError(ERROR_EMPTY_URL)
    if not url.startswith("http"):
        url = "https://" + url
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise InvalidURLError(ERROR_INVALID_URL) from exc
    if parsed.scheme not in ("http", "https") or not hostname:
        raise InvalidURLError(ERROR_INVALID_URL)
    return url


def select_pages(homepage: PageSignal, strategy: str, settings: Settings) -> list[LinkCandidate]:
    """Choose which subpages to fetch from the homepage's links."""
    links = extract_internal_links(homepage.html, homepage.url)
    if strategy == "broad":
        return prioritize_pages(links)[: settings.broad_page_limit]
    nav_links = extract_nav_links(homepage.html, homepage.url)
    return select_target_pages(links, nav_links, limit=settings.targeted_page_limit)


def fetch_all(
    candidates: list[LinkCandidate],
    settings: Settings,
    client: httpx.Client,
) -> list[tuple[LinkCandidate, Optional[PageSignal]]]:
    """Fetch candidates concurrently; results are paired back in input order."""
    if not candidates:
        return []

    workers = max(1, min(settings.max_workers, len(candidates)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(fetch_page, c.url, settings, client) for c in candidates]
        results: list[tuple[LinkCandidate, Optional[PageSignal]]] = []
        for candidate, future in zip(candidates, futures):
            try:
                page = future.result()
            except Exception as exc:
                logger.warning("Subpage fetch crashed for %s: %s", candidate.url, exc)
                page = None
            results.append((candidate, page))
    return results


def crawl(
    start_url: str,
    strategy: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> CrawlResult:
    """
    Crawl a site's homepage plus a bounded set of subpages.

    Args:
        start_url: User input, possibly missing its scheme.
        strategy: "broad" (top 9 by keyword weight) or "targeted" (4 by bucket,
            with per-page statuses). Defaults to settings.strategy.
        client: Optional httpx client; one is created (and closed) otherwise.

    Returns:
        CrawlResult; ``success`` is False only for bad input or an
        unreachable homepage.
    """
    if settings is None:
        settings = Settings.from_env()
    strategy = strategy or settings.strategy
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'. Available: {', '.join(STRATEGIES)}")

    try:
        url = normalize_url(start_url)
    except InvalidURLError as exc:
        logger.info("Rejected input URL %r: %s", start_url, exc)
        return CrawlResult.failed(str(exc))

    crawl_start = time.time()
    _out(settings, f"\n{LINE}")
    _out(settings, "  SiteChecker")
    _out(settings, LINE)
    _out(settings, f"  URL:      {url}")
    _out(settings, f"  Strategy: {strategy}")
    _out(settings, LINE)

    with nullcontext(client) if client is not None else build_client(settings) as http:
        homepage = fetch_page(url, settings, http)
        if homepage is None:
            _out(settings, "  [!] Homepage unreachable")
            return CrawlResult.failed(ERROR_UNREACHABLE)
        _out(settings, f"[1] {homepage.url}")

        selected = select_pages(homepage, strategy, settings)
        _out(settings, f"  Selected {len(selected)} subpages")
        fetched = fetch_all(selected, settings, http)

    pages = [homepage]
    page_statuses = None
    if strategy == "targeted":
        page_statuses = [PageStatus(url=homepage.url, label=HOMEPAGE_LABEL, status="success")]

    for i, (candidate, page) in enumerate(fetched, start=2):
        status = "success" if page is not None else "failed"
        _out(settings, f"[{i}] {candidate.url} ({status})")
        if page is not None:
            pages.append(page)
        if page_statuses is not None:
            page_statuses.append(
                PageStatus(url=candidate.url, label=candidate.label or "", status=status)
            )

    classified = [
        ClassifiedPage(page=p, page_type=classify_page(p.url, p.title, p.text_content))
        for p in pages
    ]
    result = build_crawl_result(classified, page_statuses)

    _out(settings, LINE)
    _out(settings, f"  Pages fetched:  {len(pages)} / {len(selected) + 1}")
    _out(settings, f"  Page types:     {', '.join(result.site_profile.page_types)}")
    _out(settings, f"  Total time:     {_elapsed(crawl_start)}")
    _out(settings, LINE)

    logger.info(
        "Crawl complete for %s. Pages: %d/%d, types: %s",
        result.final_url, len(pages), len(selected) + 1, result.site_profile.page_types,
    )
    return result


def diagnose(
    start_url: str,
    strategy: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
    current_year: Optional[int] = None,
) -> tuple[CrawlResult, Optional[SiteScore]]:
    """Crawl, then score when the crawl succeeded."""
    result = crawl(start_url, strategy=strategy, settings=settings, client=client)
    if not result.success:
        return result, None
    return result, score_site(result, current_year=current_year)

"""Fetch one page and turn it into a PageSignal.

A failed fetch is represented by ``None``: network errors, timeouts,
non-2xx responses and non-HTML content types never raise past
``fetch_page``. There are no retries here; a failure is final for the URL
within one crawl.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from site_checker.config import Settings
from site_checker.extractors import get_extractors
from site_checker.models import PageSignal
from site_checker.static import StaticAssetTransport

logger = logging.getLogger(__name__)

ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class FetchError(Exception):
    """Raised when a page cannot be fetched or is not an HTML page."""


def build_headers(settings: Settings) -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": ACCEPT_HTML,
        "Accept-Language": settings.accept_language,
    }


def build_client(settings: Settings) -> httpx.Client:
    """HTTP client for network fetches. Callers own (and close) it."""
    return httpx.Client(
        headers=build_headers(settings),
        timeout=settings.fetch_timeout,
        follow_redirects=True,
    )


def is_self_host(url: str, settings: Settings) -> bool:
    host = (urlparse(url).hostname or "").lower()
    return bool(host) and host in settings.self_hosts


def _get(url: str, client: httpx.Client, *, check_content_type: bool) -> httpx.Response:
    try:
        response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc

    if not response.is_success:
        raise FetchError(f"Failed to fetch {url}: HTTP {response.status_code}")
    if check_content_type:
        content_type = response.headers.get("content-type", "")
        if "text/html" not in content_type:
            raise FetchError(f"Not an HTML page: {url} ({content_type or 'no content type'})")
    return response


def _fetch_response(
    url: str, settings: Settings, client: Optional[httpx.Client]
) -> tuple[httpx.Response, str]:
    """Return the response and the URL the page should be recorded under."""
    if is_self_host(url, settings) and settings.asset_dir:
        with httpx.Client(
            transport=StaticAssetTransport(settings.asset_dir),
            headers={"Accept": "text/html"},
        ) as asset_client:
            return _get(url, asset_client, check_content_type=False), url

    if client is not None:
        response = _get(url, client, check_content_type=True)
    else:
        with build_client(settings) as own_client:
            response = _get(url, own_client, check_content_type=True)
    return response, str(response.url)


def build_page_signal(html: str, url: str, page_size: int, settings: Settings) -> PageSignal:
    """Run every registered extractor over already-truncated markup."""
    fields: dict = {}
    for extractor in get_extractors(settings):
        fields.update(extractor.extract(html, url))
    return PageSignal(
        url=url,
        html=html,
        page_size=page_size,
        is_https=url.startswith("https://"),
        **fields,
    )


def fetch_page(
    url: str,
    settings: Settings,
    client: Optional[httpx.Client] = None,
) -> Optional[PageSignal]:
    """
    Fetch a URL and extract its signals.

    Args:
        url: Absolute URL to fetch.
        settings: Timeout, size ceiling, user agent and self-host config.
        client: Optional shared client (the crawler shares one across threads).

    Returns:
        PageSignal, or None if the page could not be fetched.
    """
    try:
        response, final_url = _fetch_response(url, settings, client)
        body = response.text
    except (FetchError, httpx.HTTPError, OSError, ValueError) as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        return None

    html = body[: settings.max_html_chars]
    logger.info("Fetched %d bytes from %s", len(response.content), final_url)
    return build_page_signal(html, final_url, len(response.content), settings)

"""Shared fixtures for SiteChecker tests."""

from __future__ import annotations

import httpx
import pytest

from site_checker.config import Settings
from site_checker.models import ClassifiedPage, HeadingStructure, PageSignal

DESCRIPTION = "Acme Widgets designs, builds and repairs widgets in Nara now"

HOMEPAGE_HTML = f"""\
<!DOCTYPE html>
<html>
<head>
    <title>Acme Widgets</title>
    <meta name="description" content="{DESCRIPTION}">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="canonical" href="https://example.com/">
    <link rel="stylesheet" href="/style.css">
    <script type="application/ld+json">
    {{"@context": "https://schema.org", "@type": "LocalBusiness", "name": "Acme Widgets Co."}}
    </script>
    <style>body {{ color: red; }}</style>
</head>
<body>
    <nav>
        <a href="/">Home</a>
        <a href="/about">About us</a>
        <a href="/service/">Services</a>
        <a href="/recruit">Careers</a>
        <a href="/contact">Contact</a>
    </nav>
    <h2>What we make</h2>
    <p>Hand-made widgets. 料金 starts at 5,000円.</p>
    <h2>よくある質問</h2>
    <p>Ask us anything.</p>
    <a href="/blog/">Blog</a>
    <a href="/brochure.pdf">Brochure</a>
    <a href="#top">Back to top</a>
    <a href="https://other.example.org/">Partner</a>
    <footer>© 2026 Acme Widgets</footer>
</body>
</html>
"""


@pytest.fixture()
def settings() -> Settings:
    """Default settings; nothing read from the environment."""
    return Settings()


@pytest.fixture()
def homepage_html() -> str:
    return HOMEPAGE_HTML


@pytest.fixture()
def make_page():
    """Factory for PageSignal objects with sensible defaults."""

    def _make(url: str = "https://example.com/", **fields) -> PageSignal:
        fields.setdefault("is_https", url.startswith("https://"))
        if isinstance(fields.get("heading_structure"), dict):
            fields["heading_structure"] = HeadingStructure(**fields["heading_structure"])
        return PageSignal(url=url, **fields)

    return _make


@pytest.fixture()
def make_classified(make_page):
    def _make(page_type: str, url: str = "https://example.com/", **fields) -> ClassifiedPage:
        return ClassifiedPage(page=make_page(url, **fields), page_type=page_type)

    return _make


@pytest.fixture()
def html_client():
    """Build an httpx.Client whose responses come from a {url: (status, body)} map."""

    def _make(routes: dict[str, tuple[int, str]], content_type: str = "text/html; charset=utf-8"):
        def handler(request: httpx.Request) -> httpx.Response:
            key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
            if key not in routes:
                return httpx.Response(404, headers={"content-type": content_type}, text="missing")
            status, body = routes[key]
            return httpx.Response(status, headers={"content-type": content_type}, text=body)

        return httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)

    return _make

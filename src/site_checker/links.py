"""Internal-link discovery and the two link prioritization strategies.

Broad ranking orders every candidate by a keyword weight table. Targeted
selection picks one link per named bucket and falls back to navigation links.
Both tables are plain ordered data so they can be swapped or tested alone.
"""

from __future__ import annotations

import re
from urllib.parse import unquote, urljoin, urlparse

from site_checker.models import LinkCandidate

# Ordered (keyword, weight). The first keyword found in the path decides.
PRIORITY_WEIGHTS: list[tuple[str, int]] = [
    ("company", 10),
    ("about", 10),
    ("voice", 10),
    ("testimonial", 10),
    ("case", 10),
    ("faq", 9),
    ("privacy", 8),
    ("terms", 8),
    ("service", 9),
    ("price", 9),
    ("pricing", 9),
    ("plan", 9),
    ("contact", 7),
    ("blog", 6),
    ("news", 6),
    ("column", 6),
    ("partner", 5),
    ("seminar", 5),
]
DEFAULT_WEIGHT = 3

# Ordered (label, patterns) for targeted selection.
TARGET_BUCKETS: list[tuple[str, tuple[str, ...]]] = [
    ("company profile", ("/about", "/company", "/corporate", "会社概要")),
    ("service introduction", ("/service", "/business", "/solution", "サービス")),
    ("FAQ", ("/faq", "/question", "よくある質問")),
    ("location/contact", ("/contact", "/access", "お問い合わせ")),
    ("recent content", ("/blog", "/news", "/column", "お知らせ")),
]
FALLBACK_LABEL = "other"

PAGE_EXTENSIONS = {"html", "htm", "php"}
NAV_SCAN_CHARS = 50_000

# Hrefs containing '#' anywhere never match, fragment-only ones included.
_HREF_RE = re.compile(r"""<a[^>]*href=["']([^"'#]*?)["']""", re.IGNORECASE)
_NAV_RE = re.compile(r"<nav[^>]*>([\s\S]*?)</nav>", re.IGNORECASE)
_HEADER_RE = re.compile(r"<header[^>]*>([\s\S]*?)</header>", re.IGNORECASE)


def _is_page_path(path: str) -> bool:
    """True when the last path segment has no extension or a page one."""
    segment = path.rsplit("/", 1)[-1]
    if "." not in segment:
        return True
    return segment.rsplit(".", 1)[-1].lower() in PAGE_EXTENSIONS


def _collect_links(html: str, base_url: str, *, skip_root: bool = False) -> list[str]:
    base = urlparse(base_url)
    base_path = base.path or "/"
    links: dict[str, None] = {}
    for href in _HREF_RE.findall(html):
        try:
            link = urlparse(urljoin(base_url, href))
            hostname = link.hostname
        except ValueError:
            continue
        path = link.path or "/"
        if hostname != base.hostname or path == base_path:
            continue
        if skip_root and path == "/":
            continue
        if not _is_page_path(path):
            continue
        links.setdefault(f"{link.scheme}://{link.netloc}{path}", None)
    return list(links)


def extract_internal_links(html: str, base_url: str) -> list[str]:
    """Distinct same-host page URLs in discovery order, query strings dropped."""
    return _collect_links(html, base_url)


def extract_nav_links(html: str, base_url: str) -> list[str]:
    """Internal links from the first <nav> (else <header>) block, in document order."""
    match = _NAV_RE.search(html) or _HEADER_RE.search(html)
    search_html = match.group(1) if match else html[:NAV_SCAN_CHARS]
    return _collect_links(search_html, base_url, skip_root=True)


def count_internal_links(html: str, base_url: str) -> int:
    """Count anchors whose href resolves to the page's own host.

    An href that cannot be parsed counts as internal.
    """
    base_host = urlparse(base_url).hostname
    internal = 0
    for href in _HREF_RE.findall(html):
        if not href:
            continue
        try:
            hostname = urlparse(urljoin(base_url, href)).hostname
        except ValueError:
            internal += 1
            continue
        if hostname == base_host:
            internal += 1
    return internal


def link_weight(url: str, weights: list[tuple[str, int]] = PRIORITY_WEIGHTS) -> int:
    path = urlparse(url).path.lower()
    for keyword, weight in weights:
        if keyword in path:
            return weight
    return DEFAULT_WEIGHT


def prioritize_pages(
    links: list[str],
    weights: list[tuple[str, int]] = PRIORITY_WEIGHTS,
) -> list[LinkCandidate]:
    """Rank links by weight, highest first. Ties keep discovery order."""
    candidates = [LinkCandidate(url=url, weight=link_weight(url, weights)) for url in links]
    return sorted(candidates, key=lambda c: c.weight, reverse=True)


def select_target_pages(
    links: list[str],
    nav_links: list[str],
    limit: int = 4,
    buckets: list[tuple[str, tuple[str, ...]]] = TARGET_BUCKETS,
) -> list[LinkCandidate]:
    """Pick the first unused matching link per bucket, then fill from nav links."""
    selected: list[LinkCandidate] = []
    used: set[str] = set()

    for label, patterns in buckets:
        if len(selected) >= limit:
            break
        for link in links:
            if link in used:
                continue
            haystack = unquote(link).lower()
            if any(p in haystack for p in patterns):
                selected.append(LinkCandidate(url=link, label=label))
                used.add(link)
                break

    for link in nav_links:
        if len(selected) >= limit:
            break
        if link in used:
            continue
        selected.append(LinkCandidate(url=link, label=FALLBACK_LABEL))
        used.add(link)

    return selected

"""Best-effort company name for a crawled site.

Looks at JSON-LD first, then the homepage title, then the body text,
and finally falls back to the hostname.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from site_checker.extractors.structured import entity_types, iter_json_ld_blocks
from site_checker.models import CrawlResult

MAX_NAME_CHARS = 50
UNKNOWN_COMPANY = "Unknown company"

COMPANY_SUFFIXES = ("株式会社", "（株）", "(株)", "有限会社", "合同会社", "Inc", "Corp", "Co.", "LLC")

_TITLE_SPLIT_RE = re.compile(r"[|｜\-－—]")
_KABUSHIKI_RE = re.compile(r"([\u3000-\u9fff\w]+株式会社|株式会社[\u3000-\u9fff\w]+)")


def _is_organization(entity: dict) -> bool:
    types = entity_types(entity)
    return "Corporation" in types or any(
        "Organization" in t or "LocalBusiness" in t for t in types
    )


def _nested_name(entity: dict, key: str) -> str | None:
    value = entity.get(key)
    if isinstance(value, dict) and isinstance(value.get("name"), str) and value["name"]:
        return value["name"]
    return None


def _name_from_json_ld(html: str) -> str | None:
    blocks = [b for b in iter_json_ld_blocks(html) if isinstance(b, dict)]
    for ld in blocks:
        name = ld.get("name")
        if _is_organization(ld) and isinstance(name, str) and name:
            return name
        nested = _nested_name(ld, "provider") or _nested_name(ld, "author")
        if nested:
            return nested
    for ld in blocks:
        name = ld.get("name")
        if isinstance(name, str) and name and len(name) < MAX_NAME_CHARS:
            return name
    return None


def _name_from_title(title: str) -> str | None:
    parts = _TITLE_SPLIT_RE.split(title)
    if len(parts) <= 1:
        return None
    for part in parts:
        trimmed = part.strip()
        if any(s in trimmed for s in COMPANY_SUFFIXES) and 1 < len(trimmed) < MAX_NAME_CHARS:
            return trimmed
    candidate = parts[-1].strip()
    if 1 < len(candidate) < MAX_NAME_CHARS:
        return candidate
    return None


def extract_company_name(crawl: CrawlResult) -> str:
    if crawl.html:
        name = _name_from_json_ld(crawl.html)
        if name:
            return name

    name = _name_from_title(crawl.title)
    if name:
        return name

    if crawl.text_content:
        match = _KABUSHIKI_RE.search(crawl.text_content)
        if match:
            return match.group(1)

    if crawl.title:
        return crawl.title
    return urlparse(crawl.final_url).hostname or UNKNOWN_COMPANY

"""JSON-LD structured data signals."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator
from typing import Any

from site_checker.extractors.base import PageExtractor

logger = logging.getLogger(__name__)

_JSON_LD_TAG_RE = re.compile(
    r"""<script[^>]*type=["']application/ld\+json["']""", re.IGNORECASE
)
_JSON_LD_BLOCK_RE = re.compile(
    r"""<script[^>]*type=["']application/ld\+json["'][^>]*>([\s\S]*?)</script>""",
    re.IGNORECASE,
)


def has_json_ld(html: str) -> bool:
    """True when any JSON-LD script tag is present, parsable or not."""
    return bool(_JSON_LD_TAG_RE.search(html))


def iter_json_ld_blocks(html: str) -> Iterator[Any]:
    """Yield each parsable JSON-LD block. Broken blocks are skipped."""
    for match in _JSON_LD_BLOCK_RE.finditer(html):
        try:
            yield json.loads(match.group(1))
        except (json.JSONDecodeError, RecursionError) as exc:
            logger.debug("Skipping unparsable JSON-LD block: %s", exc)


def _iter_entities(data: Any) -> Iterator[dict]:
    if isinstance(data, list):
        for item in data:
            yield from _iter_entities(item)
    elif isinstance(data, dict):
        yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            yield from _iter_entities(graph)


def entity_types(entity: dict) -> list[str]:
    """``@type`` of one JSON-LD object as a list of names."""
    value = entity.get("@type")
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [v for v in value if isinstance(v, str)]
    return []


def extract_json_ld_types(html: str) -> list[str]:
    types: list[str] = []
    for block in iter_json_ld_blocks(html):
        for entity in _iter_entities(block):
            types.extend(entity_types(entity))
    return types


class StructuredDataExtractor(PageExtractor):
    name = "structured"

    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        return {
            "has_json_ld": has_json_ld(html),
            "json_ld_types": extract_json_ld_types(html),
        }

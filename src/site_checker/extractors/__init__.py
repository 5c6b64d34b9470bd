"""Extractor registry and factory with lazy imports."""

from __future__ import annotations

import importlib

from site_checker.config import Settings
from site_checker.extractors.base import PageExtractor

_EXTRACTOR_REGISTRY: dict[str, str] = {
    "meta": "site_checker.extractors.meta.MetaExtractor",
    "structured": "site_checker.extractors.structured.StructuredDataExtractor",
    "headings": "site_checker.extractors.headings.HeadingExtractor",
    "links": "site_checker.extractors.links.InternalLinkExtractor",
    "content": "site_checker.extractors.content.ContentSignalExtractor",
    "assets": "site_checker.extractors.assets.AssetExtractor",
    "text": "site_checker.extractors.text.TextExtractor",
}


def get_extractor(name: str, settings: Settings) -> PageExtractor:
    """Instantiate an extractor by name. Uses lazy imports."""
    if name not in _EXTRACTOR_REGISTRY:
        available = ", ".join(sorted(_EXTRACTOR_REGISTRY))
        raise ValueError(f"Unknown extractor '{name}'. Available: {available}")

    module_path, class_name = _EXTRACTOR_REGISTRY[name].rsplit(".", 1)
    module = importlib.import_module(module_path)
    extractor_class = getattr(module, class_name)
    return extractor_class(settings)


def get_extractors(settings: Settings) -> list[PageExtractor]:
    """All registered extractors, in registration order."""
    return [get_extractor(name, settings) for name in _EXTRACTOR_REGISTRY]


def list_extractors() -> list[str]:
    return sorted(_EXTRACTOR_REGISTRY)

"""Abstract base class for page signal extractors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from site_checker.config import Settings


class PageExtractor(ABC):
    """Contract for one group of signals pulled from raw page markup.

    Implementations work on text patterns only. Swapping one for a real
    tokenizer must not change the field names it returns.
    """

    name: str

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @abstractmethod
    def extract(self, html: str, page_url: str) -> dict[str, Any]:
        """
        Extract this extractor's fields from a page.

        Args:
            html: Raw markup, already truncated to the configured ceiling.
            page_url: Final URL of the page (base for link resolution).

        Returns:
            Mapping of PageSignal field name to value.
        """
        ...

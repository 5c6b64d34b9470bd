"""Regex-based markup reduction to plain text.

No DOM is built: script and style bodies are dropped, every remaining tag
becomes a space, and whitespace is collapsed.
"""

from __future__ import annotations

import re

_SCRIPT_RE = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def strip_tags(fragment: str) -> str:
    """Remove tags from a small markup fragment without adding spaces."""
    return _TAG_RE.sub("", fragment).strip()


def extract_text_content(html: str) -> str:
    """Strip script/style bodies and tags, then collapse whitespace."""
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    text = _WS_RE.sub(" ", text)
    return text.strip()

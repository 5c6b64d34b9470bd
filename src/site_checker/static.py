"""httpx transport that serves our own site from a local asset directory.

Used in place of the network when the crawled host is one of
``Settings.self_hosts``, so checking our own site never loops back through
the public internet.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from urllib.parse import unquote

import httpx

logger = logging.getLogger(__name__)


class StaticAssetTransport(httpx.BaseTransport):
    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    def _candidates(self, url_path: str) -> list[Path]:
        rel = unquote(url_path).lstrip("/")
        if not rel or rel.endswith("/"):
            return [self._root / rel / "index.html"]
        path = self._root / rel
        if path.suffix:
            return [path]
        return [path, path.with_name(path.name + ".html"), path / "index.html"]

    def resolve(self, url_path: str) -> Path | None:
        """Map a URL path to a file under the root, or None."""
        for candidate in self._candidates(url_path):
            resolved = candidate.resolve()
            if not resolved.is_relative_to(self._root):
                logger.warning("Refusing asset path outside root: %s", url_path)
                return None
            if resolved.is_file():
                return resolved
        return None

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        path = self.resolve(request.url.path)
        if path is None:
            return httpx.Response(404, request=request)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        if content_type.startswith("text/"):
            content_type += "; charset=utf-8"
        return httpx.Response(
            200,
            headers={"content-type": content_type},
            content=path.read_bytes(),
            request=request,
        )

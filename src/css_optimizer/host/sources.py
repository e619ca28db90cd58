"""Locate stylesheet text on disk or over HTTP."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from urllib.parse import urlsplit

import httpx

logger = logging.getLogger(__name__)


def normalize_src(src: str, site_url: str) -> str:
    """Turn protocol- and root-relative *src* values into absolute URLs."""
    if src.startswith("//"):
        return "https:" + src
    if src.startswith("/"):
        return site_url.rstrip("/") + src
    return src


def base_location_of(src: str) -> str:
    """The directory part of *src*, used to resolve its relative url() references."""
    parts = urlsplit(src)
    if parts.scheme and parts.netloc:
        directory = posixpath.dirname(parts.path)
        return f"{parts.scheme}://{parts.netloc}{directory}".rstrip("/")
    return posixpath.dirname(src)


class SourceResolver:
    """Resolve a stylesheet src to its text.

    Local files are tried first: ``<document_root>/<url path>`` and then
    ``<search dir>/<basename>`` for each search directory. When none exists
    the src is fetched over HTTP.
    """

    def __init__(
        self,
        document_root: str | Path = ".",
        search_dirs: tuple[str | Path, ...] = (),
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._document_root = Path(document_root)
        self._search_dirs = tuple(Path(d) for d in search_dirs)
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def candidates(self, src: str) -> list[Path]:
        path = urlsplit(src).path.lstrip("/")
        if not path:
            return []
        found = [self._document_root / path]
        name = posixpath.basename(path)
        found.extend(d / name for d in self._search_dirs)
        return found

    def local_path(self, src: str) -> Path | None:
        for candidate in self.candidates(src):
            if candidate.is_file():
                return candidate
        return None

    def read_local(self, src: str) -> str | None:
        path = self.local_path(src)
        if path is None:
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("cannot read %s: %s", path, exc)
            return None

    def fetch_remote(self, url: str) -> str | None:
        """GET *url*; any failure or an empty body means "not found"."""
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            return None
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("fetching %s failed: %s", url, exc)
            return None
        if resp.status_code >= 300:
            logger.warning("fetching %s returned HTTP %d", url, resp.status_code)
            return None
        return resp.text or None

    def resolve(self, src: str) -> str | None:
        content = self.read_local(src)
        if not content:
            content = self.fetch_remote(src)
        return content or None

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

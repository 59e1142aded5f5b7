"""Disk-backed thumbnail cache keyed by content hash."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class ThumbnailCache:
    """Stores thumbnail JPEGs under two-character bucket directories."""

    def __init__(self, cache_dir: str | Path) -> None:
        self._cache_dir = Path(cache_dir)
        self._cache_dir.mkdir(parents=True, exist_ok=True)

    def cache_dir(self) -> Path:
        """The root directory of the cache."""
        return self._cache_dir

    def thumbnail_path(self, content_hash: str) -> Path:
        """Where a thumbnail for this hash is, or would be, stored."""
        subdir = content_hash[:2]
        return self._cache_dir / subdir / f"{content_hash}.jpg"

    def has_thumbnail(self, content_hash: str) -> bool:
        """Whether a thumbnail for this hash exists."""
        return self.thumbnail_path(content_hash).exists()

    def store(self, content_hash: str, data: bytes) -> Path:
        """Write thumbnail bytes and return the path written."""
        path = self.thumbnail_path(content_hash)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        log.debug("cached thumbnail %s", path)
        return path

    def load(self, content_hash: str) -> bytes | None:
        """Cached thumbnail bytes, or None when absent or unreadable."""
        try:
            return self.thumbnail_path(content_hash).read_bytes()
        except OSError:
            return None
"""Thumbnail generation and cached thumbnail loading."""

from __future__ import annotations

import hashlib
import io
import logging
import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from crema.thumbnail_cache import ThumbnailCache

log = logging.getLogger(__name__)

THUMBNAIL_LONGEST_EDGE = 512

RAW_EXTENSIONS = frozenset(
    {
        "cr2", "cr3", "crw", "nef", "nrw", "arw", "srf", "sr2", "raf", "rw2",
        "orf", "pef", "dng", "3fr", "ari", "bay", "cap", "dcr", "erf", "fff",
        "iiq", "k25", "kdc", "mef", "mos", "mrw", "raw", "rwl", "srw", "x3f",
    }
)


class ThumbnailError(Exception):
    """Raised when a thumbnail cannot be produced."""


def is_raw_extension(ext: str) -> bool:
    """Whether a file extension (without the dot) names a camera RAW format."""
    return ext.lower() in RAW_EXTENSIONS


def _fit_within(width: int, height: int, bound: int) -> tuple[int, int]:
    ratio = min(bound / width, bound / height)
    return max(1, round(width * ratio)), max(1, round(height * ratio))


def generate_thumbnail(image: Image.Image) -> bytes:
    """Scale an image to fit the thumbnail bounds and encode it as JPEG."""
    if image.width == 0 or image.height == 0:
        raise ThumbnailError("cannot make a thumbnail of an empty image")
    size = _fit_within(image.width, image.height, THUMBNAIL_LONGEST_EDGE)
    thumb = image.convert("RGB").resize(size, Image.Resampling.LANCZOS)
    out = io.BytesIO()
    try:
        thumb.save(out, format="JPEG")
    except OSError as err:
        raise ThumbnailError(f"encode thumbnail as JPEG: {err}") from err
    data = out.getvalue()
    log.debug("generated thumbnail of %d bytes", len(data))
    return data


def thumbnail_for_file(path: str | Path) -> bytes:
    """Decode an image file and build its thumbnail."""
    try:
        with Image.open(path) as img:
            img.load()
            return generate_thumbnail(img)
    except (OSError, UnidentifiedImageError) as err:
        raise ThumbnailError(f"load {path}: {err}") from err


def fast_thumbnail(path: str | Path) -> bytes:
    """Build a thumbnail for any supported file, decoding it fully."""
    path = Path(path)
    if is_raw_extension(path.suffix.lstrip(".")):
        log.debug("generating thumbnail via full RAW decode: %s", path)
    return thumbnail_for_file(path)


def thumbnail_cache_key(path: str | Path) -> str:
    """A hex key derived from the file's path and modification time."""
    hasher = hashlib.blake2b(digest_size=32)
    hasher.update(os.fsencode(str(path)))
    try:
        mtime_ns = os.stat(path).st_mtime_ns
    except OSError:
        mtime_ns = None
    if mtime_ns is not None:
        hasher.update(max(mtime_ns, 0).to_bytes(16, "little"))
    return hasher.hexdigest()


def load_thumbnail_bytes(path: str | Path, cache_dir: str | Path | None) -> bytes:
    """Thumbnail bytes for a file, served from and stored in the cache when given."""
    if cache_dir is not None:
        try:
            cache = ThumbnailCache(cache_dir)
        except OSError:
            cache = None
        if cache is not None:
            key = thumbnail_cache_key(path)
            cached = cache.load(key)
            if cached is not None:
                return cached
            data = fast_thumbnail(path)
            try:
                cache.store(key, data)
            except OSError as err:
                log.debug("could not cache thumbnail for %s: %s", path, err)
            return data
    return fast_thumbnail(path)